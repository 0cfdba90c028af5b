"""SOAP client domain layer: entities and value objects."""
