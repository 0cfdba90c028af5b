"""SOAP client application layer."""
