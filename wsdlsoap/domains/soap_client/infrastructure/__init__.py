"""SOAP client infrastructure layer."""
