"""SOAP client domain entities."""

from .envelope import CallResult, Envelope, Fault
from .service_definition import Port, Service, ServiceDefinition

__all__ = [
    "CallResult",
    "Envelope",
    "Fault",
    "Port",
    "Service",
    "ServiceDefinition",
]
