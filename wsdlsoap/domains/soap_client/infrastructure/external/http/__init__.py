"""HTTP transport for the SOAP client."""

from .transport import HttpxTransport

__all__ = ["HttpxTransport"]
