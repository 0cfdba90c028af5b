# ============================================================================
# SCOPE: APPLICATION LAYER (SOAP Client)
# Description: Ports (interfaces) for external collaborators.
# ============================================================================
"""SOAP Client Application Ports.

- ITransport: HTTP POST transport
- IWSDLProvider: WSDL retrieval and parsing
"""

from .transport_port import ITransport, TransportResponse
from .wsdl_port import IWSDLProvider

__all__ = [
    "ITransport",
    "IWSDLProvider",
    "TransportResponse",
]
