"""
wsdlsoap - WSDL-driven SOAP client.

Usage:
    from wsdlsoap import create_client

    client = create_client("http://example.org/service?wsdl")
    client.call("GetUser", {"id": "42"})
    user = client.unmarshal(GetUserResponse)
"""

from wsdlsoap.config import Settings, get_settings
from wsdlsoap.core.client_factory import ClientFactory, create_client
from wsdlsoap.core.domain.exceptions import (
    DecodeError,
    EmptyResponseBody,
    EnvelopeEncodeError,
    HTTPStatusError,
    InvalidWSDL,
    MalformedResponse,
    NoEndpoint,
    RemoteFault,
    SoapClientException,
    TransportError,
    WSDLRetrievalError,
)
from wsdlsoap.domains.soap_client.application.ports import ITransport, IWSDLProvider, TransportResponse
from wsdlsoap.domains.soap_client.domain.entities import (
    CallResult,
    Envelope,
    Fault,
    Port,
    Service,
    ServiceDefinition,
)
from wsdlsoap.domains.soap_client.domain.value_objects import Params, serialize_params
from wsdlsoap.domains.soap_client.infrastructure.external.http import HttpxTransport
from wsdlsoap.domains.soap_client.infrastructure.external.soap import (
    BodyDecoder,
    EnvelopeCodec,
    FaultDetector,
    SoapClient,
)
from wsdlsoap.domains.soap_client.infrastructure.external.wsdl import HttpWSDLProvider

__version__ = "0.1.0"

__all__ = [
    # Client
    "SoapClient",
    "create_client",
    "ClientFactory",
    # Components
    "EnvelopeCodec",
    "FaultDetector",
    "BodyDecoder",
    "HttpxTransport",
    "HttpWSDLProvider",
    # Types
    "CallResult",
    "Envelope",
    "Fault",
    "Params",
    "Port",
    "Service",
    "ServiceDefinition",
    "TransportResponse",
    "ITransport",
    "IWSDLProvider",
    "serialize_params",
    # Configuration
    "Settings",
    "get_settings",
    # Errors
    "SoapClientException",
    "InvalidWSDL",
    "WSDLRetrievalError",
    "NoEndpoint",
    "EnvelopeEncodeError",
    "TransportError",
    "HTTPStatusError",
    "MalformedResponse",
    "EmptyResponseBody",
    "RemoteFault",
    "DecodeError",
]
