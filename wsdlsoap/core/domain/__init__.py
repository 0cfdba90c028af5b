"""
Domain Layer - Shared error types

This module exposes the exception hierarchy used by every SOAP component.
"""

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

__all__ = [
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
