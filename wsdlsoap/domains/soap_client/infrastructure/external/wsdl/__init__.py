"""WSDL retrieval for the SOAP client."""

from .provider import HttpWSDLProvider

__all__ = ["HttpWSDLProvider"]
