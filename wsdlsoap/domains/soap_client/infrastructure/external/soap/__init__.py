# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (SOAP Client)
# Description: SOAP client module.
# ============================================================================
"""SOAP Client Module.

Components:
- SoapClient: Orchestrates one call per invocation
- EnvelopeCodec: Builds and splits SOAP envelopes
- FaultDetector: Detects SOAP Faults in a response body
- BodyDecoder: Decodes a response body into a typed target

Usage:
    from wsdlsoap.domains.soap_client.infrastructure.external.soap import SoapClient

    client = SoapClient.from_wsdl("http://example.org/service?wsdl")
    client.call("GetUser", {"id": "42"})
    user = client.unmarshal(GetUserResponse)
"""

from .body_decoder import BodyDecoder
from .client import SoapClient, validate_wsdl_location
from .envelope_codec import (
    ENVELOPE_NAMESPACES,
    SOAP11_ENVELOPE_NS,
    SOAP12_ENVELOPE_NS,
    EnvelopeCodec,
)
from .fault_detector import FaultDetector

__all__ = [
    "SoapClient",
    "EnvelopeCodec",
    "FaultDetector",
    "BodyDecoder",
    "validate_wsdl_location",
    "ENVELOPE_NAMESPACES",
    "SOAP11_ENVELOPE_NS",
    "SOAP12_ENVELOPE_NS",
]
