"""
Shared pytest fixtures for all tests.

Provides in-memory collaborators for the SOAP client: a recording
transport, a static WSDL provider and sample service definitions.
"""

from dataclasses import dataclass, field

import pytest

from wsdlsoap.core.domain.exceptions import WSDLRetrievalError
from wsdlsoap.domains.soap_client.application.ports import TransportResponse
from wsdlsoap.domains.soap_client.domain.entities import Port, Service, ServiceDefinition


SOAP11_NS = "http://schemas.xmlsoap.org/soap/envelope/"


def soap_response(body: str, header: str | None = None) -> bytes:
    """Build a SOAP 1.1 response envelope around body (and header)."""
    header_xml = f"<soap:Header>{header}</soap:Header>" if header is not None else ""
    return (
        f'<?xml version="1.0" encoding="utf-8"?>'
        f'<soap:Envelope xmlns:soap="{SOAP11_NS}">{header_xml}<soap:Body>{body}</soap:Body></soap:Envelope>'
    ).encode("utf-8")


@dataclass
class SentRequest:
    url: str
    headers: dict[str, str]
    body: bytes


@dataclass
class RecordingTransport:
    """Transport double that replays canned responses and records requests."""

    responses: list[TransportResponse] = field(default_factory=list)
    error: Exception | None = None
    sent: list[SentRequest] = field(default_factory=list)
    closed: bool = False

    def send(self, url: str, headers: dict[str, str], body: bytes) -> TransportResponse:
        self.sent.append(SentRequest(url, dict(headers), body))
        if self.error is not None:
            raise self.error
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]

    def close(self) -> None:
        self.closed = True


@dataclass
class StaticWSDLProvider:
    """WSDL provider double returning a fixed definition."""

    definitions: ServiceDefinition | None = None
    requested: list[str] = field(default_factory=list)

    def get_definitions(self, location: str) -> ServiceDefinition:
        self.requested.append(location)
        if self.definitions is None:
            raise WSDLRetrievalError(location, "WSDL not found")
        return self.definitions


# ============================================================================
# SERVICE DEFINITION FIXTURES
# ============================================================================


@pytest.fixture
def definitions() -> ServiceDefinition:
    """Definition with one service, one port and one address."""
    return ServiceDefinition(
        target_namespace="http://example.org/ns/",
        services=[
            Service(
                name="UserService",
                ports=[Port(name="UserPort", binding="tns:UserBinding", addresses=["http://example.org/endpoint"])],
            )
        ],
    )


@pytest.fixture
def provider(definitions: ServiceDefinition) -> StaticWSDLProvider:
    return StaticWSDLProvider(definitions)


@pytest.fixture
def transport() -> RecordingTransport:
    """Transport answering with an empty-bodied successful response by default."""
    return RecordingTransport(
        responses=[TransportResponse(status_code=200, content=soap_response("<GetUserResponse/>"))]
    )


@pytest.fixture
def make_response():
    """Factory building SOAP response envelopes."""
    return soap_response


@pytest.fixture
def make_provider():
    """Factory building static WSDL providers."""
    return StaticWSDLProvider


@pytest.fixture
def make_transport():
    """Factory building recording transports."""
    return RecordingTransport
