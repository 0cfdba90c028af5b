# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (SOAP Client)
# Description: WSDL-driven SOAP client.
# ============================================================================
"""SOAP Client.

Blocking client for a single WSDL-described service.

Components:
- EnvelopeCodec: Builds request envelopes, splits response envelopes
- FaultDetector: Speculative SOAP Fault detection
- BodyDecoder: Typed decoding of the response body
- ITransport / IWSDLProvider: HTTP and WSDL collaborators

Session state (method, params, last request, last Header/Body) is
overwritten by every call and guarded by a lock, so one client may be
shared, but calls on it are serialised. Each call also returns an
immutable CallResult that can be unmarshalled independently.
"""

import logging
import threading
from typing import Any, TypeVar
from urllib.parse import urlparse

from wsdlsoap.core.domain.exceptions import (
    EmptyResponseBody,
    EnvelopeEncodeError,
    HTTPStatusError,
    InvalidWSDL,
    MalformedResponse,
    RemoteFault,
)
from wsdlsoap.core.shared.logger import get_client_logger

from ....application.ports import ITransport, IWSDLProvider
from ....domain.entities import CallResult, Envelope, ServiceDefinition
from ....domain.value_objects import Params, serialize_params
from ..http import HttpxTransport
from ..wsdl import HttpWSDLProvider
from .body_decoder import BodyDecoder
from .envelope_codec import EnvelopeCodec
from .fault_detector import FaultDetector

logger = logging.getLogger(__name__)

T = TypeVar("T")

CONTENT_TYPE = "text/xml;charset=UTF-8"
ACCEPT = "text/xml"


def validate_wsdl_location(location: str) -> None:
    """Check that location is a usable http(s) or file URL.

    Raises:
        InvalidWSDL: If the URL is malformed or uses another scheme.
    """
    if not isinstance(location, str) or not location.strip():
        raise InvalidWSDL(str(location), "WSDL location is empty")

    try:
        parsed = urlparse(location)
    except ValueError as e:
        raise InvalidWSDL(location, f"WSDL location is not a valid URL: {e}", e) from e

    if parsed.scheme in ("http", "https"):
        if not parsed.netloc:
            raise InvalidWSDL(location, f"WSDL URL has no host: '{location}'")
    elif parsed.scheme == "file":
        if not parsed.path:
            raise InvalidWSDL(location, f"WSDL file URL has no path: '{location}'")
    else:
        raise InvalidWSDL(location, f"Unsupported WSDL URL scheme: '{parsed.scheme}'")


class SoapClient:
    """SOAP client bound to one service definition.

    Attributes:
        wsdl: WSDL location the client was built from.
        url: Operating namespace (target namespace without trailing '/').
        definitions: ServiceDefinition the endpoint is resolved from.
        header_name: Optional element wrapping header parameters.
        header_params: Default header parameters sent with every call.
    """

    def __init__(
        self,
        wsdl: str,
        definitions: ServiceDefinition,
        transport: ITransport,
        codec: EnvelopeCodec | None = None,
        fault_detector: FaultDetector | None = None,
        body_decoder: BodyDecoder | None = None,
        header_name: str | None = None,
        header_params: Params | None = None,
    ):
        """Initialize SOAP client.

        Args:
            wsdl: WSDL location.
            definitions: Parsed service definition.
            transport: HTTP transport.
            codec: Optional custom envelope codec.
            fault_detector: Optional custom fault detector.
            body_decoder: Optional custom body decoder.
            header_name: Optional element wrapping header parameters.
            header_params: Default header parameters.
        """
        self.wsdl = wsdl
        self.definitions = definitions
        self.url = definitions.namespace
        self.header_name = header_name
        self.header_params: Params = dict(header_params or {})

        self._transport = transport
        self._codec = codec or EnvelopeCodec()
        self._fault_detector = fault_detector or FaultDetector()
        self._body_decoder = body_decoder or BodyDecoder()
        self._log = get_client_logger(self.url)

        self._lock = threading.Lock()
        self.method = ""
        self.params: Params = {}
        self.status_code: int | None = None
        self._payload = b""
        self._envelope = Envelope()

    @classmethod
    def from_wsdl(
        cls,
        wsdl: str,
        provider: IWSDLProvider | None = None,
        transport: ITransport | None = None,
        **kwargs: Any,
    ) -> "SoapClient":
        """Build a client from a WSDL location.

        Args:
            wsdl: WSDL URL (http, https or file).
            provider: WSDL provider; defaults to HttpWSDLProvider.
            transport: HTTP transport; defaults to HttpxTransport.
            **kwargs: Passed to the constructor.

        Raises:
            InvalidWSDL: If the URL is malformed or the definitions cannot
                be obtained.
        """
        validate_wsdl_location(wsdl)

        transport = transport or HttpxTransport()

        # Only an HttpxTransport can also fetch the WSDL; otherwise a
        # temporary one is used and released once the definitions are read.
        wsdl_transport: HttpxTransport | None = None
        if provider is None:
            if isinstance(transport, HttpxTransport):
                provider = HttpWSDLProvider(transport)
            else:
                wsdl_transport = HttpxTransport()
                provider = HttpWSDLProvider(wsdl_transport)

        try:
            definitions = provider.get_definitions(wsdl)
        except Exception as e:
            logger.error(f"Failed to load WSDL {wsdl}: {e}")
            raise InvalidWSDL(wsdl, f"Cannot obtain WSDL definitions from '{wsdl}': {e}", e) from e
        finally:
            if wsdl_transport is not None:
                wsdl_transport.close()

        return cls(wsdl, definitions, transport, **kwargs)

    @property
    def header(self) -> bytes:
        """Raw Header region of the last response."""
        with self._lock:
            return self._envelope.header

    @property
    def body(self) -> bytes:
        """Raw Body region of the last response."""
        with self._lock:
            return self._envelope.body

    @property
    def last_request(self) -> bytes:
        with self._lock:
            return self._payload

    def get_last_request(self) -> bytes:
        """Return the most recently encoded request payload."""
        return self.last_request

    def call(self, method: str, params: Any = None, header: Any = None) -> CallResult:
        """Call method with params.

        Args:
            method: SOAP method name.
            params: Mapping, pydantic model or dataclass of parameters.
            header: Header parameters; defaults to ``header_params``.

        Returns:
            Immutable CallResult for this call.

        Raises:
            EnvelopeEncodeError: If the request cannot be encoded.
            NoEndpoint: If the definition has no usable address.
            TransportError: On network failure, or HTTPStatusError for a
                non-2xx answer that is not a SOAP envelope.
            MalformedResponse: If the response is not a SOAP envelope.
        """
        try:
            wire_params = serialize_params(params)
            header_params = serialize_params(header) if header is not None else dict(self.header_params)
        except TypeError as e:
            raise EnvelopeEncodeError(str(e)) from e

        with self._lock:
            self.method = method
            self.params = dict(wire_params)
            self.status_code = None
            self._envelope = Envelope()
            self._payload = b""
            self._payload = self._codec.encode(method, wire_params, header_params, self.header_name)

            endpoint = self.definitions.first_address()
            log = self._log.for_call(method, endpoint)
            log.debug("Sending SOAP request", request_size=len(self._payload))

            response = self._transport.send(endpoint, self._request_headers(method), self._payload)
            self.status_code = response.status_code

            try:
                envelope = self._codec.decode(response.content)
            except MalformedResponse as e:
                self._envelope = Envelope(
                    header=e.header,
                    body=e.body,
                    namespaces=e.namespaces,
                    encoding=e.encoding,
                )
                if not response.is_success:
                    log.error("Non-SOAP error response", status_code=response.status_code)
                    raise HTTPStatusError(endpoint, response.status_code, response.content) from e
                raise

            self._envelope = envelope
            log.debug(
                "Received SOAP response",
                status_code=response.status_code,
                body_size=len(envelope.body),
            )
            return CallResult(
                method=method,
                params=dict(wire_params),
                request=self._payload,
                envelope=envelope,
                status_code=response.status_code,
                unmarshaller=self._unmarshal_envelope,
            )

    def unmarshal(
        self,
        target: type[T],
        result: CallResult | None = None,
        element: str | None = None,
    ) -> T:
        """Decode the response body into target.

        Args:
            target: ``bytes``, ``str``, ``dict``, a pydantic model class or
                a dataclass type.
            result: Decode this call's body instead of the session's.
            element: Expected local name of the payload element.

        Returns:
            Decoded instance.

        Raises:
            EmptyResponseBody: If no body is available.
            RemoteFault: If the body carries a SOAP Fault.
            DecodeError: If the body does not fit target.
        """
        if result is not None:
            envelope = result.envelope
        else:
            with self._lock:
                envelope = self._envelope

        return self._unmarshal_envelope(envelope, target, element)

    def _unmarshal_envelope(self, envelope: Envelope, target: type[T], element: str | None = None) -> T:
        if not envelope.body.strip():
            raise EmptyResponseBody()

        fault = self._fault_detector.detect(envelope.body, envelope.namespaces, envelope.encoding)
        if fault is not None:
            self._log.warning("SOAP fault received", fault_code=fault.code, description=fault.description)
            raise RemoteFault(fault.code, fault.description, fault.detail)

        return self._body_decoder.decode(
            envelope.body,
            target,
            namespaces=envelope.namespaces,
            encoding=envelope.encoding,
            element=element,
        )

    def close(self) -> None:
        """Close the underlying transport."""
        self._transport.close()

    def __enter__(self) -> "SoapClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request_headers(self, method: str) -> dict[str, str]:
        return {
            "Content-Type": CONTENT_TYPE,
            "Accept": ACCEPT,
            "SOAPAction": f"{self.url}/{method}",
        }
