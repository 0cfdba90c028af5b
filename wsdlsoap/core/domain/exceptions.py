"""
SOAP Client Exceptions

These exceptions represent every failure a SOAP call can surface.
Each carries a machine-readable code and a details dict so callers can
log or translate them uniformly.
"""

from typing import Any


class SoapClientException(Exception):
    """
    Base exception for all SOAP client errors.

    Provides a standardized way to communicate call failures.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize SOAP client exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "NO_ENDPOINT")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging or API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvalidWSDL(SoapClientException):
    """
    Raised when the WSDL location is unparsable or its definitions
    cannot be retrieved or parsed. Fatal to client construction.
    """

    def __init__(self, location: str, message: str | None = None, original_error: Exception | None = None):
        self.location = location
        self.original_error = original_error
        details: dict[str, Any] = {"location": location}
        if original_error:
            details["original_error"] = str(original_error)
        super().__init__(message or f"Invalid WSDL location '{location}'", "INVALID_WSDL", details)


class WSDLRetrievalError(SoapClientException):
    """Raised by a WSDL provider when the document cannot be fetched or parsed."""

    def __init__(self, location: str, message: str, original_error: Exception | None = None):
        self.location = location
        self.original_error = original_error
        details: dict[str, Any] = {"location": location}
        if original_error:
            details["original_error"] = str(original_error)
        super().__init__(message, "WSDL_RETRIEVAL_ERROR", details)


class NoEndpoint(SoapClientException):
    """Raised when the service definition has no usable service, port or address."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"No endpoint available: {reason}", "NO_ENDPOINT", {"reason": reason})


class EnvelopeEncodeError(SoapClientException):
    """Raised when a request envelope cannot be built (e.g. invalid element name)."""

    def __init__(self, message: str, name: str | None = None):
        self.name = name
        details: dict[str, Any] = {}
        if name is not None:
            details["name"] = name
        super().__init__(message, "ENVELOPE_ENCODE_ERROR", details)


class TransportError(SoapClientException):
    """Raised on network-level failures (DNS, connect, TLS, write, read)."""

    def __init__(self, url: str, message: str, original_error: Exception | None = None):
        self.url = url
        self.original_error = original_error
        details: dict[str, Any] = {"url": url}
        if original_error:
            details["original_error"] = str(original_error)
        super().__init__(message, "TRANSPORT_ERROR", details)


class HTTPStatusError(TransportError):
    """
    Raised when the server answered with a non-2xx status and the
    response body is not a decodable SOAP envelope.
    """

    def __init__(self, url: str, status_code: int, content: bytes = b""):
        self.status_code = status_code
        self.content = content
        super().__init__(url, f"HTTP {status_code} from {url} without a SOAP envelope")
        self.code = "HTTP_STATUS_ERROR"
        self.details["status_code"] = status_code


class MalformedResponse(SoapClientException):
    """
    Raised when response bytes are not a valid SOAP envelope.

    Any Header/Body regions captured before the failure are kept on the
    exception, together with the namespaces in scope and the declared
    encoding, so the client can still record and inspect them.
    """

    def __init__(
        self,
        message: str,
        header: bytes = b"",
        body: bytes = b"",
        namespaces: dict[str, str] | None = None,
        encoding: str = "utf-8",
    ):
        self.header = header
        self.body = body
        self.namespaces = dict(namespaces or {})
        self.encoding = encoding
        super().__init__(message, "MALFORMED_RESPONSE", {"header_size": len(header), "body_size": len(body)})


class EmptyResponseBody(SoapClientException):
    """Raised when unmarshal is invoked and no body bytes are available."""

    def __init__(self, message: str = "Body is empty"):
        super().__init__(message, "EMPTY_RESPONSE_BODY")


class RemoteFault(SoapClientException):
    """
    Raised when the server reported a SOAP Fault.

    ``code`` is the error kind shared by every exception here
    ("REMOTE_FAULT"). The server's own fault code and description are
    kept verbatim in ``fault_code`` and ``description``.
    """

    def __init__(self, fault_code: str, description: str, detail: str = ""):
        self.fault_code = fault_code
        self.description = description
        self.detail = detail
        details: dict[str, Any] = {"fault_code": fault_code, "description": description}
        if detail:
            details["detail"] = detail
        super().__init__(f"[{fault_code}]: {description}", "REMOTE_FAULT", details)


class DecodeError(SoapClientException):
    """Raised when the body content is incompatible with the requested target type."""

    def __init__(self, target: Any, message: str, original_error: Exception | None = None):
        self.target = target
        self.original_error = original_error
        target_name = getattr(target, "__name__", repr(target))
        details: dict[str, Any] = {"target": target_name}
        if original_error:
            details["original_error"] = str(original_error)
        super().__init__(message, "DECODE_ERROR", details)
