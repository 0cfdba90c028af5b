# ============================================================================
# SCOPE: DOMAIN LAYER (SOAP Client)
# Description: Envelope, fault and call result types.
# ============================================================================
"""Envelope Types.

Header and Body are raw inner-XML byte regions. The client knows the
Envelope/Header/Body framing only; payload schemas belong to the caller.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from wsdlsoap.core.domain.exceptions import DecodeError

T = TypeVar("T")


@dataclass(frozen=True)
class Envelope:
    """Decoded response envelope."""

    header: bytes = b""
    body: bytes = b""
    namespaces: dict[str, str] = field(default_factory=dict)
    encoding: str = "utf-8"


@dataclass(frozen=True)
class Fault:
    """SOAP Fault reported inside a response body."""

    code: str
    description: str = ""
    detail: str = ""


# (envelope, target, element) -> decoded instance
EnvelopeUnmarshaller = Callable[[Envelope, Any, str | None], Any]


@dataclass(frozen=True)
class CallResult:
    """Immutable snapshot of one SOAP call.

    Returned by every call so concurrent callers never have to read the
    client's shared session fields. ``unmarshaller`` is supplied by the
    client that made the call and applies the same fault detection and
    body decoding as the client's own ``unmarshal``.
    """

    method: str
    params: dict[str, str]
    request: bytes
    envelope: Envelope
    status_code: int
    unmarshaller: EnvelopeUnmarshaller | None = field(default=None, repr=False, compare=False)

    @property
    def header(self) -> bytes:
        return self.envelope.header

    @property
    def body(self) -> bytes:
        return self.envelope.body

    def unmarshal(self, target: type[T], element: str | None = None) -> T:
        """Decode this call's body into target.

        Raises:
            EmptyResponseBody: If the body is empty.
            RemoteFault: If the body carries a SOAP Fault.
            DecodeError: If the body does not fit target, or the result was
                built without an unmarshaller.
        """
        if self.unmarshaller is None:
            raise DecodeError(target, "CallResult has no unmarshaller attached")
        return self.unmarshaller(self.envelope, target, element)
