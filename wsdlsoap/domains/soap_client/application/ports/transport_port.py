# ============================================================================
# SCOPE: APPLICATION LAYER (SOAP Client)
# Description: HTTP transport port.
# ============================================================================
"""Transport Port.

Defines the "send bytes, receive bytes over HTTP POST" capability the
client depends on.
"""

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class TransportResponse:
    """Raw HTTP response handed back by a transport."""

    status_code: int
    content: bytes
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


@runtime_checkable
class ITransport(Protocol):
    """Interface for the HTTP transport.

    Implementations: HttpxTransport
    """

    def send(self, url: str, headers: dict[str, str], body: bytes) -> TransportResponse:
        """POST body to url with the given headers.

        Args:
            url: Destination address.
            headers: Request headers.
            body: Request payload.

        Returns:
            TransportResponse with status code and the fully read body.

        Raises:
            TransportError: On any network-level failure.
        """
        ...

    def close(self) -> None:
        """Release any pooled connections."""
        ...
