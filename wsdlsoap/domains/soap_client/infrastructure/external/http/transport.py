# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (SOAP Client)
# Description: httpx-based HTTP transport.
# ============================================================================
"""HTTP Transport.

Blocking httpx transport implementing ITransport. Connection pooling
is left to httpx; TLS verification is on unless explicitly disabled.
"""

import logging

import httpx

from wsdlsoap.core.domain.exceptions import TransportError

from ....application.ports import ITransport, TransportResponse

logger = logging.getLogger(__name__)


class HttpxTransport(ITransport):
    """POSTs request payloads with httpx.Client."""

    def __init__(
        self,
        timeout: float = 30.0,
        verify_tls: bool = True,
        user_agent: str | None = None,
        http_transport: httpx.BaseTransport | None = None,
    ):
        """Initialize transport.

        Args:
            timeout: Request timeout in seconds.
            verify_tls: Verify certificates of HTTPS endpoints.
            user_agent: Optional User-Agent header.
            http_transport: Optional httpx transport (e.g. httpx.MockTransport).
        """
        self.timeout = timeout
        self.verify_tls = verify_tls
        self.user_agent = user_agent
        self._http_transport = http_transport
        self._client: httpx.Client | None = None

        if not verify_tls:
            logger.warning("TLS certificate verification is disabled for SOAP requests")

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            headers = {"User-Agent": self.user_agent} if self.user_agent else None
            self._client = httpx.Client(
                timeout=httpx.Timeout(self.timeout),
                verify=self.verify_tls,
                headers=headers,
                transport=self._http_transport,
            )
        return self._client

    def get(self, url: str) -> TransportResponse:
        """GET url. Used for WSDL retrieval.

        Raises:
            TransportError: On network failure.
        """
        return self._request("GET", url)

    def send(self, url: str, headers: dict[str, str], body: bytes) -> TransportResponse:
        """POST body to url.

        Raises:
            TransportError: On network failure. HTTP status codes are
                returned, not raised.
        """
        return self._request("POST", url, headers=headers, content=body)

    def _request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
    ) -> TransportResponse:
        client = self._get_client()
        try:
            response = client.request(method, url, headers=headers, content=content)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Request error calling {url}: {e}")
            raise TransportError(url, f"{method} {url} failed: {e}", e) from e

        logger.debug(f"{method} {url} -> HTTP {response.status_code} ({len(response.content)} bytes)")
        return TransportResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        """Close HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
            self._client = None
