"""
Client factory for SOAP services.

Builds SoapClient instances from Settings. This is the only place where
environment-driven configuration reaches the client; the client classes
themselves take explicit arguments.
"""

import logging
from typing import Any

from wsdlsoap.config.settings import Settings, get_settings
from wsdlsoap.core.shared.logger import configure_logging
from wsdlsoap.domains.soap_client.infrastructure.external.http import HttpxTransport
from wsdlsoap.domains.soap_client.infrastructure.external.soap import EnvelopeCodec, SoapClient
from wsdlsoap.domains.soap_client.infrastructure.external.wsdl import HttpWSDLProvider

logger = logging.getLogger(__name__)


class ClientFactory:
    """
    Factory for creating configured SOAP clients.

    Each configuration step is handled by a dedicated method.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """
        Initialize client factory.

        Args:
            settings: Client settings (uses default if not provided)
        """
        self._settings = settings or get_settings()

    @property
    def settings(self) -> Settings:
        return self._settings

    def create_transport(self) -> HttpxTransport:
        """Create the HTTP transport from settings."""
        return HttpxTransport(
            timeout=self._settings.SOAP_TIMEOUT,
            verify_tls=self._settings.SOAP_VERIFY_TLS,
            user_agent=self._settings.SOAP_USER_AGENT,
        )

    def create_codec(self) -> EnvelopeCodec:
        """Create the envelope codec for the configured SOAP version."""
        return EnvelopeCodec.for_version(self._settings.SOAP_ENVELOPE_VERSION)

    def create_client(self, wsdl: str, transport: HttpxTransport | None = None, **kwargs: Any) -> SoapClient:
        """
        Create a SOAP client for the service described at wsdl.

        Args:
            wsdl: WSDL location
            transport: Optional transport overriding the configured one
            **kwargs: Passed to SoapClient (header_name, header_params, ...)

        Returns:
            Configured SoapClient

        Raises:
            InvalidWSDL: If the WSDL cannot be used
        """
        transport = transport or self.create_transport()
        kwargs.setdefault("codec", self.create_codec())
        client = SoapClient.from_wsdl(
            wsdl,
            provider=HttpWSDLProvider(transport),
            transport=transport,
            **kwargs,
        )
        logger.info(f"SOAP client created for {client.url} ({wsdl})")
        return client

    def configure_logging(self) -> logging.Logger:
        """Configure the package logger from settings."""
        return configure_logging(
            level=self._settings.LOG_LEVEL,
            format_type=self._settings.LOG_FORMAT,
            log_file=self._settings.LOG_FILE,
        )


def create_client(wsdl: str, settings: Settings | None = None, **kwargs: Any) -> SoapClient:
    """Create a SoapClient using settings (defaults to environment settings)."""
    return ClientFactory(settings).create_client(wsdl, **kwargs)
