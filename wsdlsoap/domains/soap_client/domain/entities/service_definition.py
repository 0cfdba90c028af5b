# ============================================================================
# SCOPE: DOMAIN LAYER (SOAP Client)
# Description: WSDL-derived service definition.
# ============================================================================
"""Service Definition.

The subset of a WSDL document the client needs: the target namespace
and the advertised services, ports and addresses, in document order.
"""

from dataclasses import dataclass, field

from wsdlsoap.core.domain.exceptions import NoEndpoint


@dataclass
class Port:
    """A WSDL port with its advertised addresses."""

    name: str
    binding: str = ""
    addresses: list[str] = field(default_factory=list)


@dataclass
class Service:
    """A WSDL service with its ports."""

    name: str
    ports: list[Port] = field(default_factory=list)


@dataclass
class ServiceDefinition:
    """Definitions produced by a WSDL provider."""

    target_namespace: str
    services: list[Service] = field(default_factory=list)

    @property
    def namespace(self) -> str:
        """Target namespace without a trailing path separator."""
        return self.target_namespace.removesuffix("/")

    def first_address(self) -> str:
        """Return the first address of the first port of the first service.

        Raises:
            NoEndpoint: If there is no service, port or address.
        """
        if not self.services:
            raise NoEndpoint("service definition advertises no services")

        service = self.services[0]
        if not service.ports:
            raise NoEndpoint(f"service '{service.name}' advertises no ports")

        port = service.ports[0]
        if not port.addresses:
            raise NoEndpoint(f"port '{port.name}' of service '{service.name}' advertises no address")

        return port.addresses[0]
