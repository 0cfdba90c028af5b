# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (SOAP Client)
# Description: WSDL retrieval and parsing.
# ============================================================================
"""WSDL Provider.

Fetches a WSDL 1.1 document (http, https or file URL) and extracts the
target namespace plus services, ports and SOAP addresses in document
order. Types, messages and bindings are not interpreted.
"""

import logging
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname
from xml.etree import ElementTree

from wsdlsoap.core.domain.exceptions import TransportError, WSDLRetrievalError
from wsdlsoap.core.shared.xml_utils import local_tag

from ....application.ports import IWSDLProvider
from ....domain.entities import Port, Service, ServiceDefinition
from ..http import HttpxTransport

logger = logging.getLogger(__name__)

WSDL_SOAP11_NS = "http://schemas.xmlsoap.org/wsdl/soap/"
WSDL_SOAP12_NS = "http://schemas.xmlsoap.org/wsdl/soap12/"

SOAP_ADDRESS_NAMESPACES = (WSDL_SOAP11_NS, WSDL_SOAP12_NS)


class HttpWSDLProvider(IWSDLProvider):
    """Retrieves WSDL documents over HTTP(S) or from the local filesystem."""

    def __init__(self, transport: HttpxTransport | None = None):
        """Initialize provider.

        Args:
            transport: HTTP transport used for http(s) locations.
        """
        self._transport = transport or HttpxTransport()

    def get_definitions(self, location: str) -> ServiceDefinition:
        """Retrieve and parse the WSDL at location.

        Raises:
            WSDLRetrievalError: On network, file or parse failure.
        """
        document = self._fetch(location)
        definitions = self.parse(document, location)
        logger.info(
            f"Loaded WSDL {location}: namespace={definitions.target_namespace!r}, "
            f"services={len(definitions.services)}"
        )
        return definitions

    def _fetch(self, location: str) -> bytes:
        parsed = urlparse(location)

        if parsed.scheme == "file":
            path = Path(url2pathname(parsed.path))
            try:
                return path.read_bytes()
            except OSError as e:
                raise WSDLRetrievalError(location, f"Cannot read WSDL file {path}: {e}", e) from e

        try:
            response = self._transport.get(location)
        except TransportError as e:
            raise WSDLRetrievalError(location, f"Cannot fetch WSDL: {e.message}", e) from e

        if not response.is_success:
            raise WSDLRetrievalError(location, f"Fetching WSDL returned HTTP {response.status_code}")
        return response.content

    @staticmethod
    def parse(document: bytes, location: str = "") -> ServiceDefinition:
        """Parse a WSDL 1.1 document into a ServiceDefinition.

        Raises:
            WSDLRetrievalError: If the document is not a WSDL definitions document.
        """
        try:
            root = ElementTree.fromstring(document)
        except ElementTree.ParseError as e:
            raise WSDLRetrievalError(location, f"WSDL is not well-formed XML: {e}", e) from e

        if local_tag(root.tag) != "definitions":
            raise WSDLRetrievalError(location, f"Expected WSDL definitions root, found '{local_tag(root.tag)}'")

        services = []
        for service_elem in root:
            if local_tag(service_elem.tag) != "service":
                continue

            ports = []
            for port_elem in service_elem:
                if local_tag(port_elem.tag) != "port":
                    continue
                ports.append(
                    Port(
                        name=port_elem.get("name", ""),
                        binding=port_elem.get("binding", ""),
                        addresses=_soap_addresses(port_elem),
                    )
                )

            services.append(Service(name=service_elem.get("name", ""), ports=ports))

        return ServiceDefinition(target_namespace=root.get("targetNamespace", ""), services=services)


def _soap_addresses(port: ElementTree.Element) -> list[str]:
    addresses = []
    for child in port:
        namespace = child.tag[1:].split("}", 1)[0] if child.tag.startswith("{") else ""
        if local_tag(child.tag) == "address" and namespace in SOAP_ADDRESS_NAMESPACES:
            location = child.get("location")
            if location:
                addresses.append(location)
    return addresses
