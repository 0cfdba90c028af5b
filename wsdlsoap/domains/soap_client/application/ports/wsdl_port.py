# ============================================================================
# SCOPE: APPLICATION LAYER (SOAP Client)
# Description: WSDL provider port.
# ============================================================================
"""WSDL Provider Port."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.entities import ServiceDefinition


@runtime_checkable
class IWSDLProvider(Protocol):
    """Interface for WSDL retrieval and parsing.

    Implementations: HttpWSDLProvider
    """

    def get_definitions(self, location: str) -> "ServiceDefinition":
        """Retrieve and parse the WSDL at location.

        Args:
            location: WSDL URL.

        Returns:
            ServiceDefinition with namespace and endpoints.

        Raises:
            WSDLRetrievalError: On network or parse failure.
        """
        ...
