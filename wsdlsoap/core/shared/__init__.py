"""
Shared utilities: logging configuration and XML helpers.
"""

from wsdlsoap.core.shared.logger import (
    CallLogger,
    JSONFormatter,
    TextFormatter,
    configure_logging,
    get_client_logger,
)
from wsdlsoap.core.shared.xml_utils import (
    element_text,
    element_to_dict,
    find_child,
    is_valid_name,
    is_xml_text,
    local_tag,
    parse_fragment,
)

__all__ = [
    "JSONFormatter",
    "TextFormatter",
    "CallLogger",
    "configure_logging",
    "get_client_logger",
    "local_tag",
    "is_valid_name",
    "is_xml_text",
    "parse_fragment",
    "find_child",
    "element_text",
    "element_to_dict",
]
