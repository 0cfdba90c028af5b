# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (SOAP Client)
# Description: SOAP Fault detection.
# ============================================================================
"""SOAP Fault Detector.

Speculatively reads a Body region as a SOAP Fault. A body that is not a
fault, or not parsable at all, is simply "no fault": the caller's own
decode still gets the untouched bytes.
"""

import logging
from xml.etree import ElementTree

from wsdlsoap.core.shared.xml_utils import element_text, find_child, local_tag, parse_fragment

from ....domain.entities import Fault

logger = logging.getLogger(__name__)


class FaultDetector:
    """Detects SOAP 1.1 and 1.2 faults in a body region.

    Element names are matched on their local part. SOAP 1.2 nesting
    (``Code/Value`` and ``Reason/Text``) is unwrapped.
    """

    def __init__(
        self,
        fault_tags: tuple[str, ...] = ("Fault",),
        code_tags: tuple[str, ...] = ("Code", "faultcode"),
        description_tags: tuple[str, ...] = ("Description", "faultstring", "Reason"),
        detail_tags: tuple[str, ...] = ("detail", "Detail"),
    ) -> None:
        self.fault_tags = fault_tags
        self.code_tags = code_tags
        self.description_tags = description_tags
        self.detail_tags = detail_tags

    def detect(
        self,
        body: bytes,
        namespaces: dict[str, str] | None = None,
        encoding: str = "utf-8",
    ) -> Fault | None:
        """Return the Fault carried by body, or None.

        Args:
            body: Raw inner XML of the response Body.
            namespaces: Namespace declarations in scope at the Body.
            encoding: Encoding of the body bytes.

        Returns:
            Fault when a fault element with a non-empty code is present.
        """
        if not body or not body.strip():
            return None

        try:
            elements = parse_fragment(body, namespaces, encoding)
        except (ElementTree.ParseError, LookupError, ValueError) as e:
            logger.debug(f"Body is not parsable as a fault: {e}")
            return None

        for elem in elements:
            if local_tag(elem.tag) not in self.fault_tags:
                continue

            code = self._read_code(elem)
            if not code:
                continue

            fault = Fault(
                code=code,
                description=self._read_description(elem),
                detail=element_text(find_child(elem, self.detail_tags)),
            )
            logger.debug(f"SOAP fault detected: [{fault.code}] {fault.description}")
            return fault

        return None

    def _read_code(self, fault: ElementTree.Element) -> str:
        code = find_child(fault, self.code_tags)
        if code is None:
            return ""
        value = find_child(code, ("Value",))
        return element_text(value if value is not None else code)

    def _read_description(self, fault: ElementTree.Element) -> str:
        description = find_child(fault, self.description_tags)
        if description is None:
            return ""
        text = find_child(description, ("Text",))
        return element_text(text if text is not None else description)
