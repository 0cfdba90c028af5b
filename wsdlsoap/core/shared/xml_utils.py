"""
XML Utilities

Namespace-agnostic helpers shared by the envelope codec, the fault
detector and the body decoder.
"""

import logging
import re
from typing import Any
from xml.etree import ElementTree
from xml.sax.saxutils import quoteattr

logger = logging.getLogger(__name__)

FRAGMENT_TAG = "_fragment"

# Unprefixed element names; the encoder never declares prefixes for them.
_NAME_RE = re.compile(r"[A-Za-z_][\w.\-]*")

# Characters outside the XML 1.0 Char production.
_ILLEGAL_CHAR_RE = re.compile(r"[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def local_tag(tag: str) -> str:
    """Get local name from qualified XML tag.

    Args:
        tag: Qualified tag name ({ns}local or prefix:local).

    Returns:
        Local tag name without namespace.
    """
    if "}" in tag:
        return tag.split("}", 1)[1]
    if ":" in tag:
        return tag.split(":", 1)[1]
    return tag


def is_valid_name(name: str) -> bool:
    """Return True if name can be used as an XML element name."""
    return isinstance(name, str) and _NAME_RE.fullmatch(name) is not None


def is_xml_text(value: str) -> bool:
    """Return True if value holds only characters XML 1.0 allows in text."""
    return _ILLEGAL_CHAR_RE.search(value) is None


def parse_fragment(
    data: bytes,
    namespaces: dict[str, str] | None = None,
    encoding: str = "utf-8",
) -> list[ElementTree.Element]:
    """Parse a raw inner-XML region into its top-level elements.

    The region is wrapped in a synthetic root that re-declares the
    namespaces in scope where the region was captured, so prefixes bound
    on the envelope (``soap:Fault``) still resolve.

    Args:
        data: Raw inner XML.
        namespaces: Prefix to URI map ("" for the default namespace).
        encoding: Encoding the bytes are in.

    Returns:
        Top-level elements in document order.

    Raises:
        ElementTree.ParseError: If the region is not well-formed.
    """
    declarations = []
    for prefix, uri in sorted((namespaces or {}).items()):
        attr = f"xmlns:{prefix}" if prefix else "xmlns"
        declarations.append(f" {attr}={quoteattr(uri)}")

    head = f'<?xml version="1.0" encoding="{encoding}"?><{FRAGMENT_TAG}{"".join(declarations)}>'
    wrapped = head.encode(encoding) + data + f"</{FRAGMENT_TAG}>".encode(encoding)
    root = ElementTree.fromstring(wrapped)
    return list(root)


def find_child(elem: ElementTree.Element, names: tuple[str, ...]) -> ElementTree.Element | None:
    """Find the first direct child whose local name is one of names."""
    for child in elem:
        if local_tag(child.tag) in names:
            return child
    return None


def element_text(elem: ElementTree.Element | None) -> str:
    """Return the stripped concatenated text of an element, or ''."""
    if elem is None:
        return ""
    return "".join(elem.itertext()).strip()


def element_to_dict(
    elem: ElementTree.Element,
    max_depth: int = 32,
    current_depth: int = 0,
) -> dict[str, Any]:
    """Convert XML element to dictionary recursively.

    Children are keyed by local name. Repeated siblings become lists and
    leaves map to their text.

    Args:
        elem: XML element.
        max_depth: Maximum recursion depth.
        current_depth: Current recursion depth.

    Returns:
        Dictionary representation.
    """
    result: dict[str, Any] = {}

    if current_depth >= max_depth:
        logger.warning(
            f"Max parsing depth ({max_depth}) reached. Truncating at element: {local_tag(elem.tag)}"
        )
        return result

    for child in elem:
        tag = local_tag(child.tag)
        value: Any = element_to_dict(child, max_depth, current_depth + 1) if len(child) > 0 else child.text

        if tag in result:
            if not isinstance(result[tag], list):
                result[tag] = [result[tag]]
            result[tag].append(value)
        else:
            result[tag] = value

    return result
