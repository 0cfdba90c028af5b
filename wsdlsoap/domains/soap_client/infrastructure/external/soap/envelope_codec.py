# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (SOAP Client)
# Description: SOAP envelope encoder/decoder.
# ============================================================================
"""SOAP Envelope Codec.

Builds request envelopes and splits response envelopes into raw Header
and Body regions. Single responsibility: outer envelope framing. The
content of Header and Body is never interpreted here.
"""

import logging
from collections.abc import Mapping
from xml.etree import ElementTree
from xml.parsers import expat

from wsdlsoap.core.domain.exceptions import EnvelopeEncodeError, MalformedResponse
from wsdlsoap.core.shared.xml_utils import is_valid_name, is_xml_text, local_tag

from ....domain.entities import Envelope

logger = logging.getLogger(__name__)

SOAP11_ENVELOPE_NS = "http://schemas.xmlsoap.org/soap/envelope/"
SOAP12_ENVELOPE_NS = "http://www.w3.org/2003/05/soap-envelope"

ENVELOPE_NAMESPACES = {
    "1.1": SOAP11_ENVELOPE_NS,
    "1.2": SOAP12_ENVELOPE_NS,
}

_REGIONS = ("Header", "Body")


class _EnvelopeScanner:
    """Single-pass expat scan recording byte offsets of Header and Body.

    Regions are sliced from the original bytes, so their content is
    returned exactly as the server sent it.
    """

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._depth = 0
        self._scopes: list[dict[str, str]] = [{}]
        self._open: dict[str, int | None] = {}

        self.root_seen = False
        self.encoding = "utf-8"
        self.regions: dict[str, bytes] = {}
        self.namespaces: dict[str, dict[str, str]] = {}

        self._parser = expat.ParserCreate()
        self._parser.XmlDeclHandler = self._on_xml_decl
        self._parser.StartDoctypeDeclHandler = self._on_doctype
        self._parser.StartElementHandler = self._on_start
        self._parser.EndElementHandler = self._on_end

    def scan(self) -> None:
        self._parser.Parse(self._data, True)

    def region_namespaces(self) -> dict[str, str]:
        """Namespaces in scope at the Body, falling back to the Header."""
        return self.namespaces.get("Body") or self.namespaces.get("Header") or {}

    def _on_xml_decl(self, version, encoding, standalone) -> None:
        if encoding:
            self.encoding = encoding.lower()

    def _on_doctype(self, name, sysid, pubid, has_internal_subset) -> None:
        raise MalformedResponse("SOAP messages must not contain a document type declaration")

    def _on_start(self, name: str, attrs: dict[str, str]) -> None:
        scope = dict(self._scopes[-1])
        for attr, value in attrs.items():
            if attr == "xmlns":
                scope[""] = value
            elif attr.startswith("xmlns:"):
                scope[attr[6:]] = value
        self._scopes.append(scope)

        if self._depth == 0:
            if local_tag(name) != "Envelope":
                raise MalformedResponse(f"Expected Envelope root element, found '{name}'")
            self.root_seen = True
        elif self._depth == 1:
            region = local_tag(name)
            if region in _REGIONS and region not in self.regions and region not in self._open:
                self._open[region] = self._inner_start(self._parser.CurrentByteIndex)
                self.namespaces[region] = scope

        self._depth += 1

    def _on_end(self, name: str) -> None:
        self._depth -= 1
        self._scopes.pop()

        if self._depth == 1:
            region = local_tag(name)
            if region in self._open:
                start = self._open.pop(region)
                end = self._parser.CurrentByteIndex
                self.regions[region] = b"" if start is None else self._data[start:end]

    def _inner_start(self, tag_start: int) -> int | None:
        """Return the offset just past the start tag, or None for an empty-element tag."""
        quote = None
        pos = tag_start
        while pos < len(self._data):
            char = self._data[pos : pos + 1]
            if quote:
                if char == quote:
                    quote = None
            elif char in (b'"', b"'"):
                quote = char
            elif char == b">":
                if self._data[pos - 1 : pos] == b"/":
                    return None
                return pos + 1
            pos += 1
        return None


class EnvelopeCodec:
    """Encodes request envelopes and decodes response envelopes.

    Attributes:
        envelope_namespace: Namespace of Envelope/Header/Body, or None for
            unqualified framing elements.
        prefix: Prefix bound to the envelope namespace.
        method_namespace: Optional default namespace for the method element.
    """

    def __init__(
        self,
        envelope_namespace: str | None = SOAP11_ENVELOPE_NS,
        prefix: str = "soap",
        method_namespace: str | None = None,
    ) -> None:
        if envelope_namespace and not prefix:
            raise ValueError("A prefix is required when an envelope namespace is set")
        self.envelope_namespace = envelope_namespace
        self.prefix = prefix
        self.method_namespace = method_namespace

    @classmethod
    def for_version(cls, version: str, method_namespace: str | None = None) -> "EnvelopeCodec":
        """Build a codec for SOAP version "1.1" or "1.2"."""
        try:
            namespace = ENVELOPE_NAMESPACES[version]
        except KeyError:
            raise ValueError(f"Unsupported SOAP version: {version!r}") from None
        return cls(envelope_namespace=namespace, method_namespace=method_namespace)

    def encode(
        self,
        method: str,
        params: Mapping[str, str] | None = None,
        header: Mapping[str, str] | None = None,
        header_name: str | None = None,
    ) -> bytes:
        """Build a SOAP envelope for a method call.

        Args:
            method: SOAP method name.
            params: Parameter name to text. Emitted sorted by name.
            header: Header parameters. The Header element is omitted when empty.
            header_name: Optional element wrapping the header parameters.

        Returns:
            Complete SOAP XML envelope as UTF-8 bytes.

        Raises:
            EnvelopeEncodeError: If an element name is not a valid unprefixed
                XML name, or a value holds characters XML cannot carry.
        """
        self._check_name(method, "method")
        if header_name:
            self._check_name(header_name, "header")

        attrs = {}
        if self.envelope_namespace:
            attrs[f"xmlns:{self.prefix}"] = self.envelope_namespace
        root = ElementTree.Element(self._qualify("Envelope"), attrs)

        if header:
            header_elem = ElementTree.SubElement(root, self._qualify("Header"))
            parent = ElementTree.SubElement(header_elem, header_name) if header_name else header_elem
            self._append_params(parent, header)

        body = ElementTree.SubElement(root, self._qualify("Body"))
        method_attrs = {"xmlns": self.method_namespace} if self.method_namespace else {}
        method_elem = ElementTree.SubElement(body, method, method_attrs)
        self._append_params(method_elem, params or {})

        return ElementTree.tostring(root, encoding="utf-8", xml_declaration=True)

    def decode(self, data: bytes) -> Envelope:
        """Split a response envelope into raw Header and Body regions.

        Args:
            data: Raw response bytes.

        Returns:
            Envelope with inner-XML Header/Body bytes. A missing Header or
            Body yields empty bytes.

        Raises:
            MalformedResponse: If the document is not well-formed XML or
                its root is not an Envelope. Regions completed before the
                failure are attached to the exception.
        """
        scanner = _EnvelopeScanner(data)
        try:
            scanner.scan()
        except expat.ExpatError as e:
            logger.warning(f"Malformed SOAP response: {e}")
            raise MalformedResponse(
                f"Response is not well-formed XML: {e}",
                header=scanner.regions.get("Header", b""),
                body=scanner.regions.get("Body", b""),
                namespaces=scanner.region_namespaces(),
                encoding=scanner.encoding,
            ) from e

        return Envelope(
            header=scanner.regions.get("Header", b""),
            body=scanner.regions.get("Body", b""),
            namespaces=scanner.region_namespaces(),
            encoding=scanner.encoding,
        )

    def _qualify(self, local: str) -> str:
        return f"{self.prefix}:{local}" if self.envelope_namespace else local

    def _append_params(self, parent: ElementTree.Element, params: Mapping[str, str]) -> None:
        for key in sorted(params):
            self._check_name(key, "parameter")
            value = str(params[key])
            if not is_xml_text(value):
                raise EnvelopeEncodeError(f"Value of {key!r} contains characters not allowed in XML", name=key)
            ElementTree.SubElement(parent, key).text = value

    @staticmethod
    def _check_name(name: str, kind: str) -> None:
        if not isinstance(name, str) or not is_valid_name(name):
            raise EnvelopeEncodeError(f"Invalid {kind} element name: {name!r}", name=str(name))
