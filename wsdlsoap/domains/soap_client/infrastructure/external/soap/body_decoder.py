# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (SOAP Client)
# Description: Typed decoding of SOAP body payloads.
# ============================================================================
"""SOAP Body Decoder.

Decodes the first element of a Body region into a caller-supplied
target type. The payload schema is the caller's; the decoder only maps
child elements (by local name) onto fields.
"""

import dataclasses
import logging
from typing import Any, TypeVar
from xml.etree import ElementTree

from pydantic import BaseModel, ValidationError

from wsdlsoap.core.domain.exceptions import DecodeError
from wsdlsoap.core.shared.xml_utils import element_text, element_to_dict, local_tag, parse_fragment

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BodyDecoder:
    """Maps a body payload onto pydantic models, dataclasses, dicts or text.

    Attributes:
        max_depth: Maximum nesting depth converted into dictionaries.
    """

    def __init__(self, max_depth: int = 32) -> None:
        self.max_depth = max_depth

    def decode(
        self,
        body: bytes,
        target: type[T],
        namespaces: dict[str, str] | None = None,
        encoding: str = "utf-8",
        element: str | None = None,
    ) -> T:
        """Decode body into an instance of target.

        Args:
            body: Raw inner XML of the response Body.
            target: ``bytes``, ``str``, ``dict``, a pydantic model class or
                a dataclass type.
            namespaces: Namespace declarations in scope at the Body.
            encoding: Encoding of the body bytes.
            element: Expected local name of the payload element.

        Returns:
            Decoded instance.

        Raises:
            DecodeError: If the body cannot be parsed or does not fit target.
        """
        if target is bytes:
            return body  # type: ignore[return-value]

        root = self._payload_element(body, target, namespaces, encoding)
        if element and local_tag(root.tag) != element:
            raise DecodeError(target, f"Expected payload element '{element}', found '{local_tag(root.tag)}'")

        if target is str:
            return element_text(root)  # type: ignore[return-value]

        data = element_to_dict(root, self.max_depth)

        if target is dict:
            return data  # type: ignore[return-value]

        if isinstance(target, type) and issubclass(target, BaseModel):
            try:
                return target.model_validate(data)
            except ValidationError as e:
                raise DecodeError(target, f"Body does not match {target.__name__}: {e.error_count()} error(s)", e) from e

        if dataclasses.is_dataclass(target) and isinstance(target, type):
            return self._to_dataclass(target, data)

        raise DecodeError(target, f"Unsupported decode target: {target!r}")

    def _payload_element(
        self,
        body: bytes,
        target: Any,
        namespaces: dict[str, str] | None,
        encoding: str,
    ) -> ElementTree.Element:
        try:
            elements = parse_fragment(body, namespaces, encoding)
        except (ElementTree.ParseError, LookupError, ValueError) as e:
            raise DecodeError(target, f"Body is not well-formed XML: {e}", e) from e

        if not elements:
            raise DecodeError(target, "Body contains no payload element")
        return elements[0]

    @staticmethod
    def _to_dataclass(target: type[T], data: dict[str, Any]) -> T:
        fields = {f.name for f in dataclasses.fields(target) if f.init}  # type: ignore[arg-type]
        kwargs = {name: value for name, value in data.items() if name in fields}
        try:
            return target(**kwargs)
        except TypeError as e:
            raise DecodeError(target, f"Body does not match {target.__name__}: {e}", e) from e
