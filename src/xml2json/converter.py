from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, replace
from typing import Optional, Union

from .exceptions import XmlParseError
from .structures import (
    DEFAULT_ATTRIBUTE_PREFIX,
    DEFAULT_TEXT_NAME,
    ENCODER_TEXT_KEY,
    JsonObject,
    JsonValue,
)
from .utils import local_name, merge_value, parse_xml, rename_keys

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class XmlToJson:
    """XML to JSON-like value converter.

    Element text is stored under ``text_name``, attributes under
    ``attribute_prefix`` + name, child elements under their tag name. A tag
    seen once maps to an object, a repeated tag to a list of objects. Empty
    elements are dropped.

    ``attribute_prefix`` has no builder method: values other than ``"@"``
    cannot be re-encoded by :func:`xml2json.utils.to_xml`.
    """

    with_root: bool = False
    text_name: str = DEFAULT_TEXT_NAME
    attribute_prefix: str = DEFAULT_ATTRIBUTE_PREFIX

    def enable_root(self) -> XmlToJson:
        """Wrap the result under the root tag name."""

        return replace(self, with_root=True)

    def set_text_name(self, name: str) -> XmlToJson:
        """Change the key of element text."""

        return replace(self, text_name=name)

    def convert(self, xml: Union[str, bytes]) -> JsonValue:
        """Parse XML text and return the converted value."""

        try:
            root = parse_xml(xml)
        except XmlParseError as exc:
            logger.debug("XML parse failed at %s: %s", exc.position, exc.diagnostic)
            raise
        return self.convert_element(root)

    def convert_element(self, element: ET.Element) -> JsonValue:
        """Convert an already parsed root element."""

        logger.debug("Converting <%s> (with_root=%s)", local_name(element.tag), self.with_root)
        value = self._convert_node(element)
        if self.with_root:
            return {local_name(element.tag): value}
        return value

    def prepare_for_encoder(self, value: JsonValue, text_key: str = ENCODER_TEXT_KEY) -> JsonValue:
        """Rename the text key so the value can be encoded back to XML."""

        return rename_keys(value, self.text_name, text_key)

    def _convert_node(self, element: ET.Element) -> Optional[JsonObject]:
        elements: JsonObject = {}
        if element.text is not None:
            elements[self.text_name] = element.text.strip()
        for attr_name, attr_value in element.attrib.items():
            elements[self.attribute_prefix + local_name(attr_name)] = attr_value.strip()
        for child in element:
            name = local_name(child.tag)
            if not name:
                continue
            child_value = self._convert_node(child)
            if child_value is not None:
                merge_value(elements, name, child_value)
        return elements or None


def xml_to_json(xml: Union[str, bytes], *, with_root: bool = False, text_name: str = DEFAULT_TEXT_NAME) -> JsonValue:
    """Parse XML string and return converted value with default prefix."""

    return XmlToJson(with_root=with_root, text_name=text_name).convert(xml)


__all__ = ["XmlToJson", "xml_to_json"]
