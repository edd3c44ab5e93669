from __future__ import annotations

from .converter import XmlToJson, xml_to_json
from .exceptions import XmlParseError
from .structures import (
    DEFAULT_ATTRIBUTE_PREFIX,
    DEFAULT_TEXT_NAME,
    ENCODER_TEXT_KEY,
    JsonArray,
    JsonObject,
    JsonValue,
)
from .utils import local_name, merge_value, parse_xml, rename_keys, to_xml

__all__ = [
    "XmlToJson",
    "xml_to_json",
    "rename_keys",
    "to_xml",
    "parse_xml",
    "local_name",
    "merge_value",
    "XmlParseError",
    "JsonValue",
    "JsonObject",
    "JsonArray",
    "DEFAULT_TEXT_NAME",
    "DEFAULT_ATTRIBUTE_PREFIX",
    "ENCODER_TEXT_KEY",
]
