from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any, Dict, Union

import xmltodict

from .exceptions import XmlParseError
from .structures import DEFAULT_ATTRIBUTE_PREFIX, ENCODER_TEXT_KEY, JsonValue


def local_name(tag: Any) -> str:
    """Return tag or attribute name without its ``{namespace}`` part.

    Comments and processing instructions carry a factory function as their
    tag; they get the empty name.
    """

    if not isinstance(tag, str):
        return ""
    if tag.startswith("{"):
        return tag.rpartition("}")[2]
    return tag


def merge_value(target: Dict[str, Any], key: str, value: Any) -> None:
    """Store a child value under its tag, promoting a repeated tag to a list."""

    if key not in target:
        target[key] = value
        return
    current = target[key]
    if isinstance(current, list):
        current.append(value)
        return
    target[key] = [current, value]


def rename_keys(value: JsonValue, old_key: str, new_key: str) -> JsonValue:
    """Rename ``old_key`` to ``new_key`` in every object of the tree.

    The renamed entry is moved to the end of its object. The input is left
    untouched, a new tree is returned.
    """

    if isinstance(value, dict):
        items = dict(value)
        if old_key in items:
            moved = items.pop(old_key)
            items.pop(new_key, None)
            items[new_key] = moved
        return {key: rename_keys(item, old_key, new_key) for key, item in items.items()}
    if isinstance(value, list):
        return [rename_keys(item, old_key, new_key) for item in value]
    return value


def parse_xml(xml: Union[str, bytes]) -> ET.Element:
    """Parse XML text and return the root element."""

    try:
        return ET.fromstring(xml)
    except (ET.ParseError, LookupError) as exc:
        # Unknown encodings in the declaration surface as LookupError.
        raise XmlParseError(str(exc), getattr(exc, "position", None)) from exc


def to_xml(value: JsonValue, root: str, text_key: str = ENCODER_TEXT_KEY) -> str:
    """Serialize a prepared value back into XML under ``root``.

    ``value`` must already use ``text_key`` for element text, see
    :meth:`xml2json.XmlToJson.prepare_for_encoder`.
    """

    return xmltodict.unparse(
        {root: value},
        full_document=False,
        attr_prefix=DEFAULT_ATTRIBUTE_PREFIX,
        cdata_key=text_key,
    )


__all__ = [
    "local_name",
    "merge_value",
    "rename_keys",
    "parse_xml",
    "to_xml",
]
