from __future__ import annotations

from typing import Any, Dict, List, Union

# Nested values are typed as Any, mypy has no recursive aliases here.
JsonObject = Dict[str, Any]
JsonArray = List[Any]
JsonValue = Union[None, str, JsonObject, JsonArray]

DEFAULT_TEXT_NAME = "#text"
DEFAULT_ATTRIBUTE_PREFIX = "@"

# Text key expected by the XML re-encoder.
ENCODER_TEXT_KEY = "$text"


__all__ = [
    "JsonObject",
    "JsonArray",
    "JsonValue",
    "DEFAULT_TEXT_NAME",
    "DEFAULT_ATTRIBUTE_PREFIX",
    "ENCODER_TEXT_KEY",
]
