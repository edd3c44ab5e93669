from __future__ import annotations

from typing import Optional, Tuple


class XmlParseError(ValueError):
    """Raised when XML text cannot be parsed into an element tree."""

    def __init__(self, diagnostic: str, position: Optional[Tuple[int, int]] = None) -> None:
        self.diagnostic = diagnostic
        self.position = position
        super().__init__(f"Failed to parse XML document: {diagnostic}")


__all__ = ["XmlParseError"]
