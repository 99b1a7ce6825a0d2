"""Accent color resolution.

Maps the raw accent-color setting to a concrete hex code. Named colors
follow the GNOME 47 accent palette; anything unrecognised falls back to
Adwaita blue and is reported as a parse failure.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_NAME = "blue"
DEFAULT_HEX = "#3584e4"

ACCENT_COLORS: dict[str, str] = {
    "blue":   "#3584e4",
    "teal":   "#2190a4",
    "green":  "#3a944a",
    "yellow": "#c88800",
    "orange": "#ed5b00",
    "red":    "#e62d42",
    "pink":   "#d56199",
    "purple": "#9141ac",
    "slate":  "#6f8396",
}

_HEX_RE = re.compile(r"#[0-9a-fA-F]{6}")


@dataclass(frozen=True)
class AccentResolution:
    """Result of resolving an accent-color setting."""

    hex_code: str
    is_named: bool
    name: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _fallback(error: str) -> AccentResolution:
    logger.warning("Color parsing: %s", error)
    return AccentResolution(DEFAULT_HEX, True, DEFAULT_NAME, error)


def resolve_accent(raw: str) -> AccentResolution:
    """Resolve a raw accent-color value to (hex, is_named, name).

    An empty value is the desktop default and is not an error. Invalid hex
    strings and unknown names fall back to the default with ``error`` set.
    """
    value = raw.strip()

    if value == "":
        return AccentResolution(DEFAULT_HEX, True, DEFAULT_NAME)

    if value.startswith("#"):
        if _HEX_RE.fullmatch(value):
            return AccentResolution(value, False)
        return _fallback(f"Invalid custom hex color format: {value}")

    hex_code = ACCENT_COLORS.get(value)
    if hex_code is None:
        return _fallback(f"Unknown predefined accent color name: '{value}'")
    return AccentResolution(hex_code, True, value)
