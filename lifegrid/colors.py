from __future__ import annotations

import re

RGBA = tuple[int, int, int, int]

_HEX6 = re.compile(r"^[0-9a-fA-F]{6}$")

WHITE = "FFFFFF"


def normalize_hex(value: str | None, default: str = WHITE) -> str:
    """Return an upper-case 6-digit hex string without '#', or default when malformed."""
    if value is None:
        return default
    h = value.strip()
    if h.startswith("#"):
        h = h[1:]
    if not _HEX6.match(h):
        return default
    return h.upper()


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    h = normalize_hex(value)
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def hex_to_rgba(value: str, alpha: float = 1.0) -> RGBA:
    """Convert hex + opacity to an RGBA tuple.

    Malformed input becomes white at the given opacity instead of failing.
    """
    a = int(round(max(0.0, min(1.0, alpha)) * 255))
    return (*hex_to_rgb(value), a)


def hex_to_param(value: str) -> str:
    """Strip a single leading '#' so the color can travel in a query string."""
    return value[1:] if value.startswith("#") else value


def param_to_hex(value: str) -> str:
    return value if value.startswith("#") else f"#{value}"
