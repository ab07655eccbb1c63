from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Mapping
from urllib.parse import urlencode

from lifegrid.colors import hex_to_param, normalize_hex

DEVICE_PRESETS: dict[str, dict] = {
    "iphone-17": {"width": 1284, "height": 2778, "name": "iPhone 17"},
    "iphone-17-pro": {"width": 1206, "height": 2622, "name": "iPhone 17 Pro"},
    "iphone-17-pro-max": {"width": 1320, "height": 2868, "name": "iPhone 17 Pro Max"},
    "iphone-16-pro-max": {"width": 1320, "height": 2868, "name": "iPhone 16 Pro Max"},
    "iphone-15-pro": {"width": 1179, "height": 2556, "name": "iPhone 15 Pro"},
    "iphone-15": {"width": 1179, "height": 2556, "name": "iPhone 15"},
    "iphone-14-pro-max": {"width": 1290, "height": 2796, "name": "iPhone 14 Pro Max"},
    "iphone-14": {"width": 1170, "height": 2532, "name": "iPhone 14"},
}

FONT_OPTIONS: dict[str, str] = {
    "Inter": "Inter",
    "Playfair Display": "Playfair",
    "Roboto Mono": "Roboto Mono",
    "Lora": "Lora",
    "Oswald": "Oswald",
    "sans-serif": "Sans Serif",
    "serif": "Serif",
    "monospace": "Monospace",
}

MONTH_STYLES: dict[str, str] = {
    "glass": "Glass Card",
    "classic": "Classic Grid",
    "bold": "Bold Blocks",
}

DEFAULT_MONTH_STYLE = "glass"

# Palettes keyed like the query parameters they fill in
PRESET_THEMES: dict[str, dict[str, str]] = {
    "minimal": {"name": "Minimal", "bg": "000000", "filled": "FFFFFF", "empty": "333333", "textColor": "FFFFFF", "accentColor": "FFA500"},
    "neon": {"name": "Neon", "bg": "0A0A0A", "filled": "22C55E", "empty": "1A1A1A", "textColor": "22C55E", "accentColor": "4ADE80"},
    "ocean": {"name": "Ocean", "bg": "0C4A6E", "filled": "38BDF8", "empty": "0369A1", "textColor": "BAE6FD", "accentColor": "38BDF8"},
    "sunset": {"name": "Sunset", "bg": "1C1917", "filled": "F97316", "empty": "292524", "textColor": "FED7AA", "accentColor": "F97316"},
    "lavender": {"name": "Lavender", "bg": "1E1B4B", "filled": "A78BFA", "empty": "312E81", "textColor": "C4B5FD", "accentColor": "A78BFA"},
    "midnight": {"name": "Midnight", "bg": "0F172A", "filled": "7DD3FC", "empty": "1E293B", "textColor": "E0F2FE", "accentColor": "38BDF8"},
    "rose": {"name": "Rose", "bg": "1A0A0E", "filled": "FB7185", "empty": "2D1520", "textColor": "FDA4AF", "accentColor": "FB7185"},
    "teal": {"name": "Teal", "bg": "042F2E", "filled": "2DD4BF", "empty": "134E4A", "textColor": "99F6E4", "accentColor": "2DD4BF"},
    "mocha": {"name": "Mocha", "bg": "1C1210", "filled": "D4A574", "empty": "2E211C", "textColor": "E8C9A8", "accentColor": "D4A574"},
    "crimson": {"name": "Crimson", "bg": "180A0A", "filled": "EF4444", "empty": "2D1515", "textColor": "FCA5A5", "accentColor": "EF4444"},
    "arctic": {"name": "Arctic", "bg": "0F1729", "filled": "E2E8F0", "empty": "1E2A45", "textColor": "F1F5F9", "accentColor": "94A3B8"},
    "amber": {"name": "Amber", "bg": "1A1000", "filled": "FBBF24", "empty": "2E2308", "textColor": "FDE68A", "accentColor": "F59E0B"},
}

_LEADING_INT = re.compile(r"^\s*([-+]?\d+)")


@dataclass(frozen=True)
class RenderParams:
    width: int = 1284
    height: int = 2778
    background: str = "000000"
    filled: str = "FFFFFF"
    empty: str = "333333"
    text: str = "FFFFFF"
    highlight: str = "FFD700"
    accent: str = "FFA500"
    radius: int = 12
    spacing: int = 6
    show_caption: bool = False
    caption: str = ""
    font: str = "Lora"
    month_style: str = DEFAULT_MONTH_STYLE

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize through object.__setattr__
        for name in ("background", "filled", "empty", "text", "highlight", "accent"):
            object.__setattr__(self, name, normalize_hex(getattr(self, name)))
        if self.width <= 0:
            object.__setattr__(self, "width", RenderParams.width)
        if self.height <= 0:
            object.__setattr__(self, "height", RenderParams.height)
        if self.radius <= 0:
            object.__setattr__(self, "radius", RenderParams.radius)
        if self.spacing < 0:
            object.__setattr__(self, "spacing", 0)
        object.__setattr__(self, "month_style", normalize_month_style(self.month_style))

    @property
    def caption_visible(self) -> bool:
        return self.show_caption and bool(self.caption)

    def with_theme(self, key: str) -> "RenderParams":
        theme = PRESET_THEMES.get(key)
        if theme is None:
            return self
        return replace(
            self,
            background=theme["bg"],
            filled=theme["filled"],
            empty=theme["empty"],
            text=theme["textColor"],
            accent=theme["accentColor"],
        )

    def with_device(self, key: str) -> "RenderParams":
        device = DEVICE_PRESETS.get(key)
        if device is None:
            return self
        return replace(self, width=device["width"], height=device["height"])


def normalize_month_style(style: str | None) -> str:
    if style and style in MONTH_STYLES:
        return style
    return DEFAULT_MONTH_STYLE


def parse_int(raw: str | None, default: int) -> int:
    """Parse like JavaScript parseInt: leading integer, else the default."""
    if raw is None:
        return default
    m = _LEADING_INT.match(raw)
    if not m:
        return default
    try:
        return int(m.group(1))
    except Exception:
        return default


def parse_bool(raw: str | None) -> bool:
    return raw == "true"


def params_from_query(query: Mapping[str, str], max_dimension: int | None = None) -> RenderParams:
    """Build RenderParams from query-string values with per-field default fallback.

    `device` and `theme` only supply values the query leaves out.
    """
    base = RenderParams()
    device = DEVICE_PRESETS.get(query.get("device") or "")
    theme = PRESET_THEMES.get(query.get("theme") or "")
    if device:
        base = replace(base, width=device["width"], height=device["height"])
    if theme:
        base = base.with_theme(query["theme"])

    def color(name: str, default: str) -> str:
        raw = query.get(name)
        # An empty value behaves like a missing one
        return raw if raw else default

    width = parse_int(query.get("width"), base.width)
    height = parse_int(query.get("height"), base.height)
    if max_dimension is not None:
        width = min(width, max_dimension)
        height = min(height, max_dimension)

    return RenderParams(
        width=width,
        height=height,
        background=color("bg", base.background),
        filled=color("filled", base.filled),
        empty=color("empty", base.empty),
        text=color("textColor", base.text),
        highlight=color("highlightColor", base.highlight),
        accent=color("accentColor", base.accent),
        radius=parse_int(query.get("radius"), base.radius),
        spacing=parse_int(query.get("spacing"), base.spacing),
        show_caption=parse_bool(query.get("showCustomText")),
        caption=query.get("customText") or "",
        font=query.get("font") or base.font,
        month_style=normalize_month_style(query.get("monthStyle")),
    )


def params_to_query(params: RenderParams, mode: str = "year") -> dict[str, str]:
    query = {
        "width": str(params.width),
        "height": str(params.height),
        "bg": hex_to_param(params.background),
        "filled": hex_to_param(params.filled),
        "empty": hex_to_param(params.empty),
    }
    if mode == "year":
        query["radius"] = str(params.radius)
        query["spacing"] = str(params.spacing)
    query.update(
        {
            "textColor": hex_to_param(params.text),
            "showCustomText": "true" if params.show_caption else "false",
            "customText": params.caption,
            "font": params.font,
            "highlightColor": hex_to_param(params.highlight),
            "accentColor": hex_to_param(params.accent),
        }
    )
    if mode == "month":
        query["monthStyle"] = params.month_style
    return query


def generate_api_url(base_url: str, params: RenderParams, mode: str = "year") -> str:
    path = "/api/wallpaper/month" if mode == "month" else "/api/wallpaper"
    return f"{base_url.rstrip('/')}{path}?{urlencode(params_to_query(params, mode))}"
