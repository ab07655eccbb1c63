from __future__ import annotations

import math
import unicodedata
from io import BytesIO
from typing import Tuple

from PIL import Image, ImageChops, ImageDraw, ImageFilter, ImageFont

from lifegrid.colors import RGBA
from lifegrid.fonts import has_true_bold, load_font, measure_text
from lifegrid.primitives import SYSTEM_FONT, single_line
from lifegrid.surface import Surface

# Pillow text anchors: horizontal letter + vertical letter
_ANCHOR_H = {"left": "l", "center": "m", "right": "r"}
_ANCHOR_V = {"top": "t", "middle": "m", "bottom": "b"}


def _strip_symbols_emojis(text: str) -> str:
    """Remove emoji/symbol-like characters to avoid rendering issues.

    Heuristics:
    - Remove Unicode category 'So' (other symbols: emoji, dingbats)
    - Remove common emoji ranges (U+1F000–U+1FAFF, U+2600–U+26FF, U+2700–U+27BF)
    - Remove variation selectors (U+FE0E/U+FE0F) and ZWJ (U+200D)
    """
    out_chars: list[str] = []
    for ch in text:
        cp = ord(ch)
        if unicodedata.category(ch) == "So":
            continue
        if 0x1F000 <= cp <= 0x1FAFF:
            continue
        if 0x2600 <= cp <= 0x26FF:
            continue
        if 0x2700 <= cp <= 0x27BF:
            continue
        if cp in (0xFE0E, 0xFE0F, 0x200D):  # VS15/VS16, ZWJ
            continue
        out_chars.append(ch)
    return "".join(out_chars)


def _sanitize_text_render(text: str | None) -> str | None:
    if text is None:
        return None
    return _strip_symbols_emojis(single_line(text))


def draw_bold_text(
    draw: ImageDraw.ImageDraw,
    x: float,
    y: float,
    text: str,
    font: ImageFont.ImageFont,
    fill: tuple,
    strength: int = 1,
    anchor: str | None = None,
) -> None:
    """Simple bold simulation by overdrawing nearby pixels with the same color."""
    for dx in range(-strength, strength + 1):
        for dy in range(-strength, strength + 1):
            draw.text((x + dx, y + dy), text, fill=fill, font=font, anchor=anchor)


class PillowSurface(Surface):
    """Raster surface: an opaque RGB canvas with alpha-blended drawing."""

    def __init__(self, width: int, height: int, background: Tuple[int, int, int] = (0, 0, 0)) -> None:
        super().__init__(width, height)
        self.image = Image.new("RGB", (width, height), background)
        # "RGBA" mode on an RGB image blends translucent fills into the canvas
        self._draw = ImageDraw.Draw(self.image, "RGBA")

    def measure_text(self, text: str, size: int, weight: int = 400, family: str = SYSTEM_FONT, italic: bool = False) -> float:
        return measure_text(_sanitize_text_render(text) or "", size, weight, family, italic)

    @staticmethod
    def _box(x: float, y: float, width: float, height: float) -> tuple[int, int, int, int]:
        # Pillow boxes are inclusive on both ends
        x0, y0 = int(round(x)), int(round(y))
        x1 = x0 + max(int(round(width)) - 1, 0)
        y1 = y0 + max(int(round(height)) - 1, 0)
        return x0, y0, x1, y1

    def _paste_blurred(self, box: tuple[int, int, int, int], color: RGBA, blur: float, paint) -> None:
        """Paint one shape on an offscreen layer, blur it and blend it in."""
        margin = int(math.ceil(blur * 3))
        x0 = max(0, box[0] - margin)
        y0 = max(0, box[1] - margin)
        x1 = min(self.width, box[2] + margin + 1)
        y1 = min(self.height, box[3] + margin + 1)
        if x1 <= x0 or y1 <= y0:
            return
        # Transparent pixels share the shape's RGB so edges do not darken when blurred
        layer = Image.new("RGBA", (x1 - x0, y1 - y0), (color[0], color[1], color[2], 0))
        local = (box[0] - x0, box[1] - y0, box[2] - x0, box[3] - y0)
        paint(ImageDraw.Draw(layer), local)
        layer = layer.filter(ImageFilter.GaussianBlur(blur))
        self.image.paste(layer.convert("RGB"), (x0, y0), layer)

    def fill_rect(self, x: float, y: float, width: float, height: float, color: RGBA) -> None:
        self._draw.rectangle(self._box(x, y, width, height), fill=color)

    def circle(self, cx: float, cy: float, radius: float, color: RGBA, *, stroke: float | None = None, blur: float = 0.0) -> None:
        box = self._box(cx - radius, cy - radius, radius * 2, radius * 2)
        if blur > 0:
            self._paste_blurred(box, color, blur, lambda d, b: d.ellipse(b, fill=color))
        elif stroke:
            self._draw.ellipse(box, outline=color, width=max(1, int(round(stroke))))
        else:
            self._draw.ellipse(box, fill=color)

    def rounded_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        radius: float,
        color: RGBA,
        *,
        stroke: float | None = None,
        blur: float = 0.0,
    ) -> None:
        box = self._box(x, y, width, height)
        r = int(max(0, min(radius, (box[2] - box[0]) / 2, (box[3] - box[1]) / 2)))
        if blur > 0:
            self._paste_blurred(box, color, blur, lambda d, b: d.rounded_rectangle(b, radius=r, fill=color))
        elif stroke:
            self._draw.rounded_rectangle(box, radius=r, outline=color, width=max(1, int(round(stroke))))
        else:
            self._draw.rounded_rectangle(box, radius=r, fill=color)

    def gradient_rounded_rect(
        self, x: float, y: float, width: float, height: float, radius: float, start: RGBA, end: RGBA
    ) -> None:
        x0, y0, x1, y1 = self._box(x, y, width, height)
        size = (x1 - x0 + 1, y1 - y0 + 1)
        # linear_gradient runs black (top) to white (bottom)
        ramp = Image.linear_gradient("L").resize(size)
        tile = Image.composite(Image.new("RGBA", size, end), Image.new("RGBA", size, start), ramp)
        shape = Image.new("L", size, 0)
        r = int(max(0, min(radius, (size[0] - 1) / 2, (size[1] - 1) / 2)))
        ImageDraw.Draw(shape).rounded_rectangle((0, 0, size[0] - 1, size[1] - 1), radius=r, fill=255)
        tile.putalpha(ImageChops.multiply(tile.getchannel("A"), shape))
        self.image.paste(tile.convert("RGB"), (x0, y0), tile)

    def fill_text(
        self,
        text: str,
        x: float,
        y: float,
        size: int,
        color: RGBA,
        *,
        weight: int = 400,
        italic: bool = False,
        family: str = SYSTEM_FONT,
        align: str = "left",
        baseline: str = "top",
    ) -> None:
        text = _sanitize_text_render(text)
        if not text:
            return
        font = load_font(size, weight, italic, family)
        anchor = _ANCHOR_H.get(align, "l") + _ANCHOR_V.get(baseline, "t")
        # Overdraw only opaque text; repeated translucent passes stack alpha
        if color[3] == 255 and not italic and not has_true_bold(size, weight, family):
            draw_bold_text(self._draw, x, y, text, font, color, strength=1, anchor=anchor)
        else:
            self._draw.text((x, y), text, fill=color, font=font, anchor=anchor)

    def to_buffer(self) -> BytesIO:
        buf = BytesIO()
        self.image.save(buf, format="PNG")
        buf.seek(0)
        return buf

    def encode(self) -> bytes:
        return self.to_buffer().getvalue()
