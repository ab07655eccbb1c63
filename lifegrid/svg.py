from __future__ import annotations

from xml.sax.saxutils import escape, quoteattr

from lifegrid.colors import RGBA
from lifegrid.fonts import measure_text
from lifegrid.primitives import SYSTEM_FONT, single_line
from lifegrid.surface import Surface

SYSTEM_STACK = "system-ui, -apple-system, BlinkMacSystemFont, sans-serif"

_TEXT_ANCHOR = {"left": "start", "center": "middle", "right": "end"}
_BASELINE = {"top": "text-before-edge", "middle": "central", "bottom": "text-after-edge"}


def _hex(color: RGBA) -> str:
    return f"#{color[0]:02X}{color[1]:02X}{color[2]:02X}"


def _opacity(color: RGBA) -> str:
    return f"{color[3] / 255:.3f}".rstrip("0").rstrip(".") or "0"


def _n(value: float) -> str:
    return f"{value:.1f}"


def font_stack(family: str) -> str:
    if family == SYSTEM_FONT:
        return SYSTEM_STACK
    if family in ("serif", "sans-serif", "monospace"):
        return family
    return f"'{family}', serif"


class SvgSurface(Surface):
    """Markup surface: collects elements into a single SVG document."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(width, height)
        self._defs: list[str] = []
        self._body: list[str] = []
        self._next_id = 0

    def _id(self, prefix: str) -> str:
        self._next_id += 1
        return f"{prefix}{self._next_id}"

    def _blur_filter(self, blur: float) -> str:
        fid = self._id("blur")
        # Let the blur spill outside the shape's own bounding box
        self._defs.append(
            f'<filter id="{fid}" x="-100%" y="-100%" width="300%" height="300%">'
            f'<feGaussianBlur stdDeviation="{_n(blur)}"/></filter>'
        )
        return f' filter="url(#{fid})"'

    def measure_text(self, text: str, size: int, weight: int = 400, family: str = SYSTEM_FONT, italic: bool = False) -> float:
        return measure_text(single_line(text), size, weight, family, italic)

    def fill_rect(self, x: float, y: float, width: float, height: float, color: RGBA) -> None:
        self._body.append(
            f'<rect x="{_n(x)}" y="{_n(y)}" width="{_n(width)}" height="{_n(height)}" '
            f'fill="{_hex(color)}" fill-opacity="{_opacity(color)}"/>'
        )

    def circle(self, cx: float, cy: float, radius: float, color: RGBA, *, stroke: float | None = None, blur: float = 0.0) -> None:
        if stroke:
            # Inset the stroke so it stays inside the circle's box
            r = max(radius - stroke / 2, 0)
            paint = f'fill="none" stroke="{_hex(color)}" stroke-opacity="{_opacity(color)}" stroke-width="{_n(stroke)}"'
        else:
            r = radius
            paint = f'fill="{_hex(color)}" fill-opacity="{_opacity(color)}"'
        extra = self._blur_filter(blur) if blur > 0 else ""
        self._body.append(f'<circle cx="{_n(cx)}" cy="{_n(cy)}" r="{_n(r)}" {paint}{extra}/>')

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
        if stroke:
            half = stroke / 2
            x, y, width, height = x + half, y + half, width - stroke, height - stroke
            radius = max(radius - half, 0)
            paint = f'fill="none" stroke="{_hex(color)}" stroke-opacity="{_opacity(color)}" stroke-width="{_n(stroke)}"'
        else:
            paint = f'fill="{_hex(color)}" fill-opacity="{_opacity(color)}"'
        extra = self._blur_filter(blur) if blur > 0 else ""
        self._body.append(
            f'<rect x="{_n(x)}" y="{_n(y)}" width="{_n(max(width, 0))}" height="{_n(max(height, 0))}" '
            f'rx="{_n(radius)}" ry="{_n(radius)}" {paint}{extra}/>'
        )

    def gradient_rounded_rect(
        self, x: float, y: float, width: float, height: float, radius: float, start: RGBA, end: RGBA
    ) -> None:
        gid = self._id("grad")
        self._defs.append(
            f'<linearGradient id="{gid}" x1="0" y1="0" x2="0" y2="1">'
            f'<stop offset="0%" stop-color="{_hex(start)}" stop-opacity="{_opacity(start)}"/>'
            f'<stop offset="100%" stop-color="{_hex(end)}" stop-opacity="{_opacity(end)}"/>'
            f"</linearGradient>"
        )
        self._body.append(
            f'<rect x="{_n(x)}" y="{_n(y)}" width="{_n(width)}" height="{_n(height)}" '
            f'rx="{_n(radius)}" ry="{_n(radius)}" fill="url(#{gid})"/>'
        )

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
        text = single_line(text)
        if not text:
            return
        style = " font-style=\"italic\"" if italic else ""
        self._body.append(
            f'<text x="{_n(x)}" y="{_n(y)}" font-family={quoteattr(font_stack(family))} '
            f'font-size="{size}" font-weight="{weight}"{style} '
            f'text-anchor="{_TEXT_ANCHOR.get(align, "start")}" '
            f'dominant-baseline="{_BASELINE.get(baseline, "text-before-edge")}" '
            f'fill="{_hex(color)}" fill-opacity="{_opacity(color)}">{escape(text)}</text>'
        )

    def markup(self) -> str:
        svg = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.width}" height="{self.height}" '
            f'viewBox="0 0 {self.width} {self.height}">'
        ]
        if self._defs:
            svg.append("<defs>" + "".join(self._defs) + "</defs>")
        svg.extend(self._body)
        svg.append("</svg>")
        return "".join(svg)

    def encode(self) -> bytes:
        return self.markup().encode("utf-8")
