from __future__ import annotations

from lifegrid.colors import RGBA
from lifegrid.primitives import (
    SYSTEM_FONT,
    FilledCircle,
    FilledRoundedRect,
    GradientRoundedRect,
    Primitive,
    StrokedCircle,
    StrokedRoundedRect,
    TextRun,
)


class Surface:
    """Drawing contract shared by the raster and markup backends.

    Layouts never talk to a surface directly; `draw()` maps each primitive to
    the matching drawing call.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def measure_text(self, text: str, size: int, weight: int = 400, family: str = SYSTEM_FONT, italic: bool = False) -> float:
        raise NotImplementedError

    def fill_rect(self, x: float, y: float, width: float, height: float, color: RGBA) -> None:
        raise NotImplementedError

    def circle(self, cx: float, cy: float, radius: float, color: RGBA, *, stroke: float | None = None, blur: float = 0.0) -> None:
        raise NotImplementedError

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
        raise NotImplementedError

    def gradient_rounded_rect(
        self, x: float, y: float, width: float, height: float, radius: float, start: RGBA, end: RGBA
    ) -> None:
        raise NotImplementedError

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
        raise NotImplementedError

    def encode(self) -> bytes:
        raise NotImplementedError

    def draw(self, p: Primitive) -> None:
        if isinstance(p, FilledCircle):
            self.circle(p.cx, p.cy, p.radius, p.color, blur=p.blur)
        elif isinstance(p, StrokedCircle):
            self.circle(p.cx, p.cy, p.radius, p.color, stroke=p.width)
        elif isinstance(p, FilledRoundedRect):
            if p.radius <= 0 and p.blur <= 0:
                self.fill_rect(p.x, p.y, p.width, p.height, p.color)
            else:
                self.rounded_rect(p.x, p.y, p.width, p.height, p.radius, p.color, blur=p.blur)
        elif isinstance(p, StrokedRoundedRect):
            self.rounded_rect(p.x, p.y, p.width, p.height, p.radius, p.color, stroke=p.stroke)
        elif isinstance(p, GradientRoundedRect):
            self.gradient_rounded_rect(p.x, p.y, p.width, p.height, p.radius, p.start, p.end)
        elif isinstance(p, TextRun):
            self.fill_text(
                p.text,
                p.x,
                p.y,
                p.size,
                p.color,
                weight=p.weight,
                italic=p.italic,
                family=p.family,
                align=p.align,
                baseline=p.baseline,
            )
        else:
            raise TypeError(f"Unsupported primitive: {type(p).__name__}")
