"""Helpers shared by the year and month layouts."""
from __future__ import annotations

from typing import Callable

from lifegrid.colors import hex_to_rgba
from lifegrid.fonts import caption_family
from lifegrid.params import RenderParams
from lifegrid.primitives import SYSTEM_FONT, FilledRoundedRect, Primitive, TextRun, single_line

# measure(text, size, weight, family, italic) -> width in px
Measure = Callable[[str, int, int, str, bool], float]

CAPTION_BOTTOM_RATIO = 0.08


def estimate_text_width(text: str, size: int, weight: int = 400, family: str = SYSTEM_FONT, italic: bool = False) -> float:
    """Font-free width estimate for callers without a surface."""
    factor = 0.62 if weight >= 600 else 0.58
    return len(text) * size * factor


def background(params: RenderParams) -> FilledRoundedRect:
    return FilledRoundedRect(0, 0, params.width, params.height, 0, hex_to_rgba(params.background))


def segmented_row(
    segments: list[tuple[str, tuple[int, int, int, int]]],
    center_x: float,
    y: float,
    size: int,
    margin: float,
    measure: Measure,
    weight: int = 400,
    baseline: str = "middle",
) -> list[TextRun]:
    """Lay out colored text segments left to right, centered as one unit.

    `margin` is the gap between neighbouring segments.
    """
    widths = [measure(text, size, weight, SYSTEM_FONT, False) for text, _ in segments]
    total = sum(widths) + margin * (len(segments) - 1)
    x = center_x - total / 2
    runs: list[TextRun] = []
    for (text, color), w in zip(segments, widths):
        runs.append(TextRun(text, x, y, size, color, weight=weight, align="left", baseline=baseline))
        x += w + margin
    return runs


def stats_segments(days_left_text: str, percent: float, params: RenderParams, separator_alpha: float = 1.0):
    return [
        (days_left_text, hex_to_rgba(params.accent)),
        ("•", hex_to_rgba(params.text, separator_alpha)),
        (f"{percent:.1f}%", hex_to_rgba(params.text)),
    ]


def caption(params: RenderParams, size: int) -> list[Primitive]:
    """Italic caption near the bottom edge, or nothing when hidden."""
    if not params.caption_visible:
        return []
    return [
        TextRun(
            single_line(params.caption),
            params.width / 2,
            params.height - params.height * CAPTION_BOTTOM_RATIO,
            size,
            hex_to_rgba(params.text),
            weight=400,
            italic=True,
            family=caption_family(params.font),
            align="center",
            baseline="bottom",
        )
    ]
