"""Draw primitives emitted by the layouts.

Every primitive carries absolute pixel coordinates; surfaces only rasterize
(or serialize) them and never do layout of their own.
"""
from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import Union

from lifegrid.colors import RGBA

SYSTEM_FONT = "system"

_SPACES = re.compile(r" {2,}")


def single_line(text: str) -> str:
    """Fold line breaks, tabs and other control characters into single spaces.

    Text runs are drawn on one line, and control characters are not valid in XML.
    """
    if not any(unicodedata.category(ch) == "Cc" for ch in text):
        return text
    folded = "".join(" " if unicodedata.category(ch) == "Cc" else ch for ch in text)
    return _SPACES.sub(" ", folded)


@dataclass(frozen=True)
class FilledCircle:
    cx: float
    cy: float
    radius: float
    color: RGBA
    blur: float = 0.0


@dataclass(frozen=True)
class StrokedCircle:
    cx: float
    cy: float
    radius: float
    color: RGBA
    width: float = 2.0


@dataclass(frozen=True)
class FilledRoundedRect:
    x: float
    y: float
    width: float
    height: float
    radius: float
    color: RGBA
    blur: float = 0.0


@dataclass(frozen=True)
class StrokedRoundedRect:
    x: float
    y: float
    width: float
    height: float
    radius: float
    color: RGBA
    stroke: float = 1.0


@dataclass(frozen=True)
class GradientRoundedRect:
    """Vertical two-stop gradient, start at the top edge."""

    x: float
    y: float
    width: float
    height: float
    radius: float
    start: RGBA
    end: RGBA


@dataclass(frozen=True)
class TextRun:
    text: str
    x: float
    y: float
    size: int
    color: RGBA
    weight: int = 400
    italic: bool = False
    family: str = SYSTEM_FONT
    align: str = "left"  # left | center | right
    baseline: str = "top"  # top | middle | bottom


Primitive = Union[
    FilledCircle,
    StrokedCircle,
    FilledRoundedRect,
    StrokedRoundedRect,
    GradientRoundedRect,
    TextRun,
]
