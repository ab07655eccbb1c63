from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable

from lifegrid.calendar_math import DateSnapshot, take_snapshot
from lifegrid.config import utc_offset
from lifegrid.layout_common import Measure, estimate_text_width
from lifegrid.month_grid import layout_month, month_style
from lifegrid.params import RenderParams
from lifegrid.primitives import Primitive
from lifegrid.year_grid import layout_year

MODE_YEAR = "year"
MODE_MONTH = "month"

FORMAT_PNG = "png"
FORMAT_SVG = "svg"

MEDIA_TYPES = {
    FORMAT_PNG: "image/png",
    FORMAT_SVG: "image/svg+xml",
}


def render(
    mode: str,
    params: RenderParams,
    style: str | None = None,
    *,
    measure: Measure | None = None,
    snapshot: DateSnapshot | None = None,
) -> list[Primitive]:
    """Lay out one wallpaper and return its draw primitives in paint order.

    `mode` is "year" or "month"; anything other than "month" renders the year
    grid. For month mode `style` falls back to params.month_style, and unknown
    styles render as glass. The date snapshot is taken now unless given.
    """
    snapshot = snapshot or take_snapshot(offset=utc_offset())
    measure = measure or estimate_text_width
    if mode == MODE_MONTH:
        return layout_month(snapshot, params, month_style(style or params.month_style), measure)
    return layout_year(snapshot, params, measure)


def new_surface(fmt: str, width: int, height: int):
    """Surface for an output format; PNG unless SVG is asked for."""
    if fmt == FORMAT_SVG:
        from lifegrid.svg import SvgSurface

        return SvgSurface(width, height)
    from lifegrid.imaging import PillowSurface

    return PillowSurface(width, height)


def paint(surface, primitives: Iterable[Primitive]) -> None:
    for primitive in primitives:
        surface.draw(primitive)


def render_image(
    mode: str,
    params: RenderParams,
    style: str | None = None,
    *,
    fmt: str = FORMAT_PNG,
    now: datetime | None = None,
) -> bytes:
    """Render straight to encoded bytes (PNG, or SVG markup as UTF-8)."""
    fmt = fmt if fmt in MEDIA_TYPES else FORMAT_PNG
    snapshot = take_snapshot(now, offset=utc_offset())
    surface = new_surface(fmt, params.width, params.height)
    primitives = render(mode, params, style, measure=surface.measure_text, snapshot=snapshot)
    paint(surface, primitives)
    logging.debug(
        "Rendered %s wallpaper %sx%s (%s primitives, %s)", mode, params.width, params.height, len(primitives), fmt
    )
    return surface.encode()
