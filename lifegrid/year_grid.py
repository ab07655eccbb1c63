from __future__ import annotations

import math
from dataclasses import dataclass

from lifegrid.calendar_math import CURRENT, PASSED, DateSnapshot, classify_day
from lifegrid.colors import hex_to_rgba
from lifegrid.layout_common import Measure, background, caption, segmented_row, stats_segments
from lifegrid.params import RenderParams
from lifegrid.primitives import FilledCircle, Primitive, StrokedCircle

GRID_WIDTH_RATIO = 0.85
CLOCK_OFFSET_RATIO = 0.05
GRID_TO_SUBTITLE_GAP = 25
SEPARATOR_MARGIN = 16
FUTURE_STROKE = 2


@dataclass(frozen=True)
class YearGridGeometry:
    cell_size: int
    columns: int
    rows: int
    grid_width: int
    grid_height: int
    offset_x: float
    offset_y: float
    subtitle_font_size: int
    subtitle_y: float


def subtitle_font_size(width: int) -> int:
    return max(28, width // 32)


def caption_font_size(width: int) -> int:
    return max(42, width // 20)


def year_grid_geometry(width: int, height: int, radius: int, spacing: int, total_days: int) -> YearGridGeometry:
    """Fit `total_days` circles into 85% of the width, centered below the clock area."""
    cell_size = radius * 2 + spacing
    # Never fewer than one column, even for tiny canvases
    columns = max(1, math.floor(width * GRID_WIDTH_RATIO / cell_size))
    rows = math.ceil(total_days / columns)

    grid_width = columns * cell_size - spacing
    grid_height = rows * cell_size - spacing

    font_size = subtitle_font_size(width)
    content_height = grid_height + GRID_TO_SUBTITLE_GAP + font_size
    content_start_y = (height - content_height) / 2 + height * CLOCK_OFFSET_RATIO

    return YearGridGeometry(
        cell_size=cell_size,
        columns=columns,
        rows=rows,
        grid_width=grid_width,
        grid_height=grid_height,
        offset_x=(width - grid_width) / 2,
        offset_y=content_start_y,
        subtitle_font_size=font_size,
        subtitle_y=content_start_y + grid_height + GRID_TO_SUBTITLE_GAP,
    )


def layout_year(snapshot: DateSnapshot, params: RenderParams, measure: Measure) -> list[Primitive]:
    total = snapshot.total_days_in_year
    today = snapshot.day_of_year
    radius = params.radius
    geo = year_grid_geometry(params.width, params.height, radius, params.spacing, total)

    filled = hex_to_rgba(params.filled)
    highlight = hex_to_rgba(params.highlight)
    empty = hex_to_rgba(params.empty)

    out: list[Primitive] = [background(params)]
    for i in range(total):
        col = i % geo.columns
        row = i // geo.columns
        cx = geo.offset_x + col * geo.cell_size + radius
        cy = geo.offset_y + row * geo.cell_size + radius
        state = classify_day(i + 1, today)
        if state == PASSED:
            out.append(FilledCircle(cx, cy, radius, filled))
        elif state == CURRENT:
            out.append(FilledCircle(cx, cy, radius, highlight))
        else:
            out.append(StrokedCircle(cx, cy, radius, empty, FUTURE_STROKE))

    out.extend(
        segmented_row(
            stats_segments(f"{snapshot.days_remaining_in_year}d left", snapshot.year_progress_percent, params),
            params.width / 2,
            geo.subtitle_y,
            geo.subtitle_font_size,
            SEPARATOR_MARGIN,
            measure,
            baseline="top",
        )
    )
    out.extend(caption(params, caption_font_size(params.width)))
    return out
