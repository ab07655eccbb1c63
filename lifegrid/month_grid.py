"""Month calendar layouts.

One algorithm renders every month style. A `MonthStyle` descriptor picks the
chrome around the grid (none, translucent card or solid shell), the cell shape
and the weekday label set; everything else (cell mapping, day classification,
centering) is shared so the styles cannot drift apart.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from lifegrid.calendar_math import CURRENT, PASSED, DateSnapshot, classify_day
from lifegrid.colors import hex_to_rgba
from lifegrid.layout_common import Measure, background, caption, segmented_row, stats_segments
from lifegrid.params import DEFAULT_MONTH_STYLE, RenderParams
from lifegrid.primitives import (
    FilledCircle,
    FilledRoundedRect,
    GradientRoundedRect,
    SYSTEM_FONT,
    Primitive,
    StrokedRoundedRect,
    TextRun,
)

COLUMNS = 7
DAY_NAMES = ["S", "M", "T", "W", "T", "F", "S"]
DAY_NAMES_LONG = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

CHROME_NONE = "none"
CHROME_CARD = "card"
CHROME_SHELL = "shell"


@dataclass(frozen=True)
class MonthStyle:
    key: str
    chrome: str
    cell_shape: str  # "circle" | "rounded_rect"
    header_labels: str  # "short" | "long"
    uppercase_title: bool = False

    @property
    def day_names(self) -> list[str]:
        return DAY_NAMES_LONG if self.header_labels == "long" else DAY_NAMES


MONTH_STYLE_DESCRIPTORS: dict[str, MonthStyle] = {
    "glass": MonthStyle("glass", CHROME_CARD, "rounded_rect", "short"),
    "classic": MonthStyle("classic", CHROME_NONE, "circle", "long"),
    "bold": MonthStyle("bold", CHROME_SHELL, "rounded_rect", "short", uppercase_title=True),
}


def month_style(key: str | None) -> MonthStyle:
    """Descriptor for a style key; anything unknown renders as glass."""
    return MONTH_STYLE_DESCRIPTORS.get(key or "", MONTH_STYLE_DESCRIPTORS[DEFAULT_MONTH_STYLE])


@dataclass(frozen=True)
class MonthCell:
    index: int
    row: int
    col: int
    day_number: int | None
    state: str | None

    @property
    def is_placeholder(self) -> bool:
        return self.day_number is None

    @property
    def is_weekend(self) -> bool:
        return self.col in (0, COLUMNS - 1)


def month_rows(snapshot: DateSnapshot) -> int:
    return math.ceil((snapshot.total_days_in_month + snapshot.first_weekday_of_month) / COLUMNS)


def month_cells(snapshot: DateSnapshot) -> list[MonthCell]:
    """Every grid slot, Sunday-first; slots outside the month are placeholders."""
    cells: list[MonthCell] = []
    for i in range(month_rows(snapshot) * COLUMNS):
        day_number = i - snapshot.first_weekday_of_month + 1
        if 1 <= day_number <= snapshot.total_days_in_month:
            cells.append(MonthCell(i, i // COLUMNS, i % COLUMNS, day_number, classify_day(day_number, snapshot.day_of_month)))
        else:
            cells.append(MonthCell(i, i // COLUMNS, i % COLUMNS, None, None))
    return cells


@dataclass(frozen=True)
class MonthGeometry:
    rows: int
    cell_size: int
    gap: int
    cell_radius: int
    grid_x: float
    grid_y: float
    grid_width: int
    grid_height: int
    frame_x: float
    frame_y: float
    frame_width: float
    frame_height: float
    frame_radius: int
    frame_padding: int
    title_size: int
    title_center_y: float
    header_size: int
    header_center_y: float
    date_size: int
    stats_size: int
    stats_center_y: float
    caption_size: int
    badge_size: int = 0
    badge_y: float = 0.0
    badge_height: int = 0

    def cell_origin(self, cell: MonthCell) -> tuple[float, float]:
        step = self.cell_size + self.gap
        return self.grid_x + cell.col * step, self.grid_y + cell.row * step

    def column_center_x(self, col: int) -> float:
        return self.grid_x + col * (self.cell_size + self.gap) + self.cell_size / 2


def _js_round(value: float) -> int:
    return math.floor(value + 0.5)


def _card_geometry(width: int, height: int, rows: int) -> MonthGeometry:
    title_size = max(24, width // 24)
    badge_size = max(14, width // 52)
    header_size = max(12, width // 70)
    date_size = max(18, width // 36)
    stats_size = max(18, width // 44)

    card_width = _js_round(width * 0.86)
    padding_x = max(14, width // 40)
    gap = max(3, width // 190)
    cell = max(1, (card_width - padding_x * 2 - gap * (COLUMNS - 1)) // COLUMNS)
    grid_width = COLUMNS * cell + gap * (COLUMNS - 1)
    grid_height = rows * cell + gap * (rows - 1)

    top_padding = max(18, width // 42)
    section_gap = max(10, width // 80)
    bottom_padding = top_padding
    badge_height = max(28, width // 42)
    header_height = header_size + max(8, width // 120)

    card_height = (
        top_padding
        + title_size
        + section_gap
        + badge_height
        + section_gap
        + header_height
        + section_gap
        + grid_height
        + section_gap
        + stats_size
        + bottom_padding
    )
    card_x = (width - card_width) / 2
    card_y = (height - card_height) / 2 + height * 0.06

    badge_y = card_y + top_padding + title_size + section_gap
    header_y = badge_y + badge_height + section_gap
    grid_y = header_y + header_height + section_gap

    return MonthGeometry(
        rows=rows,
        cell_size=cell,
        gap=gap,
        cell_radius=max(6, math.floor(cell * 0.28)),
        grid_x=card_x + (card_width - grid_width) / 2,
        grid_y=grid_y,
        grid_width=grid_width,
        grid_height=grid_height,
        frame_x=card_x,
        frame_y=card_y,
        frame_width=card_width,
        frame_height=card_height,
        frame_radius=max(20, width // 36),
        frame_padding=padding_x,
        title_size=title_size,
        title_center_y=card_y + top_padding + title_size / 2,
        header_size=header_size,
        header_center_y=header_y + header_height / 2,
        date_size=date_size,
        stats_size=stats_size,
        stats_center_y=grid_y + grid_height + section_gap + stats_size / 2,
        caption_size=max(32, width // 22),
        badge_size=badge_size,
        badge_y=badge_y,
        badge_height=badge_height,
    )


def _plain_geometry(width: int, height: int, rows: int) -> MonthGeometry:
    title_size = max(34, width // 24)
    header_size = max(20, width // 42)
    stats_size = max(26, width // 34)

    cell = max(1, math.floor(width * 0.85 / COLUMNS))
    grid_width = COLUMNS * cell
    grid_height = rows * cell

    title_height = title_size + 24
    header_height = header_size + 18
    grid_to_stats = 24
    content_height = title_height + header_height + grid_height + grid_to_stats + stats_size
    start_y = (height - content_height) / 2 + height * 0.05

    grid_x = (width - grid_width) / 2
    header_y = start_y + title_height
    grid_y = header_y + header_height

    return MonthGeometry(
        rows=rows,
        cell_size=cell,
        gap=0,
        cell_radius=0,
        grid_x=grid_x,
        grid_y=grid_y,
        grid_width=grid_width,
        grid_height=grid_height,
        frame_x=grid_x,
        frame_y=grid_y,
        frame_width=grid_width,
        frame_height=grid_height,
        frame_radius=0,
        frame_padding=0,
        title_size=title_size,
        title_center_y=start_y + title_height / 2,
        header_size=header_size,
        header_center_y=header_y + header_height / 2,
        date_size=max(28, width // 30),
        stats_size=stats_size,
        stats_center_y=grid_y + grid_height + grid_to_stats,
        caption_size=max(38, width // 20),
    )


def _shell_geometry(width: int, height: int, rows: int) -> MonthGeometry:
    title_size = max(26, width // 23)
    header_size = max(12, width // 72)
    stats_size = max(20, width // 42)

    shell_width = _js_round(width * 0.9)
    padding = max(14, width // 44)
    gap = max(4, width // 180)
    cell = max(1, (shell_width - padding * 2 - gap * (COLUMNS - 1)) // COLUMNS)
    grid_width = COLUMNS * cell + gap * (COLUMNS - 1)
    grid_height = rows * cell + gap * (rows - 1)

    title_block = title_size + max(18, width // 66)
    header_block = header_size + max(14, width // 94)
    stats_block = stats_size + max(16, width // 90)
    shell_height = padding + title_block + header_block + grid_height + stats_block + padding

    shell_x = (width - shell_width) / 2
    shell_y = (height - shell_height) / 2 + height * 0.055
    header_y = shell_y + padding + title_block
    grid_y = header_y + header_block

    return MonthGeometry(
        rows=rows,
        cell_size=cell,
        gap=gap,
        cell_radius=max(6, math.floor(cell * 0.24)),
        grid_x=shell_x + (shell_width - grid_width) / 2,
        grid_y=grid_y,
        grid_width=grid_width,
        grid_height=grid_height,
        frame_x=shell_x,
        frame_y=shell_y,
        frame_width=shell_width,
        frame_height=shell_height,
        frame_radius=max(22, width // 34),
        frame_padding=padding,
        title_size=title_size,
        title_center_y=shell_y + padding + title_size / 2,
        header_size=header_size,
        header_center_y=header_y + header_size / 2,
        date_size=max(20, width // 34),
        stats_size=stats_size,
        stats_center_y=grid_y + grid_height + stats_size / 2 + max(10, width // 88),
        caption_size=max(34, width // 21),
    )


_GEOMETRY = {
    CHROME_CARD: _card_geometry,
    CHROME_NONE: _plain_geometry,
    CHROME_SHELL: _shell_geometry,
}


def month_geometry(style: MonthStyle, width: int, height: int, rows: int) -> MonthGeometry:
    return _GEOMETRY[style.chrome](width, height, rows)


def _glow_size(width: int) -> int:
    return max(18, width // 70)


def _chrome(style: MonthStyle, geo: MonthGeometry, params: RenderParams) -> list[Primitive]:
    w, h = params.width, params.height
    if style.chrome == CHROME_CARD:
        # Ambient accent glow centered slightly above the middle
        cx, cy = w / 2, h * 0.45
        # Stands in for a radial gradient fading to transparent at 58% of the farthest corner
        reach = math.hypot(max(cx, w - cx), max(cy, h - cy)) * 0.58
        return [
            FilledCircle(cx, cy, reach, hex_to_rgba(params.accent, 0.14), blur=reach / 2),
            GradientRoundedRect(
                geo.frame_x,
                geo.frame_y,
                geo.frame_width,
                geo.frame_height,
                geo.frame_radius,
                hex_to_rgba(params.text, 0.1),
                hex_to_rgba(params.text, 0.04),
            ),
            StrokedRoundedRect(
                geo.frame_x,
                geo.frame_y,
                geo.frame_width,
                geo.frame_height,
                geo.frame_radius,
                hex_to_rgba(params.text, 0.18),
                max(1, w // 640),
            ),
        ]
    if style.chrome == CHROME_SHELL:
        pad = geo.frame_padding
        return [
            FilledRoundedRect(
                geo.frame_x, geo.frame_y, geo.frame_width, geo.frame_height, geo.frame_radius, hex_to_rgba(params.text, 0.08)
            ),
            StrokedRoundedRect(
                geo.frame_x,
                geo.frame_y,
                geo.frame_width,
                geo.frame_height,
                geo.frame_radius,
                hex_to_rgba(params.accent, 0.35),
                max(1.5, w / 540),
            ),
            # Ribbon bar behind the title
            FilledRoundedRect(
                geo.frame_x + pad,
                geo.frame_y + pad,
                geo.frame_width - pad * 2,
                max(34, w // 36),
                max(17, w // 72),
                hex_to_rgba(params.accent, 0.2),
            ),
        ]
    return []


def _title(style: MonthStyle, geo: MonthGeometry, snapshot: DateSnapshot, params: RenderParams) -> TextRun:
    if style.uppercase_title:
        label = f"{snapshot.month_name.upper()} {snapshot.year}"
    else:
        label = f"{snapshot.month_abbr} {snapshot.year}"
    return TextRun(
        label,
        params.width / 2,
        geo.title_center_y,
        geo.title_size,
        hex_to_rgba(params.filled),
        weight=700 if style.chrome == CHROME_SHELL else 600,
        align="center",
        baseline="middle",
    )


def _badge(geo: MonthGeometry, snapshot: DateSnapshot, params: RenderParams, measure: Measure) -> list[Primitive]:
    text = f"{snapshot.day_of_month}/{snapshot.total_days_in_month} complete"
    w = params.width
    text_width = measure(text, geo.badge_size, 600, SYSTEM_FONT, False)
    badge_width = max(math.floor(geo.frame_width * 0.34), math.ceil(text_width) + max(22, w // 54))
    x = (w - badge_width) / 2
    radius = geo.badge_height / 2
    accent = params.accent
    return [
        FilledRoundedRect(x, geo.badge_y, badge_width, geo.badge_height, radius, hex_to_rgba(accent, 0.2)),
        StrokedRoundedRect(x, geo.badge_y, badge_width, geo.badge_height, radius, hex_to_rgba(accent, 0.5), 1),
        TextRun(
            text,
            w / 2,
            geo.badge_y + geo.badge_height / 2,
            geo.badge_size,
            hex_to_rgba(accent),
            weight=600,
            align="center",
            baseline="middle",
        ),
    ]


# chrome -> (weight, weekend accent alpha or None, weekday text alpha)
_HEADER_TONES = {
    CHROME_CARD: (600, 0.86, 0.68),
    CHROME_NONE: (500, None, 0.72),
    CHROME_SHELL: (700, 1.0, 0.72),
}


def _headers(style: MonthStyle, geo: MonthGeometry, params: RenderParams) -> list[Primitive]:
    weight, weekend_alpha, text_alpha = _HEADER_TONES[style.chrome]
    out: list[Primitive] = []
    for col, name in enumerate(style.day_names):
        if weekend_alpha is not None and col in (0, COLUMNS - 1):
            color = hex_to_rgba(params.accent, weekend_alpha)
        else:
            color = hex_to_rgba(params.text, text_alpha)
        out.append(
            TextRun(
                name,
                geo.column_center_x(col),
                geo.header_center_y,
                geo.header_size,
                color,
                weight=weight,
                align="center",
                baseline="middle",
            )
        )
    return out


def _grid_lines(geo: MonthGeometry, params: RenderParams) -> list[Primitive]:
    """Explicit 1px mesh: rows+1 horizontal and COLUMNS+1 vertical lines."""
    color = hex_to_rgba(params.text, 0.24)
    out: list[Primitive] = []
    for row in range(geo.rows + 1):
        out.append(FilledRoundedRect(geo.grid_x, geo.grid_y + row * geo.cell_size, geo.grid_width, 1, 0, color))
    for col in range(COLUMNS + 1):
        out.append(FilledRoundedRect(geo.grid_x + col * geo.cell_size, geo.grid_y, 1, geo.grid_height, 0, color))
    return out


def _day_text(cell: MonthCell, geo: MonthGeometry, x: float, y: float, color, weight: int) -> TextRun:
    return TextRun(
        str(cell.day_number),
        x + geo.cell_size / 2,
        y + geo.cell_size / 2,
        geo.date_size,
        color,
        weight=weight,
        align="center",
        baseline="middle",
    )


def _circle_cell(cell: MonthCell, geo: MonthGeometry, params: RenderParams) -> list[Primitive]:
    if cell.is_placeholder:
        return []
    x, y = geo.cell_origin(cell)
    out: list[Primitive] = []
    if cell.state == CURRENT:
        out.append(
            FilledCircle(x + geo.cell_size / 2, y + geo.cell_size / 2, geo.cell_size * 0.35, hex_to_rgba(params.highlight))
        )
        color = hex_to_rgba(params.background)
    elif cell.state == PASSED:
        color = hex_to_rgba(params.filled)
    else:
        color = hex_to_rgba(params.text, 0.46)
    out.append(_day_text(cell, geo, x, y, color, 700 if cell.state == CURRENT else 400))
    return out


def _card_tile(cell: MonthCell, geo: MonthGeometry, params: RenderParams) -> list[Primitive]:
    x, y = geo.cell_origin(cell)
    size, radius = geo.cell_size, geo.cell_radius
    text = params.text
    if cell.is_placeholder:
        return [
            FilledRoundedRect(x, y, size, size, radius, hex_to_rgba(text, 0.02)),
            StrokedRoundedRect(x, y, size, size, radius, hex_to_rgba(text, 0.04), 1),
        ]

    out: list[Primitive] = []
    if cell.state == CURRENT:
        out.append(
            FilledRoundedRect(x, y, size, size, radius, hex_to_rgba(params.highlight, 0.45), blur=_glow_size(params.width) / 2)
        )
        out.append(
            GradientRoundedRect(x, y, size, size, radius, hex_to_rgba(params.highlight), hex_to_rgba(params.accent))
        )
        border = hex_to_rgba(params.highlight, 0.94)
        color = hex_to_rgba(params.background)
        weight = 700
    elif cell.state == PASSED:
        out.append(FilledRoundedRect(x, y, size, size, radius, hex_to_rgba(params.filled, 0.2)))
        border = hex_to_rgba(params.filled, 0.42)
        color = hex_to_rgba(params.filled)
        weight = 600
    else:
        out.append(FilledRoundedRect(x, y, size, size, radius, hex_to_rgba(params.empty, 0.14)))
        border = hex_to_rgba(text, 0.12)
        color = hex_to_rgba(params.accent, 0.72) if cell.is_weekend else hex_to_rgba(text, 0.62)
        weight = 500
    out.append(StrokedRoundedRect(x, y, size, size, radius, border, 1))
    out.append(_day_text(cell, geo, x, y, color, weight))
    return out


def _shell_tile(cell: MonthCell, geo: MonthGeometry, params: RenderParams) -> list[Primitive]:
    if cell.is_placeholder:
        return []
    x, y = geo.cell_origin(cell)
    size, radius = geo.cell_size, geo.cell_radius
    if cell.state == CURRENT:
        return [
            FilledRoundedRect(x, y, size, size, radius, hex_to_rgba(params.highlight, 0.45), blur=_glow_size(params.width) / 2),
            FilledRoundedRect(x, y, size, size, radius, hex_to_rgba(params.accent)),
            StrokedRoundedRect(x, y, size, size, radius, hex_to_rgba(params.highlight, 0.75), 2),
            _day_text(cell, geo, x, y, hex_to_rgba(params.background), 800),
        ]
    if cell.state == PASSED:
        return [
            FilledRoundedRect(x, y, size, size, radius, hex_to_rgba(params.filled, 0.24)),
            _day_text(cell, geo, x, y, hex_to_rgba(params.filled), 600),
        ]
    return [
        FilledRoundedRect(x, y, size, size, radius, hex_to_rgba(params.empty, 0.24)),
        _day_text(cell, geo, x, y, hex_to_rgba(params.text, 0.62), 500),
    ]


def _cell(style: MonthStyle, cell: MonthCell, geo: MonthGeometry, params: RenderParams) -> list[Primitive]:
    if style.cell_shape == "circle":
        return _circle_cell(cell, geo, params)
    if style.chrome == CHROME_SHELL:
        return _shell_tile(cell, geo, params)
    return _card_tile(cell, geo, params)


def _stats(style: MonthStyle, geo: MonthGeometry, snapshot: DateSnapshot, params: RenderParams, measure: Measure) -> list[Primitive]:
    left = snapshot.days_remaining_in_month
    percent = snapshot.month_progress_percent
    w = params.width
    if style.chrome == CHROME_SHELL:
        return [
            TextRun(
                f"{left}d left   •   {percent:.1f}%",
                w / 2,
                geo.stats_center_y,
                geo.stats_size,
                hex_to_rgba(params.text),
                weight=600,
                align="center",
                baseline="middle",
            )
        ]
    if style.chrome == CHROME_CARD:
        days_left = f"{left}d left" if w < 700 else f"{left} days left"
        segments = stats_segments(days_left, percent, params, separator_alpha=0.8)
        return segmented_row(segments, w / 2, geo.stats_center_y, geo.stats_size, max(10, w // 90), measure, weight=500)
    segments = stats_segments(f"{left}d left", percent, params)
    return segmented_row(segments, w / 2, geo.stats_center_y, geo.stats_size, 14, measure)


def layout_month(snapshot: DateSnapshot, params: RenderParams, style: MonthStyle, measure: Measure) -> list[Primitive]:
    geo = month_geometry(style, params.width, params.height, month_rows(snapshot))

    out: list[Primitive] = [background(params)]
    out.extend(_chrome(style, geo, params))
    out.append(_title(style, geo, snapshot, params))
    if style.chrome == CHROME_CARD:
        out.extend(_badge(geo, snapshot, params, measure))
    out.extend(_headers(style, geo, params))
    if style.chrome == CHROME_NONE:
        out.extend(_grid_lines(geo, params))
    for cell in month_cells(snapshot):
        out.extend(_cell(style, cell, geo, params))
    out.extend(_stats(style, geo, snapshot, params, measure))
    out.extend(caption(params, geo.caption_size))
    return out
