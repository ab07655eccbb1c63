from datetime import datetime, timezone
from io import BytesIO

import pytest
from PIL import Image

from lifegrid.imaging import PillowSurface, _sanitize_text_render, _strip_symbols_emojis
from lifegrid.params import RenderParams
from lifegrid.primitives import FilledCircle, FilledRoundedRect, GradientRoundedRect, TextRun
from lifegrid.render import render_image

NOW = datetime(2026, 10, 18, 6, 0, tzinfo=timezone.utc)


def _open(data: bytes) -> Image.Image:
    return Image.open(BytesIO(data)).convert("RGB")


def test_surface_encodes_png_with_background():
    surface = PillowSurface(40, 30, background=(10, 20, 30))
    data = surface.encode()
    assert data.startswith(b"\x89PNG")
    img = _open(data)
    assert img.size == (40, 30)
    assert img.getpixel((0, 0)) == (10, 20, 30)


def test_translucent_fill_blends():
    surface = PillowSurface(10, 10)
    surface.draw(FilledRoundedRect(0, 0, 10, 10, 0, (255, 255, 255, 128)))
    r, g, b = surface.image.getpixel((5, 5))
    assert r == pytest.approx(128, abs=2)
    assert r == g == b


def test_blurred_circle_fades_out():
    surface = PillowSurface(100, 100)
    surface.draw(FilledCircle(50, 50, 20, (255, 0, 0, 255), blur=6))
    center = surface.image.getpixel((50, 50))
    edge = surface.image.getpixel((50, 72))
    corner = surface.image.getpixel((2, 2))
    assert center[0] > edge[0] > corner[0]
    assert corner == (0, 0, 0)


def test_gradient_runs_top_to_bottom():
    surface = PillowSurface(20, 100)
    surface.draw(GradientRoundedRect(0, 0, 20, 100, 0, (255, 0, 0, 255), (0, 0, 255, 255)))
    top = surface.image.getpixel((10, 1))
    bottom = surface.image.getpixel((10, 98))
    assert top[0] > 200 and top[2] < 50
    assert bottom[2] > 200 and bottom[0] < 50


def test_text_draws_pixels():
    surface = PillowSurface(200, 60)
    surface.draw(TextRun("42", 100, 30, 32, (255, 255, 255, 255), weight=700, align="center", baseline="middle"))
    assert surface.image.getbbox() is not None


def test_symbols_are_stripped():
    assert _strip_symbols_emojis("hi ❤️ there \U0001F600") == "hi  there "
    assert _strip_symbols_emojis("12d left • 3.0%") == "12d left • 3.0%"


def test_year_png_dimensions():
    params = RenderParams(width=200, height=400, radius=2, spacing=1, background="#203040")
    img = _open(render_image("year", params, now=NOW))
    assert img.size == (200, 400)
    assert img.getpixel((0, 0)) == (32, 48, 64)


@pytest.mark.parametrize("style", ["glass", "classic", "bold"])
def test_month_png_dimensions(style, small_params):
    img = _open(render_image("month", small_params, style, now=NOW))
    assert img.size == (360, 780)


def test_control_characters_fold_to_spaces():
    assert _sanitize_text_render("line one\nline two") == "line one line two"
    assert _sanitize_text_render("a\r\n\tb") == "a b"


def test_multiline_caption_renders():
    params = RenderParams(width=200, height=400, radius=2, spacing=1, show_caption=True, caption="line one\nline two")
    img = _open(render_image("year", params, now=NOW))
    assert img.size == (200, 400)
