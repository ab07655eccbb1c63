from datetime import datetime, timezone
from xml.dom import minidom

from lifegrid.params import RenderParams
from lifegrid.primitives import FilledCircle, StrokedCircle, TextRun
from lifegrid.render import render_image
from lifegrid.svg import SYSTEM_STACK, SvgSurface, font_stack

NOW = datetime(2026, 10, 18, 6, 0, tzinfo=timezone.utc)


def test_empty_document():
    markup = SvgSurface(120, 80).markup()
    assert markup.startswith('<svg xmlns="http://www.w3.org/2000/svg" width="120" height="80"')
    assert markup.endswith("</svg>")
    assert "<defs>" not in markup


def test_text_is_escaped_and_anchored():
    surface = SvgSurface(100, 100)
    surface.draw(TextRun("a<b & c", 50, 50, 20, (255, 255, 255, 255), align="center", baseline="middle"))
    markup = surface.markup()
    assert "a&lt;b &amp; c" in markup
    assert 'text-anchor="middle"' in markup
    assert 'dominant-baseline="central"' in markup
    assert f'font-family="{SYSTEM_STACK}"' in markup


def test_opacity_and_stroke():
    surface = SvgSurface(100, 100)
    surface.draw(FilledCircle(10, 10, 5, (255, 0, 0, 51)))
    surface.draw(StrokedCircle(30, 30, 5, (0, 0, 255, 255), 2))
    markup = surface.markup()
    assert 'fill="#FF0000" fill-opacity="0.2"' in markup
    assert 'stroke="#0000FF"' in markup
    assert 'stroke-width="2.0"' in markup


def test_font_stack():
    assert font_stack("system") == SYSTEM_STACK
    assert font_stack("serif") == "serif"
    assert font_stack("Lora") == "'Lora', serif"


def test_glass_month_uses_filters_and_gradients():
    params = RenderParams(width=360, height=780, show_caption=True, caption="Stay on it")
    markup = render_image("month", params, "glass", fmt="svg", now=NOW).decode("utf-8")
    assert "<feGaussianBlur" in markup
    assert "<linearGradient" in markup
    assert "Oct 2026" in markup
    assert "Stay on it" in markup
    assert 'font-style="italic"' in markup


def test_year_svg_has_one_circle_per_day():
    params = RenderParams(width=400, height=800, radius=4, spacing=2)
    markup = render_image("year", params, fmt="svg", now=NOW).decode("utf-8")
    assert markup.count("<circle") == 365
    assert "74d left" in markup


def test_control_characters_keep_markup_well_formed():
    params = RenderParams(width=300, height=600, radius=2, spacing=1, show_caption=True, caption="hi\x01there\nnow")
    markup = render_image("year", params, fmt="svg", now=NOW)
    doc = minidom.parseString(markup)
    texts = [node.firstChild.data for node in doc.getElementsByTagName("text")]
    assert "hi there now" in texts
