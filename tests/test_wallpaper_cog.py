from cogs.wallpaper_cog import DEVICE_CHOICES, MAX_CAPTION_LENGTH, THEME_CHOICES, build_params, render_png
from lifegrid.params import RenderParams


def test_defaults():
    assert build_params() == RenderParams()


def test_choices_cover_presets():
    assert len(THEME_CHOICES) == 12
    assert {c.value for c in DEVICE_CHOICES} >= {"iphone-15", "iphone-17-pro-max"}


def test_options_are_applied():
    params = build_params(style="bold", theme="ocean", device="iphone-14", caption="  focus  ")
    assert params.month_style == "bold"
    assert params.background == "0C4A6E"
    assert (params.width, params.height) == (1170, 2532)
    assert params.caption == "focus"
    assert params.caption_visible


def test_blank_caption_stays_hidden():
    assert not build_params(caption="   ").caption_visible


def test_caption_is_truncated():
    params = build_params(caption="x" * 200)
    assert len(params.caption) == MAX_CAPTION_LENGTH


def test_unknown_keys_keep_defaults():
    assert build_params(style="retro", theme="nope", device="pager") == RenderParams()


def test_render_png_returns_rewound_buffer():
    buf = render_png("year", RenderParams(width=120, height=240, radius=2, spacing=1))
    assert buf.tell() == 0
    assert buf.read(4) == b"\x89PNG"
