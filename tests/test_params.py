from lifegrid.params import (
    PRESET_THEMES,
    RenderParams,
    generate_api_url,
    params_from_query,
    params_to_query,
    parse_bool,
    parse_int,
)


def test_empty_query_gives_defaults():
    params = params_from_query({})
    assert params == RenderParams()
    assert (params.width, params.height) == (1284, 2778)
    assert params.background == "000000"
    assert params.highlight == "FFD700"
    assert params.month_style == "glass"
    assert params.caption_visible is False


def test_parse_int_reads_leading_digits():
    assert parse_int("12abc", 5) == 12
    assert parse_int(" 42", 5) == 42
    assert parse_int("abc", 5) == 5
    assert parse_int("", 5) == 5
    assert parse_int(None, 5) == 5


def test_parse_bool_only_true():
    assert parse_bool("true") is True
    assert parse_bool("1") is False
    assert parse_bool("TRUE") is False
    assert parse_bool(None) is False


def test_invalid_numbers_fall_back():
    params = params_from_query({"width": "-10", "height": "0", "radius": "0", "spacing": "-3"})
    assert params.width == 1284
    assert params.height == 2778
    assert params.radius == 12
    assert params.spacing == 0


def test_colors_are_normalized():
    params = params_from_query({"bg": "#112233", "filled": "zzz", "empty": ""})
    assert params.background == "112233"
    assert params.filled == "FFFFFF"
    # Empty values act like missing ones
    assert params.empty == "333333"


def test_theme_and_device_fill_missing_values():
    params = params_from_query({"theme": "ocean", "device": "iphone-14", "filled": "ABCDEF"})
    ocean = PRESET_THEMES["ocean"]
    assert params.background == ocean["bg"]
    assert params.text == ocean["textColor"]
    assert params.filled == "ABCDEF"
    assert (params.width, params.height) == (1170, 2532)


def test_unknown_theme_and_device_are_ignored():
    assert params_from_query({"theme": "nope", "device": "pager"}) == RenderParams()


def test_max_dimension_clamp():
    params = params_from_query({"width": "99999", "height": "800"}, max_dimension=4000)
    assert (params.width, params.height) == (4000, 800)


def test_caption_and_style():
    params = params_from_query({"showCustomText": "true", "customText": "Keep going", "monthStyle": "bold"})
    assert params.caption_visible
    assert params.caption == "Keep going"
    assert params.month_style == "bold"
    assert params_from_query({"monthStyle": "retro"}).month_style == "glass"


def test_query_keys_depend_on_mode():
    year = params_to_query(RenderParams(), "year")
    month = params_to_query(RenderParams(), "month")
    assert "radius" in year and "monthStyle" not in year
    assert "monthStyle" in month and "radius" not in month


def test_generate_year_url():
    url = generate_api_url("https://example.com/", RenderParams(show_caption=True, caption="hello world"))
    assert url.startswith("https://example.com/api/wallpaper?")
    assert "width=1284" in url
    assert "bg=000000" in url
    assert "showCustomText=true" in url
    assert "customText=hello+world" in url


def test_generate_month_url():
    url = generate_api_url("https://example.com", RenderParams(month_style="classic"), mode="month")
    assert url.startswith("https://example.com/api/wallpaper/month?")
    assert "showCustomText=false" in url
    assert "monthStyle=classic" in url
    assert "radius=" not in url


def test_with_theme_and_device():
    params = RenderParams().with_theme("neon").with_device("iphone-15")
    assert params.filled == "22C55E"
    assert (params.width, params.height) == (1179, 2556)
    assert RenderParams().with_theme("missing") == RenderParams()
