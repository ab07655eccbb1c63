import pytest

from lifegrid.colors import hex_to_param, hex_to_rgba, normalize_hex, param_to_hex


def test_normalize_hex():
    assert normalize_hex("#abcdef") == "ABCDEF"
    assert normalize_hex("00ff7f") == "00FF7F"
    assert normalize_hex("#abc") == "FFFFFF"
    assert normalize_hex(None, default="000000") == "000000"


@pytest.mark.parametrize("bad", ["", "zzzzzz", "12345", "#1234567", "red"])
def test_malformed_colors_become_white(bad):
    assert hex_to_rgba(bad) == (255, 255, 255, 255)


def test_hex_to_rgba_with_opacity():
    assert hex_to_rgba("#FF8000") == (255, 128, 0, 255)
    assert hex_to_rgba("000000", 0.2) == (0, 0, 0, 51)
    assert hex_to_rgba("000000", 7) == (0, 0, 0, 255)


@pytest.mark.parametrize("color", ["#000000", "#1A2B3C", "#ffd700"])
def test_query_param_round_trip(color):
    assert param_to_hex(hex_to_param(color)) == color


def test_param_to_hex_keeps_existing_hash():
    assert param_to_hex("#123456") == "#123456"
    assert hex_to_param("123456") == "123456"
