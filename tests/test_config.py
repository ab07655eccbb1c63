from datetime import timedelta

from lifegrid.config import get_env_int, max_dimension, server_address, utc_offset


def test_get_env_int_fallback(monkeypatch):
    monkeypatch.setenv("LIFEGRID_TEST_INT", "abc")
    assert get_env_int("LIFEGRID_TEST_INT", 7) == 7
    monkeypatch.setenv("LIFEGRID_TEST_INT", " 12 ")
    assert get_env_int("LIFEGRID_TEST_INT", 7) == 12


def test_utc_offset(monkeypatch):
    monkeypatch.delenv("LIFEGRID_UTC_OFFSET_MINUTES", raising=False)
    assert utc_offset().utcoffset(None) == timedelta(hours=5, minutes=30)
    monkeypatch.setenv("LIFEGRID_UTC_OFFSET_MINUTES", "-300")
    assert utc_offset().utcoffset(None) == timedelta(hours=-5)
    monkeypatch.setenv("LIFEGRID_UTC_OFFSET_MINUTES", "99999")
    assert utc_offset().utcoffset(None) == timedelta(minutes=1439)


def test_server_defaults(monkeypatch):
    monkeypatch.delenv("LIFEGRID_HOST", raising=False)
    monkeypatch.delenv("LIFEGRID_PORT", raising=False)
    monkeypatch.delenv("LIFEGRID_MAX_DIMENSION", raising=False)
    assert server_address() == ("127.0.0.1", 8000)
    assert max_dimension() == 6000
