from io import BytesIO
from xml.dom import minidom

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from lifegrid.api import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


def test_healthz(client):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_year_wallpaper_png(client):
    resp = client.get("/api/wallpaper", params={"width": "300", "height": "600", "radius": "3", "spacing": "1"})
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "image/png"
    assert resp.headers["cache-control"] == "no-store"
    img = Image.open(BytesIO(resp.content))
    assert img.size == (300, 600)


def test_month_wallpaper_svg(client):
    resp = client.get(
        "/api/wallpaper/month",
        params={"width": "360", "height": "780", "monthStyle": "bold", "format": "svg", "accentColor": "00FF00"},
    )
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("image/svg+xml")
    assert resp.text.startswith("<svg")
    assert 'width="360"' in resp.text
    assert "#00FF00" in resp.text


def test_unknown_format_falls_back_to_png(client):
    resp = client.get("/api/wallpaper", params={"width": "120", "height": "240", "radius": "2", "spacing": "1", "format": "gif"})
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "image/png"


def test_dimensions_are_clamped(client, monkeypatch):
    monkeypatch.setenv("LIFEGRID_MAX_DIMENSION", "250")
    resp = client.get("/api/wallpaper", params={"width": "90000", "height": "90000", "radius": "2", "spacing": "1"})
    assert resp.status_code == 200
    assert Image.open(BytesIO(resp.content)).size == (250, 250)


def test_options(client):
    body = client.get("/api/options").json()
    assert body["devices"]["iphone-15"] == {"width": 1179, "height": 2556, "name": "iPhone 15"}
    assert set(body["monthStyles"]) == {"glass", "classic", "bold"}
    assert len(body["themes"]) == 12
    assert body["defaults"]["width"] == 1284
    assert body["defaults"]["month_style"] == "glass"


def test_multiline_caption_png(client):
    resp = client.get(
        "/api/wallpaper",
        params={"width": "200", "height": "400", "radius": "2", "spacing": "1", "showCustomText": "true", "customText": "line one\nline two"},
    )
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "image/png"


def test_control_character_caption_svg_parses(client):
    resp = client.get(
        "/api/wallpaper/month",
        params={"width": "360", "height": "780", "format": "svg", "showCustomText": "true", "customText": "hi\x01there"},
    )
    assert resp.status_code == 200
    minidom.parseString(resp.content)
