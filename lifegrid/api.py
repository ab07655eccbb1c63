"""Wallpaper HTTP endpoints."""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import Response

from lifegrid.config import max_dimension
from lifegrid.params import (
    DEFAULT_MONTH_STYLE,
    DEVICE_PRESETS,
    FONT_OPTIONS,
    MONTH_STYLES,
    PRESET_THEMES,
    RenderParams,
    params_from_query,
)
from lifegrid.render import FORMAT_PNG, MEDIA_TYPES, MODE_MONTH, MODE_YEAR, render_image

router = APIRouter(prefix="/api", tags=["wallpaper"])

# Images depend on the current date, so caches must not reuse them
NO_STORE = {"Cache-Control": "no-store"}


def _image_response(mode: str, request: Request) -> Response:
    query = request.query_params
    params = params_from_query(query, max_dimension=max_dimension())
    fmt = query.get("format") or FORMAT_PNG
    if fmt not in MEDIA_TYPES:
        fmt = FORMAT_PNG
    try:
        body = render_image(mode, params, params.month_style, fmt=fmt)
    except Exception as exc:
        logging.warning("Failed to render %s wallpaper: %s", mode, exc)
        return Response(content="Failed to render wallpaper", status_code=500, media_type="text/plain")
    logging.info("Served %s wallpaper %sx%s as %s", mode, params.width, params.height, fmt)
    return Response(content=body, media_type=MEDIA_TYPES[fmt], headers=NO_STORE)


@router.get("/wallpaper", summary="Year-progress dot grid wallpaper")
def year_wallpaper(request: Request) -> Response:
    return _image_response(MODE_YEAR, request)


@router.get("/wallpaper/month", summary="Month calendar wallpaper")
def month_wallpaper(request: Request) -> Response:
    return _image_response(MODE_MONTH, request)


@router.get("/options", summary="Devices, fonts, styles, themes and defaults")
def options() -> dict:
    return {
        "devices": DEVICE_PRESETS,
        "fonts": FONT_OPTIONS,
        "monthStyles": MONTH_STYLES,
        "themes": PRESET_THEMES,
        "defaults": {**asdict(RenderParams()), "month_style": DEFAULT_MONTH_STYLE},
    }


def create_app() -> FastAPI:
    app = FastAPI(title="lifegrid", version="0.1.0")
    app.include_router(router)

    @app.get("/healthz", include_in_schema=False)
    def healthz() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
