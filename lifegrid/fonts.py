from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from PIL import ImageFont

from lifegrid.config import fonts_dir
from lifegrid.primitives import SYSTEM_FONT

# File stems searched under assets/fonts and LIFEGRID_FONTS_DIR, per family and variant
_FAMILY_FILES: dict[str, dict[str, list[str]]] = {
    "Inter": {
        "regular": ["Inter-Regular"],
        "bold": ["Inter-Bold", "Inter-SemiBold"],
        "italic": ["Inter-Italic"],
    },
    "Playfair Display": {
        "regular": ["PlayfairDisplay-Regular"],
        "bold": ["PlayfairDisplay-Bold"],
        "italic": ["PlayfairDisplay-Italic"],
    },
    "Roboto Mono": {
        "regular": ["RobotoMono-Regular"],
        "bold": ["RobotoMono-Bold"],
        "italic": ["RobotoMono-Italic"],
    },
    "Lora": {
        "regular": ["Lora-Regular"],
        "bold": ["Lora-Bold"],
        "italic": ["Lora-Italic"],
    },
    "Oswald": {
        "regular": ["Oswald-Regular"],
        "bold": ["Oswald-Bold"],
        "italic": ["Oswald-Regular"],
    },
}

# Which generic family backs each key when its own files are missing
_GENERIC_OF: dict[str, str] = {
    "Inter": "sans-serif",
    "Oswald": "sans-serif",
    "Roboto Mono": "monospace",
    "Playfair Display": "serif",
    "Lora": "serif",
    "sans-serif": "sans-serif",
    "serif": "serif",
    "monospace": "monospace",
    SYSTEM_FONT: "sans-serif",
}

_GENERIC_PATHS: dict[str, dict[str, list[str]]] = {
    "sans-serif": {
        "regular": [
            "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
            "/usr/share/fonts/TTF/DejaVuSans.ttf",
            "/System/Library/Fonts/Supplemental/Arial.ttf",
            "C:/Windows/Fonts/arial.ttf",
            "DejaVuSans.ttf",
            "arial.ttf",
        ],
        "bold": [
            "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
            "/usr/share/fonts/TTF/DejaVuSans-Bold.ttf",
            "/System/Library/Fonts/Supplemental/Arial Bold.ttf",
            "C:/Windows/Fonts/arialbd.ttf",
            "DejaVuSans-Bold.ttf",
        ],
        "italic": [
            "/usr/share/fonts/truetype/dejavu/DejaVuSans-Oblique.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationSans-Italic.ttf",
            "/usr/share/fonts/TTF/DejaVuSans-Oblique.ttf",
            "C:/Windows/Fonts/ariali.ttf",
            "DejaVuSans-Oblique.ttf",
        ],
    },
    "serif": {
        "regular": [
            "/usr/share/fonts/truetype/dejavu/DejaVuSerif.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationSerif-Regular.ttf",
            "/usr/share/fonts/TTF/DejaVuSerif.ttf",
            "C:/Windows/Fonts/times.ttf",
            "DejaVuSerif.ttf",
        ],
        "bold": [
            "/usr/share/fonts/truetype/dejavu/DejaVuSerif-Bold.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationSerif-Bold.ttf",
            "C:/Windows/Fonts/timesbd.ttf",
            "DejaVuSerif-Bold.ttf",
        ],
        "italic": [
            "/usr/share/fonts/truetype/dejavu/DejaVuSerif-Italic.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationSerif-Italic.ttf",
            "/usr/share/fonts/TTF/DejaVuSerif-Italic.ttf",
            "C:/Windows/Fonts/timesi.ttf",
            "DejaVuSerif-Italic.ttf",
        ],
    },
    "monospace": {
        "regular": [
            "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
            "C:/Windows/Fonts/consola.ttf",
            "DejaVuSansMono.ttf",
        ],
        "bold": [
            "/usr/share/fonts/truetype/dejavu/DejaVuSansMono-Bold.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationMono-Bold.ttf",
            "C:/Windows/Fonts/consolab.ttf",
        ],
        "italic": [
            "/usr/share/fonts/truetype/dejavu/DejaVuSansMono-Oblique.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationMono-Italic.ttf",
            "C:/Windows/Fonts/consolai.ttf",
        ],
    },
}

BOLD_WEIGHT = 600


def caption_family(key: str | None) -> str:
    """Caption fonts outside the known set render in serif."""
    if key and key in _GENERIC_OF and key != SYSTEM_FONT:
        return key
    return "serif"


def _variant(weight: int, italic: bool) -> str:
    if italic:
        return "italic"
    return "bold" if weight >= BOLD_WEIGHT else "regular"


def _project_candidates(family: str, variant: str) -> list[Path]:
    stems = _FAMILY_FILES.get(family, {}).get(variant, [])
    roots = [Path("assets/fonts")]
    extra = fonts_dir()
    if extra is not None:
        roots.insert(0, extra)
    out: list[Path] = []
    for root in roots:
        for stem in stems:
            out.append(root / f"{stem}.ttf")
            out.append(root / f"{stem}.otf")
    return out


def font_candidates(family: str, variant: str) -> list[tuple[Path, bool]]:
    """Ordered (path, is_requested_variant) pairs to try for a family."""
    generic = _GENERIC_OF.get(family, "sans-serif")
    exact = _project_candidates(family, variant) + [Path(p) for p in _GENERIC_PATHS[generic][variant]]
    paths = [(p, True) for p in exact]
    if variant != "regular":
        # A regular face beats the bitmap fallback
        regular = _project_candidates(family, "regular") + [Path(p) for p in _GENERIC_PATHS[generic]["regular"]]
        paths += [(p, False) for p in regular]
    return paths


@lru_cache(maxsize=256)
def _load(family: str, variant: str, size: int) -> tuple[ImageFont.ImageFont, bool]:
    for p, exact in font_candidates(family, variant):
        try:
            return ImageFont.truetype(str(p), size), exact
        except Exception:
            continue
    logging.debug("No font file for %s/%s, using default font", family, variant)
    # Final fallback
    return ImageFont.load_default(size=size), variant == "regular"


def load_font(size: int, weight: int = 400, italic: bool = False, family: str = SYSTEM_FONT) -> ImageFont.ImageFont:
    return _load(family, _variant(weight, italic), max(1, int(size)))[0]


def has_true_bold(size: int, weight: int, family: str = SYSTEM_FONT) -> bool:
    """Whether a real bold face backs this weight (otherwise callers simulate it)."""
    if weight < BOLD_WEIGHT:
        return True
    return _load(family, "bold", max(1, int(size)))[1]


def measure_text(text: str, size: int, weight: int = 400, family: str = SYSTEM_FONT, italic: bool = False) -> float:
    if not text:
        return 0.0
    font = load_font(size, weight, italic, family)
    try:
        return float(font.getlength(text))
    except Exception:
        bbox = font.getbbox(text)
        return float(bbox[2] - bbox[0])
