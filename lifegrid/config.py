import logging
import os
from datetime import timedelta, timezone
from pathlib import Path

from dotenv import load_dotenv


def get_env_int(name: str, default: int) -> int:
    """Read integer from environment variables with a safe fallback."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except Exception:
        return default


def get_env_str(name: str, default: str) -> str:
    raw = os.getenv(name, "").strip()
    return raw or default


def load_environment_variables() -> None:
    # utf-8-sig tolerates the BOM some Windows editors add to .env
    dotenv_path = Path(".env")
    if dotenv_path.exists():
        load_dotenv(dotenv_path=dotenv_path, encoding="utf-8-sig")
    else:
        load_dotenv(encoding="utf-8-sig")


def configure_logging() -> None:
    level_name = get_env_str("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def utc_offset() -> timezone:
    """Timezone whose "today" drives every render (IST by default)."""
    minutes = get_env_int("LIFEGRID_UTC_OFFSET_MINUTES", 330)
    minutes = max(-1439, min(1439, minutes))
    return timezone(timedelta(minutes=minutes))


def fonts_dir() -> Path | None:
    raw = os.getenv("LIFEGRID_FONTS_DIR", "").strip()
    return Path(raw) if raw else None


def max_dimension() -> int:
    return max(1, get_env_int("LIFEGRID_MAX_DIMENSION", 6000))


def server_address() -> tuple[str, int]:
    return get_env_str("LIFEGRID_HOST", "127.0.0.1"), get_env_int("LIFEGRID_PORT", 8000)
