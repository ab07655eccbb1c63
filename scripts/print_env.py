import os
from io import StringIO
from pathlib import Path
from dotenv import load_dotenv


KEYS = [
    "DISCORD_BOT_TOKEN",
    "DEV_GUILD_ID",
    "LIFEGRID_UTC_OFFSET_MINUTES",
    "LIFEGRID_FONTS_DIR",
    "LIFEGRID_MAX_DIMENSION",
    "LIFEGRID_HOST",
    "LIFEGRID_PORT",
    "LOG_LEVEL",
]


def safe_load_dotenv() -> None:
    dotenv_path = Path(".env")
    if not dotenv_path.exists():
        return
    try:
        load_dotenv(dotenv_path=dotenv_path, encoding="utf-8-sig")
    except UnicodeDecodeError:
        # Some editors save .env as UTF-16; read it without rewriting the file
        content = dotenv_path.read_bytes().decode("utf-16", errors="ignore")
        load_dotenv(stream=StringIO(content))


def main() -> None:
    safe_load_dotenv()
    for key in KEYS:
        value = os.getenv(key)
        if value is None:
            print(f"{key}=<NOT SET>")
        elif key == "DISCORD_BOT_TOKEN" and value:
            print(f"{key}=<SET, LENGTH={len(value)}>")
        else:
            print(f"{key}={value}")


if __name__ == "__main__":
    main()
