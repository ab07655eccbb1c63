import logging
import sys
from pathlib import Path

import uvicorn

# Ensure repo root is importable so that 'lifegrid' (at project root) can be found
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from lifegrid.api import create_app  # noqa: E402
from lifegrid.config import configure_logging, load_environment_variables, server_address  # noqa: E402


def main() -> None:
    load_environment_variables()
    configure_logging()
    host, port = server_address()
    logging.info("Serving wallpapers on http://%s:%s", host, port)
    uvicorn.run(create_app(), host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
