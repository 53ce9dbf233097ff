"""Запуск сервера заметок из командной строки."""

# --- Imports ---
from __future__ import annotations

import argparse
import logging
import sys

import uvicorn

from .config import NOTES_CACHE_DIR, NOTES_HOST, NOTES_PORT, prepare_cache_dir
from .logging_setup import setup_logging
from .main import create_app

logger = logging.getLogger(__name__)


# --- Основные блоки ---
def build_parser() -> argparse.ArgumentParser:
    # -h занят под host, поэтому справка доступна только как --help
    parser = argparse.ArgumentParser(prog="notes-api", description="Serve notes stored as files", add_help=False)
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("-h", "--host", default=NOTES_HOST, help="server host (env NOTES_HOST)")
    parser.add_argument("-p", "--port", default=NOTES_PORT, type=int, help="server port (env NOTES_PORT)")
    parser.add_argument("-c", "--cache", default=str(NOTES_CACHE_DIR), help="cache directory (env NOTES_CACHE_DIR)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()
    try:
        cache_dir = prepare_cache_dir(args.cache)
    except OSError as exc:
        logger.error("Invalid cache directory", extra={"event": "app.config_error", "details": str(exc)})
        return 2

    app = create_app(cache_dir)
    logger.info("Server running at http://%s:%s", args.host, args.port, extra={"event": "app.listen"})
    uvicorn.run(app, host=args.host, port=args.port, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
