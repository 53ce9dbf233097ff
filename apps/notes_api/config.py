"""Runtime configuration for the notes API."""

from pathlib import Path
import os

ROOT_DIR = Path(__file__).resolve().parents[2]
DATA_DIR = ROOT_DIR / "data"
LOGS_DIR = DATA_DIR / "logs"

NOTES_HOST = os.getenv("NOTES_HOST", "127.0.0.1").strip() or "127.0.0.1"
NOTES_PORT = int(os.getenv("NOTES_PORT", "8000"))
NOTES_CACHE_DIR = Path(os.getenv("NOTES_CACHE_DIR") or DATA_DIR / "cache").expanduser()

NOTE_SUFFIX = ".txt"


def prepare_cache_dir(path: Path | str) -> Path:
    """Creates the cache directory when missing and returns its resolved path."""
    cache_dir = Path(path).expanduser()
    if cache_dir.exists() and not cache_dir.is_dir():
        raise NotADirectoryError(f"Cache path is not a directory: {cache_dir}")
    cache_dir.mkdir(parents=True, exist_ok=True)
    return cache_dir.resolve()
