"""Валидация имён заметок и их отображение на файлы в cache-каталоге."""

# --- Imports ---
from __future__ import annotations

from pathlib import Path

from ..config import NOTE_SUFFIX
from .errors import InvalidNoteName, PathEscape

_SEPARATORS = ("/", "\\")
_RESERVED = {".", ".."}
MAX_FILENAME_BYTES = 255


# --- Основные блоки ---
def validate_note_name(raw: str | None) -> str:
    """Возвращает имя без пробелов по краям или поднимает InvalidNoteName.

    Backslash is rejected on every platform so a note created on Linux can
    still be opened on Windows. Case is preserved as-is. `<name>.txt` must fit
    into a single file name (NAME_MAX bytes in UTF-8).
    """
    if raw is None:
        raise InvalidNoteName("Note name is required")
    name = raw.strip()
    if not name:
        raise InvalidNoteName("Note name is empty")
    if name in _RESERVED:
        raise InvalidNoteName(f"Reserved note name: {name!r}")
    if any(sep in name for sep in _SEPARATORS):
        raise InvalidNoteName(f"Note name contains a path separator: {name!r}")
    if "\x00" in name or not name.isprintable():
        raise InvalidNoteName(f"Note name contains control characters: {name!r}")
    if len(name.encode("utf-8")) + len(NOTE_SUFFIX) > MAX_FILENAME_BYTES:
        raise InvalidNoteName(f"Note name is longer than {MAX_FILENAME_BYTES - len(NOTE_SUFFIX)} bytes")
    return name


def resolve_note_path(name: str, base_dir: Path) -> Path:
    """Строит путь `<base_dir>/<name>.txt` и проверяет, что он не покидает base_dir.

    Both the joined path and its canonical form (symlinks followed) must be
    direct children of base_dir, independently of validate_note_name. The
    joined path is returned, so a symlinked note is replaced or unlinked
    itself rather than its target.
    """
    base = base_dir.resolve()
    candidate = base / f"{name}{NOTE_SUFFIX}"
    if candidate.parent != base or candidate.resolve().parent != base:
        raise PathEscape(f"Note path escapes cache directory: {name!r}")
    return candidate
