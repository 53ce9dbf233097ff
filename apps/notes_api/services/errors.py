"""Иерархия ошибок хранилища заметок."""

# --- Imports ---
from __future__ import annotations


# --- Models / Classes ---
class NoteStoreError(Exception):
    """Base class for every failure raised by the note store."""


class InvalidNoteName(NoteStoreError):
    """Имя заметки пустое, отсутствует или пытается выйти за пределы каталога."""


class PathEscape(InvalidNoteName):
    """Resolved path is not a direct child of the cache directory."""


class NoteNotFound(NoteStoreError):
    pass


class NoteAlreadyExists(NoteStoreError):
    pass


class NoteIOError(NoteStoreError):
    """Ошибка файловой системы, не связанная с существованием файла (права, диск)."""
