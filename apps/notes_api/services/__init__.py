"""Пакетный модуль для `apps/notes_api/services`."""

# --- Imports ---
from .errors import InvalidNoteName, NoteAlreadyExists, NoteIOError, NoteNotFound, NoteStoreError, PathEscape
from .note_names import resolve_note_path, validate_note_name
from .note_store import NoteStore

__all__ = [
    "NoteStore",
    "validate_note_name",
    "resolve_note_path",
    "NoteStoreError",
    "InvalidNoteName",
    "PathEscape",
    "NoteNotFound",
    "NoteAlreadyExists",
    "NoteIOError",
]
