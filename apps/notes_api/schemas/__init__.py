"""Реэкспорт Pydantic-схем API."""
# --- Imports ---
from __future__ import annotations

from .notes import NoteEntry  # noqa: F401
