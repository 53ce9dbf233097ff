"""Pydantic-схемы для роутера notes."""
# --- Imports ---
from __future__ import annotations

from pydantic import BaseModel


# --- Models / Classes ---
class NoteEntry(BaseModel):
    """One item of the `GET /notes` listing."""
    name: str
    text: str
