"""Тесты валидации имён заметок и резолва путей."""

# --- Imports ---
from __future__ import annotations

import os
from pathlib import Path

import pytest

from apps.notes_api.services import InvalidNoteName, PathEscape, resolve_note_path, validate_note_name


# --- Основные блоки ---
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("todo", "todo"),
        ("  todo  ", "todo"),
        ("Todo", "Todo"),
        ("shopping list", "shopping list"),
        (".hidden", ".hidden"),
        ("v1.2", "v1.2"),
        ("заметка", "заметка"),
    ],
)
def test_validate_note_name_accepts(raw: str, expected: str) -> None:
    assert validate_note_name(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "",
        "   ",
        ".",
        "..",
        " .. ",
        "../evil",
        "a/b",
        "/etc/passwd",
        "a\\b",
        "..\\evil",
        "nul\x00byte",
        "line\nbreak",
    ],
)
def test_validate_note_name_rejects(raw) -> None:
    with pytest.raises(InvalidNoteName):
        validate_note_name(raw)


def test_resolve_note_path_appends_suffix(tmp_path: Path) -> None:
    assert resolve_note_path("todo", tmp_path) == tmp_path.resolve() / "todo.txt"


def test_resolve_note_path_rejects_traversal_even_without_validation(tmp_path: Path) -> None:
    with pytest.raises(PathEscape):
        resolve_note_path("../evil", tmp_path)


def test_resolve_note_path_rejects_symlink_out_of_base(tmp_path: Path) -> None:
    base = tmp_path / "cache"
    base.mkdir()
    outside = tmp_path / "secret.txt"
    outside.write_text("secret")
    os.symlink(outside, base / "link.txt")

    with pytest.raises(PathEscape):
        resolve_note_path("link", base)


def test_path_escape_is_an_invalid_name() -> None:
    assert issubclass(PathEscape, InvalidNoteName)


def test_validate_note_name_length_limit_counts_utf8_bytes() -> None:
    assert validate_note_name("a" * 251) == "a" * 251
    with pytest.raises(InvalidNoteName):
        validate_note_name("a" * 252)
    # 126 двухбайтовых символа + ".txt" = 256 байт
    with pytest.raises(InvalidNoteName):
        validate_note_name("я" * 126)


def test_resolve_note_path_keeps_symlink_inside_base(tmp_path: Path) -> None:
    (tmp_path / "b.txt").write_text("b")
    os.symlink(tmp_path / "b.txt", tmp_path / "link.txt")

    assert resolve_note_path("link", tmp_path) == tmp_path.resolve() / "link.txt"
