"""Роуты CRUD для заметок, хранящихся в cache-каталоге."""

# --- Imports ---
from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.responses import PlainTextResponse

from ..schemas import NoteEntry
from ..services import InvalidNoteName, NoteAlreadyExists, NoteIOError, NoteNotFound, NoteStore, NoteStoreError

router = APIRouter(tags=["notes"])
logger = logging.getLogger(__name__)


# --- Основные блоки ---
def get_note_store(request: Request) -> NoteStore:
    return request.app.state.note_store


def _to_http(exc: NoteStoreError, note_name: str | None) -> HTTPException:
    """Переводит ошибку хранилища в HTTP-статус; вызывается внутри except."""
    if isinstance(exc, InvalidNoteName):
        return HTTPException(status_code=400, detail="Invalid note name")
    if isinstance(exc, NoteNotFound):
        return HTTPException(status_code=404, detail="Note not found")
    if isinstance(exc, NoteAlreadyExists):
        return HTTPException(status_code=400, detail="Note already exists")
    if isinstance(exc, NoteIOError):
        logger.exception(
            "Note storage failure",
            extra={"event": "note.io_error", "note": note_name, "details": str(exc)},
        )
    return HTTPException(status_code=500, detail="Internal Server Error")


@router.get(
    "/notes/{note_name}",
    summary="Get a note by name",
    response_class=Response,
    responses={200: {"content": {"text/plain": {}}}, 404: {"description": "Note not found"}},
)
def read_note(note_name: str, store: NoteStore = Depends(get_note_store)) -> Response:
    try:
        content = store.get(note_name)
    except NoteStoreError as exc:
        raise _to_http(exc, note_name) from exc
    return Response(content=content, media_type="text/plain")


@router.put(
    "/notes/{note_name}",
    summary="Update a note",
    response_class=PlainTextResponse,
    responses={404: {"description": "Note not found"}},
)
async def update_note(note_name: str, request: Request, store: NoteStore = Depends(get_note_store)) -> PlainTextResponse:
    # Тело принимается как есть, без разбора по content-type
    content = await request.body()
    try:
        await asyncio.to_thread(store.put, note_name, content)
    except NoteStoreError as exc:
        raise _to_http(exc, note_name) from exc
    return PlainTextResponse("Updated")


@router.delete(
    "/notes/{note_name}",
    summary="Delete a note",
    response_class=PlainTextResponse,
    responses={404: {"description": "Note not found"}},
)
def delete_note(note_name: str, store: NoteStore = Depends(get_note_store)) -> PlainTextResponse:
    try:
        store.delete(note_name)
    except NoteStoreError as exc:
        raise _to_http(exc, note_name) from exc
    return PlainTextResponse("Deleted")


@router.get("/notes", summary="Get a list of all notes", response_model=list[NoteEntry])
def list_notes(store: NoteStore = Depends(get_note_store)) -> list[NoteEntry]:
    try:
        return store.list_notes()
    except NoteStoreError as exc:
        raise _to_http(exc, None) from exc


_WRITE_FORM_SCHEMA = {
    "type": "object",
    "properties": {"note_name": {"type": "string"}, "note": {"type": "string"}},
}


def _form_text(form, field: str) -> str | None:
    # Пустая строка допустима как содержимое, None только для отсутствующего поля
    value = form.get(field)
    return value if isinstance(value, str) else None


@router.post(
    "/write",
    summary="Create a new note",
    status_code=201,
    response_class=PlainTextResponse,
    responses={400: {"description": "Bad request"}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/x-www-form-urlencoded": {"schema": _WRITE_FORM_SCHEMA},
                "multipart/form-data": {"schema": _WRITE_FORM_SCHEMA},
            },
        }
    },
)
async def write_note(request: Request, store: NoteStore = Depends(get_note_store)) -> PlainTextResponse:
    form = await request.form()
    note_name = _form_text(form, "note_name")
    note = _form_text(form, "note")
    content = note.encode("utf-8") if note is not None else None
    try:
        await asyncio.to_thread(store.create, note_name, content)
    except NoteStoreError as exc:
        raise _to_http(exc, note_name) from exc
    return PlainTextResponse("Created", status_code=201)
