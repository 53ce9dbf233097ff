"""Точка входа FastAPI-приложения и регистрация middleware/роутеров."""

# --- Imports ---
from __future__ import annotations

import logging
import time
from pathlib import Path

from fastapi import FastAPI, Request

from .config import NOTES_CACHE_DIR, prepare_cache_dir
from .logging_setup import setup_logging
from .routers import notes
from .services import NoteStore

logger = logging.getLogger(__name__)


# --- Основные блоки ---
def create_app(cache_dir: Path | None = None) -> FastAPI:
    """Собирает приложение поверх одного cache-каталога."""
    app = FastAPI(title="Notes API", version="1.0.0", description="API for managing notes")
    app.state.note_store = NoteStore(cache_dir or NOTES_CACHE_DIR)
    app.include_router(notes.router)

    @app.on_event("startup")
    def on_startup() -> None:
        app_log = setup_logging()
        base_dir = prepare_cache_dir(app.state.note_store.base_dir)
        app.state.note_store.base_dir = base_dir
        logger.info(
            "Application startup completed",
            extra={"event": "app.ready", "details": f"app_log={app_log} | cache_dir={base_dir}"},
        )

    @app.middleware("http")
    async def http_logging_middleware(request: Request, call_next):
        started = time.perf_counter()
        client_ip = request.client.host if request.client else "-"
        logger.info(
            "HTTP request started",
            extra={
                "event": "http.request.start",
                "method": request.method,
                "path": request.url.path,
                "client_ip": client_ip,
            },
        )
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.info(
            "HTTP request completed",
            extra={
                "event": "http.request.end",
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
                "client_ip": client_ip,
            },
        )
        return response

    @app.get("/")
    def root() -> dict[str, str]:
        return {
            "name": "Notes API",
            "docs": "/docs",
            "health": "/health",
        }

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
