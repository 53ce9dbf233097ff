"""Файловое хранилище заметок: одна заметка = один `<name>.txt` в cache-каталоге.

Каталог является единственным индексом, in-memory кэша нет. Блокировки не
используются:
  - create атомарен за счёт `os.link` (падает, если файл уже есть),
    а без поддержки жёстких ссылок через O_EXCL-заглушку и `os.replace`;
  - delete атомарен за счёт одного `unlink`;
  - put проверяет существование и затем заменяет файл через `os.replace`,
    поэтому put, гонящийся с delete, может вернуть заметку обратно.
"""

# --- Imports ---
from __future__ import annotations

import errno
import logging
import os
import tempfile
from pathlib import Path

from ..config import NOTE_SUFFIX
from ..schemas import NoteEntry
from .errors import InvalidNoteName, NoteAlreadyExists, NoteIOError, NoteNotFound, PathEscape
from .note_names import resolve_note_path, validate_note_name

logger = logging.getLogger(__name__)

_TMP_PREFIX = ".note-"
_TMP_SUFFIX = ".tmp"
_FILE_MODE = 0o644
# vfat/exFAT и часть FUSE-монтирований не поддерживают жёсткие ссылки
_NO_HARDLINK_ERRNOS = {errno.EPERM, errno.EOPNOTSUPP, errno.ENOTSUP, errno.ENOSYS}


# --- Основные блоки ---
class NoteStore:
    def __init__(self, base_dir: Path) -> None:
        self.base_dir = Path(base_dir)

    def _locate(self, raw_name: str | None) -> tuple[str, Path]:
        name = validate_note_name(raw_name)
        return name, resolve_note_path(name, self.base_dir)

    def _write(self, path: Path, content: bytes, *, exclusive: bool) -> None:
        """Пишет во временный файл рядом с целью и переносит его на место.

        Readers never observe a partially written note. With exclusive=True the
        final step is a hard link, which fails if the target already exists.
        Where hard links are unsupported the name is claimed with O_EXCL and
        then replaced, so an empty note is briefly visible.
        """
        fd, tmp_name = tempfile.mkstemp(prefix=_TMP_PREFIX, suffix=_TMP_SUFFIX, dir=path.parent)
        tmp = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(content)
                fh.flush()
                os.fsync(fh.fileno())
            os.chmod(tmp, _FILE_MODE)
            if not exclusive:
                os.replace(tmp, path)
                return
            try:
                os.link(tmp, path)
            except FileExistsError:
                raise
            except OSError as exc:
                if exc.errno not in _NO_HARDLINK_ERRNOS:
                    raise
                os.close(os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, _FILE_MODE))
                os.replace(tmp, path)
        finally:
            tmp.unlink(missing_ok=True)

    def get(self, name: str) -> bytes:
        name, path = self._locate(name)
        try:
            return path.read_bytes()
        except (FileNotFoundError, IsADirectoryError) as exc:
            raise NoteNotFound(name) from exc
        except OSError as exc:
            raise NoteIOError(f"Failed to read note {name!r}") from exc

    def put(self, name: str, content: bytes) -> None:
        name, path = self._locate(name)
        try:
            exists = path.is_file()
        except OSError as exc:
            raise NoteIOError(f"Failed to check note {name!r}") from exc
        if not exists:
            raise NoteNotFound(name)
        try:
            self._write(path, content, exclusive=False)
        except OSError as exc:
            raise NoteIOError(f"Failed to write note {name!r}") from exc
        logger.info("Note updated", extra={"event": "note.updated", "note": name, "details": f"bytes={len(content)}"})

    def delete(self, name: str) -> None:
        name, path = self._locate(name)
        try:
            path.unlink()
        except (FileNotFoundError, IsADirectoryError) as exc:
            raise NoteNotFound(name) from exc
        except OSError as exc:
            raise NoteIOError(f"Failed to delete note {name!r}") from exc
        logger.info("Note deleted", extra={"event": "note.deleted", "note": name})

    def create(self, name: str | None, content: bytes | None) -> None:
        name, path = self._locate(name)
        if content is None:
            raise InvalidNoteName(f"Note content is required for {name!r}")
        try:
            self._write(path, content, exclusive=True)
        except FileExistsError as exc:
            raise NoteAlreadyExists(name) from exc
        except OSError as exc:
            raise NoteIOError(f"Failed to create note {name!r}") from exc
        logger.info("Note created", extra={"event": "note.created", "note": name, "details": f"bytes={len(content)}"})

    def list_notes(self) -> list[NoteEntry]:
        """Читает все `*.txt` каталога в порядке перечисления файловой системы.

        Any unreadable note aborts the whole listing. A file deleted between
        enumeration and reading is no longer a note and is skipped, as is a
        symlink leading outside the cache directory.
        """
        try:
            paths = list(self.base_dir.iterdir())
        except OSError as exc:
            raise NoteIOError(f"Failed to list cache directory {self.base_dir}") from exc

        notes = []
        for path in paths:
            if path.suffix != NOTE_SUFFIX:
                continue
            name = path.name[: -len(NOTE_SUFFIX)]
            try:
                resolve_note_path(name, self.base_dir)
            except PathEscape:
                logger.warning("Skipping note outside cache directory", extra={"event": "note.escape", "note": name})
                continue
            try:
                data = path.read_bytes()
            except (FileNotFoundError, IsADirectoryError):
                continue
            except OSError as exc:
                raise NoteIOError(f"Failed to read note file {path}") from exc
            notes.append(NoteEntry(name=name, text=data.decode("utf-8", errors="replace")))
        return notes
