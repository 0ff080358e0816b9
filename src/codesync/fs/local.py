from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from pathlib import Path

from codesync.models import EntryKind

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {path}") from None


def _write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def _list_dir(path: Path) -> list[Path]:
    children = []
    for child in path.iterdir():
        # A linked directory can point back up the tree; only files are followed.
        if child.is_symlink() and child.is_dir():
            logger.debug("Skipping symlinked directory %s", child)
            continue
        children.append(child)
    return sorted(children, key=lambda p: p.name)


class LocalEntry:
    """A file or directory on the local disk.

    Implements the ``DirectoryEntry`` protocol.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._path)!r})"

    @property
    def path(self) -> Path:
        return self._path

    @property
    def name(self) -> str:
        return self._path.name

    @property
    def kind(self) -> EntryKind:
        return "directory" if self._path.is_dir() else "file"

    async def read(self) -> str:
        if self._path.is_dir():
            raise IsADirectoryError(f"Is a directory: {self._path}")
        return await asyncio.to_thread(_read_text, self._path)

    async def iter_entries(self) -> AsyncIterator[LocalEntry]:
        if not self._path.is_dir():
            raise NotADirectoryError(f"Not a directory: {self._path}")
        children = await asyncio.to_thread(_list_dir, self._path)
        for child in children:
            yield LocalEntry(child)


class LocalDirectory(LocalEntry):
    """Workspace root backed by a directory on disk.

    Implements the ``WorkspaceRoot`` protocol. Paths are slash-separated and
    relative to the root.
    """

    def __init__(self, path: str | Path) -> None:
        super().__init__(Path(path).resolve())
        if not self._path.is_dir():
            raise NotADirectoryError(f"Not a directory: {self._path}")

    def _resolve(self, path: str) -> Path:
        target = (self._path / path).resolve()
        if not target.is_relative_to(self._path):
            raise ValueError(f"Path escapes the workspace: {path}")
        return target

    async def read_file(self, path: str) -> str:
        return await asyncio.to_thread(_read_text, self._resolve(path))

    async def write_file(self, path: str, text: str) -> None:
        target = self._resolve(path)
        await asyncio.to_thread(_write_text, target, text)
        logger.info("Wrote %d character(s) to %s", len(text), path)
