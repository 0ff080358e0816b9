from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Coroutine
from pathlib import Path
from typing import Any

from watchfiles import awatch

from codesync.config import ScanConfig

logger = logging.getLogger(__name__)


def _is_tracked_path(path: Path, directory: Path, config: ScanConfig) -> bool:
    try:
        parts = path.relative_to(directory).parts
    except ValueError:
        parts = path.parts
    return not any(part in config.ignore_dirs for part in parts[:-1])


class WatchfilesWatcher:
    """Watch a workspace for file changes and trigger a callback.

    Every changed path outside an ignored directory is reported, directories
    and non-source files included.
    Implements the ``FileWatcherPort`` protocol.
    """

    def __init__(
        self,
        directory: str | Path,
        on_change: Callable[[set[Path]], Coroutine[Any, Any, None]],
        config: ScanConfig | None = None,
    ) -> None:
        self._directory = Path(directory)
        self._on_change = on_change
        self._config = config or ScanConfig()
        self._task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._watch())
        logger.info("Watcher started for %s", self._directory)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Watcher stopped for %s", self._directory)

    async def wait(self) -> None:
        if self._task is not None:
            await self._task

    async def _watch(self) -> None:
        async for changes in awatch(self._directory):
            paths = {Path(p) for _, p in changes if _is_tracked_path(Path(p), self._directory, self._config)}
            if paths:
                logger.info("Detected changes in %d path(s)", len(paths))
                try:
                    await self._on_change(paths)
                except Exception:
                    logger.exception("Error in watcher callback")
