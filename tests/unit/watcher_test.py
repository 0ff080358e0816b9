"""Tests for the watchfiles watcher adapter."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest

from codesync.config import ScanConfig
from codesync.watcher.watchfiles_adapter import (
    WatchfilesWatcher,
    _is_tracked_path,
)

_ROOT = Path("/tmp/project")


class TestIsTrackedPath:
    def test_python_file(self) -> None:
        assert _is_tracked_path(_ROOT / "foo.py", _ROOT, ScanConfig()) is True

    def test_typescript_file(self) -> None:
        assert _is_tracked_path(_ROOT / "src" / "baz.tsx", _ROOT, ScanConfig()) is True

    def test_non_source_file_changes_the_tree(self) -> None:
        assert _is_tracked_path(_ROOT / "index.html", _ROOT, ScanConfig()) is True
        assert _is_tracked_path(_ROOT / "Makefile", _ROOT, ScanConfig()) is True

    def test_new_directory(self) -> None:
        assert _is_tracked_path(_ROOT / "src" / "components", _ROOT, ScanConfig()) is True

    def test_ignored_directory_itself_is_tracked(self) -> None:
        assert _is_tracked_path(_ROOT / "node_modules", _ROOT, ScanConfig()) is True

    def test_inside_ignored_directory(self) -> None:
        assert _is_tracked_path(_ROOT / "node_modules" / "x" / "a.js", _ROOT, ScanConfig()) is False

    def test_ignored_names_above_the_root_do_not_count(self) -> None:
        root = Path("/home/me/build/project")
        assert _is_tracked_path(root / "a.js", root, ScanConfig()) is True


class TestWatchfilesWatcher:
    def test_implements_protocol(self) -> None:
        from codesync.core.ports.watcher import FileWatcherPort

        callback = AsyncMock()
        watcher: FileWatcherPort = WatchfilesWatcher(_ROOT, callback)
        assert hasattr(watcher, "start")
        assert hasattr(watcher, "stop")

    @pytest.mark.asyncio
    async def test_start_creates_task(self) -> None:
        callback = AsyncMock()
        watcher = WatchfilesWatcher(_ROOT, callback)

        with patch("codesync.watcher.watchfiles_adapter.awatch") as mock_awatch:
            mock_awatch.return_value = _empty_async_iter()
            await watcher.start()
            assert watcher._task is not None
            await watcher.stop()
            assert watcher._task is None

    @pytest.mark.asyncio
    async def test_stop_without_start_is_noop(self) -> None:
        watcher = WatchfilesWatcher(_ROOT, AsyncMock())
        await watcher.stop()

    @pytest.mark.asyncio
    async def test_double_start_is_noop(self) -> None:
        watcher = WatchfilesWatcher(_ROOT, AsyncMock())

        with patch("codesync.watcher.watchfiles_adapter.awatch") as mock_awatch:
            mock_awatch.return_value = _empty_async_iter()
            await watcher.start()
            task1 = watcher._task
            await watcher.start()
            assert watcher._task is task1
            await watcher.stop()

    @pytest.mark.asyncio
    async def test_callback_receives_tracked_paths(self) -> None:
        callback = AsyncMock()
        watcher = WatchfilesWatcher(_ROOT, callback)

        changes = {
            (1, "/tmp/project/foo.py"),
            (2, "/tmp/project/notes.txt"),
            (1, "/tmp/project/src/baz.js"),
            (1, "/tmp/project/node_modules/dep.js"),
        }

        with patch("codesync.watcher.watchfiles_adapter.awatch") as mock_awatch:
            mock_awatch.return_value = _single_change_iter(changes)
            await watcher.start()
            await asyncio.sleep(0.05)
            await watcher.stop()

        callback.assert_called_once()
        paths = callback.call_args[0][0]
        assert paths == {
            Path("/tmp/project/foo.py"),
            Path("/tmp/project/notes.txt"),
            Path("/tmp/project/src/baz.js"),
        }

    @pytest.mark.asyncio
    async def test_callback_not_called_for_ignored_only(self) -> None:
        callback = AsyncMock()
        watcher = WatchfilesWatcher(_ROOT, callback)

        changes = {(1, "/tmp/project/.venv/lib/site.py"), (2, "/tmp/project/dist/bundle.js")}

        with patch("codesync.watcher.watchfiles_adapter.awatch") as mock_awatch:
            mock_awatch.return_value = _single_change_iter(changes)
            await watcher.start()
            await asyncio.sleep(0.05)
            await watcher.stop()

        callback.assert_not_called()

    @pytest.mark.asyncio
    async def test_callback_errors_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        callback = AsyncMock(side_effect=RuntimeError("boom"))
        watcher = WatchfilesWatcher(_ROOT, callback)

        with patch("codesync.watcher.watchfiles_adapter.awatch") as mock_awatch:
            mock_awatch.return_value = _single_change_iter({(1, "/tmp/project/a.py")})
            await watcher.start()
            await asyncio.sleep(0.05)
            assert watcher._task is not None
            assert not watcher._task.done()
            await watcher.stop()

        assert "Error in watcher callback" in caplog.text


async def _empty_async_iter() -> AsyncIterator[Any]:
    """Async iterator that never yields, just blocks until cancelled."""
    try:
        await asyncio.sleep(3600)
    except asyncio.CancelledError:
        return
    yield  # make it an async generator  # pragma: no cover


async def _single_change_iter(changes: set[tuple[int, str]]) -> AsyncIterator[set[tuple[int, str]]]:
    """Async iterator that yields one set of changes then blocks."""
    yield changes
    try:
        await asyncio.sleep(3600)
    except asyncio.CancelledError:
        return
