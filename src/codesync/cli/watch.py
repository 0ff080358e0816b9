import asyncio
from pathlib import Path
from typing import Annotated

import typer

from codesync.cli._common import console, get_config, open_workspace
from codesync.core.workspace import Workspace
from codesync.watcher.watchfiles_adapter import WatchfilesWatcher


def watch(
    root: Annotated[Path, typer.Argument(help="Project root.")] = Path("."),
) -> None:
    """Rebuild the file tree and project map whenever the workspace changes."""
    config = get_config()
    local = open_workspace(root)
    workspace = Workspace(local, config)

    async def _refresh(paths: set[Path]) -> None:
        await workspace.refresh()
        console.print(f"[green]Refreshed[/green] workspace after {len(paths)} change(s)")

    async def _run() -> None:
        await workspace.refresh()
        console.print(f"[green]Watching[/green] {local.path}")
        watcher = WatchfilesWatcher(local.path, _refresh, config)
        await watcher.start()
        try:
            await watcher.wait()
        finally:
            await watcher.stop()

    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        console.print("Stopped.")
