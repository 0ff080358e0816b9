import asyncio
from pathlib import Path
from typing import Annotated

import typer

from codesync.cli._common import console, fail, get_config, open_workspace, read_source
from codesync.cli.diff import render_diff
from codesync.core.locator import locate_file
from codesync.core.workspace import Workspace


def locate(
    filename: Annotated[str, typer.Argument(help="Base name to search for.")],
    root: Annotated[Path, typer.Option(help="Project root.")] = Path("."),
) -> None:
    """Print the first path whose base name matches FILENAME."""
    config = get_config()
    workspace = open_workspace(root)
    found = asyncio.run(locate_file(workspace, filename, config.ignore_dirs))
    if found is None:
        console.print(f"[yellow]{filename}[/yellow] not found")
        raise typer.Exit(code=1)
    console.print(found, markup=False, highlight=False)


def sync(
    filename: Annotated[str, typer.Argument(help="Name of the incoming file.")],
    code: Annotated[str | None, typer.Option(help="Incoming code as a string.")] = None,
    source: Annotated[Path | None, typer.Option(help="Read the incoming code from this file.")] = None,
    root: Annotated[Path, typer.Option(help="Project root.")] = Path("."),
    apply: Annotated[bool, typer.Option(help="Write the incoming code to the located file.")] = False,
) -> None:
    """Match incoming code against the project and show what would change."""
    if (code is None) == (source is None):
        raise fail("pass exactly one of --code or --source")
    if source is not None:
        incoming = read_source(source)
    else:
        assert code is not None
        incoming = code
    workspace = Workspace(open_workspace(root), get_config())

    async def _run() -> None:
        outcome = await workspace.sync(filename, incoming)
        if outcome.status == "unchanged":
            console.print(f"[green]{outcome.path}[/green] is already up to date")
            return
        if outcome.status == "new":
            console.print(f"[yellow]{filename}[/yellow] not found. Choose a location:")
            for candidate in outcome.creation_paths:
                console.print(f"  {candidate}", markup=False, highlight=False)
            return
        console.print(f"[bold]Review changes in {outcome.path}[/bold]")
        render_diff(outcome.diff)
        if apply:
            assert outcome.path is not None
            await workspace.apply(outcome.path, incoming)
            console.print(f"[green]Applied[/green] changes to {outcome.path}")

    try:
        asyncio.run(_run())
    except OSError as exc:
        raise fail(str(exc)) from None
