from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from codesync.cli._common import console, fail, get_config, read_source
from codesync.core.diff import diff_stats, generate_diff, has_changes
from codesync.models import DiffLine

_GUTTERS = {"added": "+", "removed": "-", "unchanged": " "}
_STYLES = {"added": "green", "removed": "red", "unchanged": "dim"}


def render_diff(lines: list[DiffLine]) -> None:
    if not has_changes(lines):
        console.print("[dim]No changes detected.[/dim]")
        return
    for line in lines:
        style = _STYLES[line.kind]
        console.print(
            f"[{style}]{_GUTTERS[line.kind]} {line.line_number:>4} │ {escape(line.content)}[/{style}]",
            highlight=False,
        )
    stats = diff_stats(lines)
    console.print(f"[green]+{stats['added']}[/green] [red]-{stats['removed']}[/red] ({stats['unchanged']} unchanged)")


def diff(
    original: Annotated[Path, typer.Argument(help="Current version of the file.")],
    modified: Annotated[Path, typer.Argument(help="Proposed version of the file.")],
    lookahead: Annotated[int | None, typer.Option(help="Resync window size.")] = None,
) -> None:
    """Show a line-level review diff between two versions of a file."""
    window = lookahead if lookahead is not None else get_config().diff_lookahead
    if window < 1:
        raise fail("--lookahead must be at least 1")
    render_diff(generate_diff(read_source(original), read_source(modified), window))
