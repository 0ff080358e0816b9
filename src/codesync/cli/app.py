import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from codesync.cli.diff import diff
from codesync.cli.show import context, project_map, skeleton, tree
from codesync.cli.sync import locate, sync
from codesync.cli.watch import watch

app = typer.Typer(
    name="codesync",
    help="codesync: skeletons, review diffs and file matching for pasted code.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def _configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


app.command("skeleton")(skeleton)
app.command("map")(project_map)
app.command("tree")(tree)
app.command("context")(context)
app.command("diff")(diff)
app.command("locate")(locate)
app.command("sync")(sync)
app.command("watch")(watch)


def main() -> None:
    app()
