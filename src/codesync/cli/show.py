import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.tree import Tree

from codesync.cli._common import console, fail, get_config, open_workspace, read_source
from codesync.core.languages import SUPPORTED_LANGUAGES, classify
from codesync.core.project_map import build_project_map
from codesync.core.prompt import build_file_context
from codesync.core.skeleton import extract_skeleton, ruleset_for
from codesync.core.tree import build_tree, format_structure
from codesync.models import FileNode


def skeleton(
    file: Annotated[Path, typer.Argument(help="Source file to reduce.")],
    language: Annotated[str | None, typer.Option(help="Override the detected language tag.")] = None,
) -> None:
    """Print the structural skeleton of one file."""
    if language is not None and language not in SUPPORTED_LANGUAGES:
        raise fail(f"Unsupported language '{language}'. Supported: {sorted(SUPPORTED_LANGUAGES)}")
    tag = language or classify(file.name)
    console.print(extract_skeleton(read_source(file), ruleset_for(tag)), markup=False, highlight=False)


def project_map(
    root: Annotated[Path, typer.Argument(help="Project root.")] = Path("."),
) -> None:
    """Print the project map: every eligible file's skeleton."""
    config = get_config()
    workspace = open_workspace(root)
    text = asyncio.run(build_project_map(workspace, config.ignore_dirs, config.skeleton_languages))
    console.print(text, markup=False, highlight=False)


def _add_nodes(branch: Tree, nodes: list[FileNode]) -> None:
    for node in nodes:
        if node.kind == "directory":
            label = f"[bold blue]{escape(node.name)}/[/bold blue]"
            if node.children is None:
                label += " [dim](not scanned)[/dim]"
            child = branch.add(label)
            _add_nodes(child, node.children or [])
        else:
            branch.add(escape(node.name))


def tree(
    root: Annotated[Path, typer.Argument(help="Project root.")] = Path("."),
    plain: Annotated[bool, typer.Option(help="Print a plain text outline.")] = False,
) -> None:
    """Show the sorted file tree."""
    config = get_config()
    workspace = open_workspace(root)
    nodes = asyncio.run(build_tree(workspace, config.ignore_dirs))
    if plain:
        console.print(format_structure(nodes), end="", markup=False, highlight=False)
        return
    rendered = Tree(f"[bold]{escape(workspace.name)}[/bold]")
    _add_nodes(rendered, nodes)
    console.print(rendered)


def context(
    file: Annotated[Path, typer.Argument(help="Source file to describe.")],
) -> None:
    """Print the prompt context block for one file."""
    console.print(build_file_context(file.name, read_source(file)), markup=False, highlight=False)
