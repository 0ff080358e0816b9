from pathlib import Path

import typer
from rich.console import Console

from codesync.config import ScanConfig, load_config
from codesync.fs import LocalDirectory

console = Console()
err_console = Console(stderr=True)


def fail(message: str) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {message}")
    return typer.Exit(code=1)


def open_workspace(root: Path) -> LocalDirectory:
    try:
        return LocalDirectory(root)
    except OSError as exc:
        raise fail(str(exc)) from None


def read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise fail(f"cannot read {path}: {exc.strerror or exc}") from None


def get_config() -> ScanConfig:
    try:
        return load_config()
    except ValueError as exc:
        raise fail(str(exc)) from None
