"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from codesync.fs import InMemoryDirectory, LocalDirectory
from codesync.fs.memory import TreeSpec


# ---------------------------------------------------------------------------
# Auto-marker: every test here runs without external services
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared workspace fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def project_spec() -> TreeSpec:
    """A small mixed JS/Python project with housekeeping directories."""
    return {
        "src": {
            "app.ts": "import { util } from './util';\n\nexport function main() {\n  util();\n}\n",
            "util.js": "export const util = () => {\n  return 1;\n};\n",
            "node_modules": {"dep.js": "function dep() {\n  return 0;\n}\n"},
        },
        "scripts": {
            "build.py": "import sys\n\n\ndef run(argv):\n    return len(argv)\n",
            "__pycache__": {"build.cpython-312.pyc": "binary"},
        },
        "README.md": "# Project\n",
        "index.html": "<html></html>\n",
    }


@pytest.fixture
def memory_root(project_spec: TreeSpec) -> InMemoryDirectory:
    return InMemoryDirectory(project_spec, name="project")


def write_tree(base: Path, layout: TreeSpec) -> None:
    for name, content in layout.items():
        target = base / name
        if isinstance(content, dict):
            target.mkdir()
            write_tree(target, content)
        else:
            target.write_text(content, encoding="utf-8")


@pytest.fixture
def local_root(tmp_path: Path, project_spec: TreeSpec) -> LocalDirectory:
    write_tree(tmp_path, project_spec)
    return LocalDirectory(tmp_path)
