from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Union

from codesync.models import EntryKind

TreeSpec = dict[str, Union[str, "TreeSpec"]]


class InMemoryEntry:
    """A node of a nested-dict tree: ``str`` values are files, ``dict`` values directories."""

    def __init__(self, name: str, content: str | TreeSpec) -> None:
        self._name = name
        self._content = content

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r}, kind={self.kind!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def kind(self) -> EntryKind:
        return "directory" if isinstance(self._content, dict) else "file"

    async def read(self) -> str:
        if isinstance(self._content, dict):
            raise IsADirectoryError(f"Is a directory: {self._name}")
        return self._content

    async def iter_entries(self) -> AsyncIterator[InMemoryEntry]:
        if not isinstance(self._content, dict):
            raise NotADirectoryError(f"Not a directory: {self._name}")
        for name, content in list(self._content.items()):
            yield InMemoryEntry(name, content)


class InMemoryDirectory(InMemoryEntry):
    """Workspace root over a nested dict, kept in insertion order.

    Implements the ``WorkspaceRoot`` protocol; writes mutate the dict passed in.
    """

    def __init__(self, tree: TreeSpec | None = None, name: str = "") -> None:
        super().__init__(name, tree if tree is not None else {})

    @property
    def tree(self) -> TreeSpec:
        assert isinstance(self._content, dict)
        return self._content

    def _parent(self, parts: list[str], create: bool) -> TreeSpec:
        node = self.tree
        for part in parts:
            child = node.get(part)
            if child is None and create:
                child = node[part] = {}
            if not isinstance(child, dict):
                raise NotADirectoryError(f"Not a directory: {part}")
            node = child
        return node

    async def read_file(self, path: str) -> str:
        *dirs, filename = path.split("/")
        try:
            content = self._parent(dirs, create=False).get(filename)
        except NotADirectoryError:
            content = None
        if content is None:
            raise FileNotFoundError(f"File not found: {path}")
        if isinstance(content, dict):
            raise IsADirectoryError(f"Is a directory: {path}")
        return content

    async def write_file(self, path: str, text: str) -> None:
        *dirs, filename = path.split("/")
        parent = self._parent(dirs, create=True)
        if isinstance(parent.get(filename), dict):
            raise IsADirectoryError(f"Is a directory: {path}")
        parent[filename] = text
