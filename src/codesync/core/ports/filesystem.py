from collections.abc import AsyncIterator
from typing import Protocol

from codesync.models import EntryKind


class DirectoryEntry(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def kind(self) -> EntryKind: ...

    async def read(self) -> str: ...

    def iter_entries(self) -> AsyncIterator["DirectoryEntry"]: ...


class WorkspaceRoot(DirectoryEntry, Protocol):
    async def read_file(self, path: str) -> str: ...

    async def write_file(self, path: str, text: str) -> None: ...
