from typing import Literal

from pydantic import BaseModel, Field

EntryKind = Literal["file", "directory"]
DiffKind = Literal["unchanged", "added", "removed"]
SyncStatus = Literal["new", "unchanged", "update"]


class DiffLine(BaseModel):
    """One row of a line-level diff.

    ``line_number`` is 1-based; it indexes the modified text for ``unchanged``
    and ``added`` rows and the original text for ``removed`` rows.
    """

    kind: DiffKind
    content: str
    line_number: int


class FileNode(BaseModel):
    name: str
    kind: EntryKind
    path: str
    children: list["FileNode"] | None = None


FileNode.model_rebuild()  # necessary for recursive types


class PendingFile(BaseModel):
    filename: str
    code: str
    existing_path: str | None = None


class SyncOutcome(BaseModel):
    status: SyncStatus
    filename: str
    path: str | None = None
    original: str | None = None
    diff: list[DiffLine] = Field(default_factory=list)
    pending: PendingFile | None = None
    creation_paths: list[str] = Field(default_factory=list)


class PythonClass(BaseModel):
    name: str
    methods: list[str] = Field(default_factory=list)
    lineno: int


class PythonFunction(BaseModel):
    name: str
    params: list[str] = Field(default_factory=list)
    lineno: int


class PythonContext(BaseModel):
    imports: list[str] = Field(default_factory=list)
    classes: list[PythonClass] = Field(default_factory=list)
    functions: list[PythonFunction] = Field(default_factory=list)
    variables: list[str] = Field(default_factory=list)
