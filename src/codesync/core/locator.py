from codesync.config import DEFAULT_IGNORE_DIRS
from codesync.core.ports.filesystem import DirectoryEntry
from codesync.core.tree import iter_directories
from codesync.models import FileNode


async def locate_file(
    root: DirectoryEntry,
    filename: str,
    ignore_dirs: frozenset[str] = DEFAULT_IGNORE_DIRS,
    path: str = "",
) -> str | None:
    """Return the first path whose base name equals ``filename``, depth-first.

    Matching is exact and case-sensitive; ignored directories are not searched.
    """
    async for entry in root.iter_entries():
        entry_path = f"{path}/{entry.name}" if path else entry.name
        if entry.kind == "file" and entry.name == filename:
            return entry_path
        if entry.kind == "directory" and entry.name not in ignore_dirs:
            found = await locate_file(entry, filename, ignore_dirs, entry_path)
            if found is not None:
                return found
    return None


def creation_paths(tree: list[FileNode], filename: str) -> list[str]:
    """Candidate locations for a file that does not exist yet: the root, then every directory."""
    return [filename, *(f"{directory}/{filename}" for directory in iter_directories(tree))]
