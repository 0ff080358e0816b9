import unicodedata

from codesync.config import DEFAULT_IGNORE_DIRS
from codesync.core.ports.filesystem import DirectoryEntry
from codesync.models import FileNode


def _join(parent: str, name: str) -> str:
    return f"{parent}/{name}" if parent else name


def _char_rank(char: str) -> int:
    if char.isalpha():
        return 2
    if char.isdigit():
        return 1
    return 0


def _collation_key(name: str) -> tuple[tuple[int, str], ...]:
    """Primary alphabetical key: accents and case dropped, punctuation before digits before letters."""
    base = "".join(c for c in unicodedata.normalize("NFKD", name) if not unicodedata.combining(c))
    return tuple((_char_rank(c), c) for c in base.casefold())


def _sort_key(node: FileNode) -> tuple[bool, tuple[tuple[int, str], ...], str, str]:
    # Directories first, then alphabetical; on ties unaccented wins, then lowercase.
    name = node.name
    accents = unicodedata.normalize("NFD", name).casefold()
    return (node.kind != "directory", _collation_key(name), accents, name.swapcase())


async def build_tree(
    root: DirectoryEntry,
    ignore_dirs: frozenset[str] = DEFAULT_IGNORE_DIRS,
    path: str = "",
) -> list[FileNode]:
    """Build the sorted node hierarchy under ``root``.

    Ignored directories are listed but not expanded: their ``children`` stays
    ``None``, which tells a viewer "not scanned" rather than "empty".
    """
    nodes: list[FileNode] = []
    async for entry in root.iter_entries():
        entry_path = _join(path, entry.name)
        node = FileNode(name=entry.name, kind=entry.kind, path=entry_path)
        if entry.kind == "directory" and entry.name not in ignore_dirs:
            node.children = await build_tree(entry, ignore_dirs, entry_path)
        nodes.append(node)
    return sorted(nodes, key=_sort_key)


def iter_directories(nodes: list[FileNode]) -> list[str]:
    """Paths of every expanded directory, sorted; ignored (unexpanded) ones are skipped."""
    found: list[str] = []

    def _walk(level: list[FileNode]) -> None:
        for node in level:
            if node.kind != "directory" or node.children is None:
                continue
            found.append(node.path)
            _walk(node.children)

    _walk(nodes)
    return sorted(found)


def format_structure(nodes: list[FileNode], indent: str = "") -> str:
    """Render a tree as an indented outline, one ``📂``/``📄`` line per node."""
    lines: list[str] = []
    for node in nodes:
        icon = "📂" if node.kind == "directory" else "📄"
        lines.append(f"{indent}{icon} {node.name}\n")
        if node.children:
            lines.append(format_structure(node.children, indent + "  "))
    return "".join(lines)
