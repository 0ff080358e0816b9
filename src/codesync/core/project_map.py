from codesync.config import DEFAULT_IGNORE_DIRS, DEFAULT_SKELETON_LANGUAGES
from codesync.core.languages import classify
from codesync.core.ports.filesystem import DirectoryEntry
from codesync.core.skeleton import extract_skeleton, ruleset_for


def format_file_block(path: str, skeleton: str) -> str:
    return f"\n// --- FILE: {path} ---\n{skeleton}\n"


async def _collect_blocks(
    root: DirectoryEntry,
    ignore_dirs: frozenset[str],
    languages: frozenset[str],
    path: str,
) -> list[str]:
    blocks: list[str] = []
    async for entry in root.iter_entries():
        if entry.name in ignore_dirs:
            continue
        entry_path = f"{path}/{entry.name}" if path else entry.name
        if entry.kind == "directory":
            blocks.extend(await _collect_blocks(entry, ignore_dirs, languages, entry_path))
            continue
        language = classify(entry.name)
        if language not in languages:
            continue
        text = await entry.read()
        blocks.append(format_file_block(entry_path, extract_skeleton(text, ruleset_for(language))))
    return blocks


async def build_project_map(
    root: DirectoryEntry,
    ignore_dirs: frozenset[str] = DEFAULT_IGNORE_DIRS,
    languages: frozenset[str] = DEFAULT_SKELETON_LANGUAGES,
) -> str:
    """Concatenate the skeletons of every eligible file, depth-first pre-order.

    Each file contributes ``"\\n// --- FILE: <path> ---\\n<skeleton>\\n"``;
    directories add no header of their own. An empty or fully ignored tree
    gives ``""``.
    """
    return "".join(await _collect_blocks(root, ignore_dirs, languages, ""))
