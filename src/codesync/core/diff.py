"""Line-level diff used to review an incoming version of a file.

The engine walks both texts with one cursor each. Equal lines advance both
cursors; otherwise a small lookahead window looks for the nearest point where
the streams line up again. It is greedy, not a minimal edit script, which
keeps it close to linear and reads well on the small, local edits a pasted
snippet usually makes.
"""

from collections import Counter

from codesync.config import DEFAULT_DIFF_LOOKAHEAD
from codesync.models import DiffLine


def _split_lines(text: str, label: str) -> list[str]:
    if not isinstance(text, str):
        raise TypeError(f"{label} must be str, not {type(text).__name__}")
    return text.split("\n")


def generate_diff(original: str, modified: str, lookahead: int = DEFAULT_DIFF_LOOKAHEAD) -> list[DiffLine]:
    """Diff two texts line by line.

    At each window size ``k`` an insertion (``modified[j + k] == original[i]``)
    is tried before a deletion (``original[i + k] == modified[j]``), so an
    ambiguous window reads as added lines. With no resync inside the window
    the current pair is reported as a removal followed by an addition.
    """
    if lookahead < 1:
        raise ValueError(f"lookahead must be >= 1, got {lookahead}")
    original_lines = _split_lines(original, "original")
    modified_lines = _split_lines(modified, "modified")
    n_original = len(original_lines)
    n_modified = len(modified_lines)

    diff: list[DiffLine] = []
    i = 0
    j = 0
    while i < n_original or j < n_modified:
        line_o = original_lines[i] if i < n_original else None
        line_m = modified_lines[j] if j < n_modified else None

        if line_o is not None and line_o == line_m:
            diff.append(DiffLine(kind="unchanged", content=line_o, line_number=j + 1))
            i += 1
            j += 1
            continue

        synced = False
        for k in range(1, lookahead + 1):
            if line_o is not None and j + k < n_modified and modified_lines[j + k] == line_o:
                for n in range(k):
                    diff.append(DiffLine(kind="added", content=modified_lines[j + n], line_number=j + n + 1))
                j += k
                synced = True
                break
            if line_m is not None and i + k < n_original and original_lines[i + k] == line_m:
                for n in range(k):
                    diff.append(DiffLine(kind="removed", content=original_lines[i + n], line_number=i + n + 1))
                i += k
                synced = True
                break
        if synced:
            continue

        if line_o is not None:
            diff.append(DiffLine(kind="removed", content=line_o, line_number=i + 1))
            i += 1
        if line_m is not None:
            diff.append(DiffLine(kind="added", content=line_m, line_number=j + 1))
            j += 1
    return diff


def source_lines(diff: list[DiffLine]) -> list[str]:
    """Rebuild the original lines from ``removed`` and ``unchanged`` rows."""
    return [line.content for line in diff if line.kind != "added"]


def destination_lines(diff: list[DiffLine]) -> list[str]:
    """Rebuild the modified lines from ``added`` and ``unchanged`` rows."""
    return [line.content for line in diff if line.kind != "removed"]


def has_changes(diff: list[DiffLine]) -> bool:
    return any(line.kind != "unchanged" for line in diff)


def diff_stats(diff: list[DiffLine]) -> dict[str, int]:
    counts = Counter(line.kind for line in diff)
    return {kind: counts.get(kind, 0) for kind in ("added", "removed", "unchanged")}
