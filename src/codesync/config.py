import os

from pydantic import BaseModel, ConfigDict, Field

BASE_IGNORE_DIRS: frozenset[str] = frozenset({"node_modules", ".git", "dist", "build", ".next"})
PYTHON_IGNORE_DIRS: frozenset[str] = frozenset({"__pycache__", ".pytest_cache", ".venv", "venv"})
DEFAULT_IGNORE_DIRS: frozenset[str] = BASE_IGNORE_DIRS | PYTHON_IGNORE_DIRS

DEFAULT_SKELETON_LANGUAGES: frozenset[str] = frozenset({"javascript", "typescript", "python"})
DEFAULT_DIFF_LOOKAHEAD = 5


class ScanConfig(BaseModel):
    """Settings shared by every tree walk, skeleton scan and diff."""

    model_config = ConfigDict(frozen=True)

    ignore_dirs: frozenset[str] = DEFAULT_IGNORE_DIRS
    skeleton_languages: frozenset[str] = DEFAULT_SKELETON_LANGUAGES
    diff_lookahead: int = Field(default=DEFAULT_DIFF_LOOKAHEAD, ge=1)


def _split_names(raw: str) -> frozenset[str]:
    return frozenset(name.strip() for name in raw.split(",") if name.strip())


def load_config() -> ScanConfig:
    ignore_dirs = DEFAULT_IGNORE_DIRS
    replaced = os.getenv("CODESYNC_IGNORE_DIRS")
    if replaced is not None:
        ignore_dirs = _split_names(replaced)
    extra = os.getenv("CODESYNC_EXTRA_IGNORE_DIRS")
    if extra:
        ignore_dirs = ignore_dirs | _split_names(extra)

    lookahead_raw = os.getenv("CODESYNC_DIFF_LOOKAHEAD")
    lookahead = DEFAULT_DIFF_LOOKAHEAD
    if lookahead_raw:
        try:
            lookahead = int(lookahead_raw)
        except ValueError:
            raise ValueError(f"CODESYNC_DIFF_LOOKAHEAD must be an integer, got '{lookahead_raw}'") from None

    return ScanConfig(ignore_dirs=ignore_dirs, diff_lookahead=lookahead)
