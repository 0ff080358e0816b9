import logging

from codesync.config import ScanConfig
from codesync.core.diff import generate_diff
from codesync.core.locator import creation_paths, locate_file
from codesync.core.ports.filesystem import WorkspaceRoot
from codesync.core.tree import build_tree
from codesync.models import PendingFile, SyncOutcome

logger = logging.getLogger(__name__)


async def sync_code(
    root: WorkspaceRoot,
    filename: str,
    code: str,
    config: ScanConfig | None = None,
) -> SyncOutcome:
    """Decide what an incoming ``(filename, code)`` pair means for the workspace.

    A file found by base name yields either ``unchanged`` or an ``update`` with
    the review diff. Otherwise the pair becomes a pending ``new`` file with the
    candidate creation paths.
    """
    config = config or ScanConfig()
    existing_path = await locate_file(root, filename, config.ignore_dirs)

    if existing_path is None:
        tree = await build_tree(root, config.ignore_dirs)
        paths = creation_paths(tree, filename)
        logger.info("%s not found, offering %d creation path(s)", filename, len(paths))
        return SyncOutcome(
            status="new",
            filename=filename,
            pending=PendingFile(filename=filename, code=code),
            creation_paths=paths,
        )

    existing = await root.read_file(existing_path)
    if existing == code:
        logger.info("%s is already up to date", existing_path)
        return SyncOutcome(status="unchanged", filename=filename, path=existing_path, original=existing)

    diff = generate_diff(existing, code, config.diff_lookahead)
    logger.info("Found %s, %d diff line(s) to review", existing_path, len(diff))
    return SyncOutcome(
        status="update",
        filename=filename,
        path=existing_path,
        original=existing,
        diff=diff,
    )
