import logging

from codesync.config import ScanConfig
from codesync.core.ports.filesystem import WorkspaceRoot
from codesync.core.project_map import build_project_map
from codesync.core.sync import sync_code
from codesync.core.tree import build_tree
from codesync.models import FileNode, SyncOutcome

logger = logging.getLogger(__name__)


class Workspace:
    """A connected project: its file tree and project map, plus sync actions.

    ``tree`` and ``project_map`` are replaced wholesale by ``refresh``; nothing
    is merged between scans.
    """

    def __init__(self, root: WorkspaceRoot, config: ScanConfig | None = None) -> None:
        self.root = root
        self.config = config or ScanConfig()
        self.tree: list[FileNode] = []
        self.project_map = ""

    async def refresh(self) -> None:
        logger.info("Indexing file tree of %s", self.root.name or "workspace")
        tree = await build_tree(self.root, self.config.ignore_dirs)
        logger.info("Generating project skeleton")
        project_map = await build_project_map(self.root, self.config.ignore_dirs, self.config.skeleton_languages)
        self.tree = tree
        self.project_map = project_map
        logger.info("Workspace ready: %d top-level entr(ies)", len(tree))

    async def sync(self, filename: str, code: str) -> SyncOutcome:
        return await sync_code(self.root, filename, code, self.config)

    async def apply(self, path: str, code: str) -> None:
        """Write ``code`` to ``path`` and rescan so the project map reflects it."""
        await self.root.write_file(path, code)
        logger.info("Applied changes to %s", path)
        await self.refresh()
