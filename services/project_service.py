"""
Service for locating the project root and enumerating its entries
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from config.config import get_config
from models.project import Project

INCLUDE_HIDDEN = get_config().project.include_hidden

logger = logging.getLogger(__name__)


class ProjectService:
    """Service for discovering selectable projects"""

    def __init__(
        self, root_dir: Union[str, Path] = ".", include_hidden: Optional[bool] = None
    ):
        self.root_dir = Path(root_dir).resolve()
        self.include_hidden = (
            INCLUDE_HIDDEN if include_hidden is None else include_hidden
        )

    @staticmethod
    def resolve_projects_root(
        launcher_file: Union[str, Path], override: Optional[str] = None
    ) -> Path:
        """
        Resolve the directory whose entries are offered as projects

        Args:
            launcher_file: Path of the running launcher program
            override: Configured root that replaces the launcher's parent

        Returns:
            Absolute, symlink-free project root

        Raises:
            OSError: If a path in the chain cannot be resolved
        """
        if override:
            return Path(override).expanduser().resolve(strict=True)

        launcher_dir = Path(launcher_file).resolve(strict=True).parent
        return (launcher_dir / "..").resolve(strict=True)

    def _is_visible(self, entry: Path) -> bool:
        return self.include_hidden or not entry.name.startswith(".")

    def list_projects(self) -> List[Project]:
        """List every immediate entry of the root, files and directories alike"""
        projects = [
            Project.from_path(entry)
            for entry in self.root_dir.iterdir()
            if self._is_visible(entry)
        ]
        projects.sort(key=lambda project: project.name)
        logger.debug(f"Found {len(projects)} projects under {self.root_dir}")
        return projects
