"""
Data models for the Project Launcher
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Project:
    """Represents one entry of the project root"""

    name: str
    path: Path

    @classmethod
    def from_path(cls, path: Path) -> "Project":
        """Build a project from an entry path"""
        return cls(name=path.name, path=path)

    @property
    def full_path(self) -> str:
        """Get the full path as string"""
        return str(self.path)

    def __str__(self) -> str:
        return self.full_path
