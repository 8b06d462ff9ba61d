"""
Selection and launch option models
"""

from dataclasses import dataclass
from typing import Dict

from models.project import Project


@dataclass(frozen=True)
class LaunchOptions:
    """Options parsed from the command line"""

    embedding: bool = True


@dataclass(frozen=True)
class Selection:
    """A project chosen from the menu, ready to hand to the run tool"""

    project: Project
    embedding: bool = True

    @property
    def collection(self) -> str:
        return self.project.name

    @property
    def project_dir(self) -> str:
        return self.project.full_path

    @property
    def embedding_value(self) -> str:
        """Embedding flag as the run tool expects it"""
        return "true" if self.embedding else "false"

    def to_environment(self, env_names: Dict[str, str]) -> Dict[str, str]:
        """
        Render the selection as environment variables

        Args:
            env_names: Mapping of collection/project_dir/embedding to variable names

        Returns:
            Variable name to value mapping
        """
        return {
            env_names["collection"]: self.collection,
            env_names["project_dir"]: self.project_dir,
            env_names["embedding"]: self.embedding_value,
        }
