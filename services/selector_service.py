"""
Interactive numbered menu for choosing a project
"""

import logging
from typing import Callable, List, Optional

from config.config import MenuConfig, get_config
from models.project import Project
from utils.errors import InvalidSelectionError

logger = logging.getLogger(__name__)


class ProjectSelector:
    """Presents projects as a numbered menu and reads the user's choice"""

    def __init__(
        self,
        projects: List[Project],
        menu_config: Optional[MenuConfig] = None,
        input_func: Callable[[str], str] = input,
        output_func: Callable[..., None] = print,
    ):
        self.projects = list(projects)
        self.menu = menu_config or get_config().menu
        self.input_func = input_func
        self.output_func = output_func

    def render_menu(self) -> List[str]:
        """Menu lines, numbered from 1"""
        return [
            self.menu.item_format.format(
                index=index, name=project.name, path=project.full_path
            )
            for index, project in enumerate(self.projects, start=1)
        ]

    def resolve_choice(self, choice: str) -> Project:
        """
        Resolve one line of input to a project

        A number in range selects by menu position; otherwise an exact
        base name selects that entry.

        Raises:
            InvalidSelectionError: If the input names no listed project
        """
        choice = choice.strip()

        # ASCII only: int() rejects digits such as superscripts
        if choice.isascii() and choice.isdigit():
            index = int(choice)
            if 1 <= index <= len(self.projects):
                return self.projects[index - 1]

        for project in self.projects:
            if choice and project.name == choice:
                return project

        raise InvalidSelectionError(choice, len(self.projects))

    def show_menu(self):
        for line in self.render_menu():
            self.output_func(line)

    def prompt(self) -> Optional[Project]:
        """
        Loop until a valid choice is made

        Returns:
            The chosen project, or None once input is exhausted
        """
        self.output_func(self.menu.header)
        self.show_menu()

        while True:
            try:
                choice = self.input_func(self.menu.prompt)
            except EOFError:
                # Leave the cursor on a fresh line after the prompt
                self.output_func()
                logger.debug("Input exhausted before a project was selected")
                return None

            try:
                return self.resolve_choice(choice)
            except InvalidSelectionError as e:
                logger.debug(f"Rejected menu input {e.choice!r}")
                self.output_func(self.menu.invalid_selection)
                self.show_menu()
