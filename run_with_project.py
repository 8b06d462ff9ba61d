#!/usr/bin/env python3
"""
Project Launcher - pick a sibling project and start the run tool for it

Lists the entries of the project root (the parent of this script's
directory), asks for one by number or name, and runs the configured tool
with COLLECTION, PROJECT_DIR and EMBEDDING set for the choice.

Exit codes:
    0   = run tool succeeded, or input ended before a choice was made
    1   = unknown command-line parameter
    130 = interrupted at the prompt
    any other = exit status of the run tool
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from config.config import get_config
from models.selection import LaunchOptions, Selection
from services.launch_service import LaunchService
from services.project_service import ProjectService
from services.selector_service import ProjectSelector
from utils.errors import UnknownParameterError

logger = logging.getLogger(__name__)

NO_EMBEDDING_FLAG = "--no-embedding"


class _ParserError(Exception):
    pass


class LauncherArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports problems instead of exiting"""

    def error(self, message):
        raise _ParserError(message)


def build_parser(embedding_default: bool = True) -> LauncherArgumentParser:
    parser = LauncherArgumentParser(
        prog="run_with_project",
        description="Select a project and launch the run tool for it.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        NO_EMBEDDING_FLAG,
        dest="embedding",
        action="store_false",
        help="Set EMBEDDING=false for the run tool.",
    )
    parser.set_defaults(embedding=embedding_default)
    return parser


def parse_arguments(
    argv: Optional[List[str]] = None, embedding_default: bool = True
) -> LaunchOptions:
    """
    Parse command-line tokens

    Raises:
        UnknownParameterError: For the first token other than --no-embedding
    """
    argv = list(sys.argv[1:] if argv is None else argv)

    # argparse swallows a bare "--", which is still an unknown token here
    if "--" in argv:
        raise UnknownParameterError(
            next(token for token in argv if token != NO_EMBEDDING_FLAG)
        )

    parser = build_parser(embedding_default)
    try:
        namespace, extras = parser.parse_known_args(argv)
    except _ParserError:
        extras = [token for token in argv if token != NO_EMBEDDING_FLAG]

    if extras:
        raise UnknownParameterError(extras[0])

    return LaunchOptions(embedding=namespace.embedding)


def setup_logging(log_level: str):
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(
    argv: Optional[List[str]] = None,
    input_func: Callable[[str], str] = input,
    launcher_file: str = __file__,
) -> int:
    config = get_config()
    setup_logging("DEBUG" if config.debug else config.log_level)

    try:
        options = parse_arguments(argv, config.launch.embedding_default)
    except UnknownParameterError as e:
        print(config.menu.unknown_parameter.format(parameter=e.parameter))
        return 1

    # Resolution failures are fatal and propagate
    projects_root = ProjectService.resolve_projects_root(
        launcher_file, config.project.projects_root
    )
    logger.info(f"Listing projects under {projects_root}")

    projects = ProjectService(
        projects_root, include_hidden=config.project.include_hidden
    ).list_projects()
    selector = ProjectSelector(projects, config.menu, input_func=input_func)

    try:
        project = selector.prompt()
    except KeyboardInterrupt:
        print()
        return config.commands.exit_codes["interrupted"]

    if project is None:
        return 0

    selection = Selection(project=project, embedding=options.embedding)
    print(config.menu.selected.format(path=selection.project_dir))

    return LaunchService(config).launch(selection)


if __name__ == "__main__":
    sys.exit(main())
