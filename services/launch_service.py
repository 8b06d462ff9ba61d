"""
Service for handing a selected project to the run tool
"""

import logging
import os
from typing import Dict, Optional

from config.config import UnifiedConfig, get_config
from models.selection import Selection
from services.platform_service import PlatformService
from utils.errors import CommandNotFoundError

logger = logging.getLogger(__name__)


class LaunchService:
    """Builds the run tool environment and waits for the tool to finish"""

    def __init__(
        self,
        config: Optional[UnifiedConfig] = None,
        platform_service: Optional[PlatformService] = None,
    ):
        self.config = config or get_config()
        self.platform_service = platform_service or PlatformService(
            self.config.commands.commands, self.config.commands.exit_codes
        )

    def build_environment(
        self, selection: Selection, base_env: Optional[Dict[str, str]] = None
    ) -> Dict[str, str]:
        """Copy of the parent environment with the selection variables added"""
        env = dict(os.environ if base_env is None else base_env)
        env.update(selection.to_environment(self.config.launch.env_names))
        return env

    def launch(self, selection: Selection) -> int:
        """
        Run the configured tool for a selection

        Returns:
            Exit status of the run tool, or 127/126 when it cannot be started
        """
        launch = self.config.launch
        exit_codes = self.config.commands.exit_codes
        env = self.build_environment(selection)

        logger.info(
            f"Launching {launch.command_key}/{launch.subkey} for {selection.collection} "
            f"(embedding={selection.embedding_value})"
        )

        try:
            return self.platform_service.run_interactive(
                launch.command_key, subkey=launch.subkey, env=env
            )
        except CommandNotFoundError as e:
            logger.error(f"{e.message}. Is it installed and on PATH?")
            return exit_codes["not_found"]
        except PermissionError as e:
            logger.error(f"Cannot execute run tool: {e}")
            return exit_codes["not_executable"]
