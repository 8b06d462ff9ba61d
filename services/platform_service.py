"""
Platform-specific operations service
"""

import contextlib
import logging
import signal
import subprocess
import threading
from typing import List, Optional, Dict

from config.config import get_config
from utils.errors import CommandNotFoundError

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def sigint_ignored():
    """Leave Ctrl-C to the child while the launcher waits for it"""
    if threading.current_thread() is not threading.main_thread():
        # Handlers can only be installed from the main thread
        yield
        return

    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        yield
    finally:
        signal.signal(
            signal.SIGINT, signal.default_int_handler if previous is None else previous
        )


class PlatformService:
    """Service for running configured commands attached to the terminal"""

    def __init__(
        self,
        commands: Optional[Dict[str, Dict]] = None,
        exit_codes: Optional[Dict[str, int]] = None,
    ):
        if commands is None or exit_codes is None:
            command_config = get_config().commands
            commands = command_config.commands if commands is None else commands
            exit_codes = command_config.exit_codes if exit_codes is None else exit_codes
        self.commands = commands
        self.exit_codes = exit_codes

    def prepare_command(self, command_key: str, subkey: Optional[str] = None) -> List[str]:
        """
        Look up a command from the commands table
        Returns the argv list
        """
        if command_key not in self.commands:
            raise ValueError(f"Unknown command key: {command_key}")

        cmd_template = self.commands[command_key]

        # Handle subkey access
        if subkey is not None:
            if not isinstance(cmd_template, dict):
                raise ValueError(f"Command key {command_key} does not support subkeys")
            if subkey not in cmd_template:
                raise ValueError(
                    f"Unknown subkey '{subkey}' for command key '{command_key}'"
                )
            cmd_template = cmd_template[subkey]

        if not isinstance(cmd_template, list) or not all(
            isinstance(part, str) for part in cmd_template
        ):
            raise ValueError(f"Invalid command template: {cmd_template!r}")

        return list(cmd_template)

    def normalize_exit_status(self, returncode: int) -> int:
        """Map a child return code to a shell-style exit status"""
        if returncode < 0:
            # Killed by signal -returncode
            return self.exit_codes["signal_base"] - returncode
        return returncode

    def run_interactive(
        self,
        command_key: str,
        subkey: Optional[str] = None,
        env: Optional[Dict[str, str]] = None,
        cwd: Optional[str] = None,
    ) -> int:
        """
        Run a command attached to the launcher's terminal and wait for it

        Ctrl-C is ignored by the launcher while the child runs, so the
        child decides how to shut down and its status is still returned.

        Args:
            command_key: Key to look up command template in the commands table
            subkey: Optional subkey within the command group (e.g., 'run' for RUN_COMMANDS)
            env: Full environment for the child, inherited when None
            cwd: Working directory for the child, inherited when None

        Returns:
            The child's exit status

        Raises:
            CommandNotFoundError: If the executable does not exist
            PermissionError: If the executable cannot be run
        """
        cmd = self.prepare_command(command_key, subkey)
        logger.info(f"Running {cmd}")

        try:
            # No capture: stdin, stdout and stderr stay attached to the terminal
            process = subprocess.Popen(cmd, env=env, cwd=cwd)
        except FileNotFoundError as e:
            raise CommandNotFoundError(cmd[0], {"command": cmd}) from e

        with sigint_ignored():
            returncode = process.wait()

        status = self.normalize_exit_status(returncode)
        logger.info(f"Command exited with status {status}")
        return status
