"""
Error types raised by the Project Launcher
"""

from typing import Dict, Any


class LauncherError(Exception):
    """Base class for launcher errors"""

    def __init__(
        self, message: str, error_code: str = None, details: Dict[str, Any] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "UNKNOWN_ERROR"
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary format"""
        return {
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "type": self.__class__.__name__,
        }


class UnknownParameterError(LauncherError):
    """A command-line token the launcher does not recognize"""

    def __init__(self, parameter: str):
        super().__init__(
            f"Unknown parameter passed: {parameter}",
            "UNKNOWN_PARAMETER",
            {"parameter": parameter},
        )
        self.parameter = parameter


class InvalidSelectionError(LauncherError):
    """Menu input that does not name a listed project"""

    def __init__(self, choice: str, option_count: int = 0):
        super().__init__(
            "Invalid selection",
            "INVALID_SELECTION",
            {"choice": choice, "option_count": option_count},
        )
        self.choice = choice


class CommandNotFoundError(LauncherError):
    """The run tool executable could not be located"""

    def __init__(self, command: str, details: Dict[str, Any] = None):
        super().__init__(
            f"Command not found: {command}", "COMMAND_NOT_FOUND", details
        )
        self.command = command
