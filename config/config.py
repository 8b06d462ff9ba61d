"""
Unified Configuration Management System
Centralizes launcher settings with validation and environment support
"""

import copy
import os
import json
import shlex
import logging
from pathlib import Path
from typing import Dict, Any, Optional, List
from dataclasses import dataclass, field

from config.commands import COMMANDS, EXIT_CODES


class ConfigValidationError(Exception):
    """Raised when configuration validation fails"""

    pass


@dataclass
class ProjectConfig:
    """Project discovery configuration"""

    # None means the parent of the directory holding the launcher
    projects_root: Optional[str] = None

    # Shell globs skip dot entries, so the menu does too
    include_hidden: bool = False


@dataclass
class LaunchConfig:
    """Run tool configuration"""

    command_key: str = "RUN_COMMANDS"
    subkey: Optional[str] = "run"

    # Environment variable names handed to the run tool
    env_names: Dict[str, str] = field(
        default_factory=lambda: {
            "collection": "COLLECTION",
            "project_dir": "PROJECT_DIR",
            "embedding": "EMBEDDING",
        }
    )

    embedding_default: bool = True


@dataclass
class MenuConfig:
    """Console text for the interactive menu"""

    header: str = "Available projects:"
    prompt: str = "#? "
    item_format: str = "{index}) {path}"
    invalid_selection: str = "Invalid selection"
    selected: str = "Selected project: {path}"
    unknown_parameter: str = "Unknown parameter passed: {parameter}"


@dataclass
class CommandConfig:
    """System commands configuration"""

    commands: Dict[str, Dict] = field(default_factory=lambda: copy.deepcopy(COMMANDS))
    exit_codes: Dict[str, int] = field(default_factory=lambda: dict(EXIT_CODES))


@dataclass
class UnifiedConfig:
    """Main configuration container"""

    # Sub-configurations
    project: ProjectConfig = field(default_factory=ProjectConfig)
    launch: LaunchConfig = field(default_factory=LaunchConfig)
    menu: MenuConfig = field(default_factory=MenuConfig)
    commands: CommandConfig = field(default_factory=CommandConfig)

    # Environment settings
    debug: bool = False
    log_level: str = "WARNING"

    # Application metadata
    version: str = "1.0.0"
    config_version: str = "1.0"


class ConfigManager:
    """Manages configuration loading, validation, and access"""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = config_dir or Path(__file__).parent
        self.config: Optional[UnifiedConfig] = None
        self.logger = logging.getLogger("ConfigManager")

        # Load configuration
        self._load_config()

    def _load_config(self):
        """Load configuration from files and environment"""
        # Start with default configuration
        self.config = UnifiedConfig()

        # Apply user overrides
        self._apply_user_overrides()

        # Apply environment overrides
        self._apply_environment_overrides()

        # Validate configuration
        self._validate_config()

    def _apply_user_overrides(self):
        """Apply user settings from user_settings.json"""
        user_settings_file = Path(self.config_dir) / "user_settings.json"

        if not user_settings_file.exists():
            return

        try:
            with open(user_settings_file, "r", encoding="utf-8") as f:
                user_settings = json.load(f)
        except (ValueError, OSError) as e:
            self.logger.warning(f"Could not load user settings: {e}")
            return

        if not isinstance(user_settings, dict):
            self.logger.warning(
                f"Could not load user settings: expected an object, "
                f"got {type(user_settings).__name__}"
            )
            return

        self._apply_settings_dict(user_settings)
        self.logger.info("Applied user settings overrides")

    def _apply_environment_overrides(self):
        """Apply environment-specific overrides"""
        # Debug mode
        if os.getenv("DEBUG") is not None:
            self.config.debug = os.getenv("DEBUG").lower() in ("true", "1", "yes", "on")

        # Log level
        if os.getenv("LOG_LEVEL"):
            self.config.log_level = os.getenv("LOG_LEVEL").upper()

        # Project root
        if os.getenv("PROJECTS_ROOT"):
            self.config.project.projects_root = os.getenv("PROJECTS_ROOT")

        # Run tool command line
        if os.getenv("LAUNCH_COMMAND"):
            launch = self.config.launch
            command = shlex.split(os.getenv("LAUNCH_COMMAND"))
            group = self.config.commands.commands.setdefault(launch.command_key, {})
            if launch.subkey is None:
                self.config.commands.commands[launch.command_key] = command
            else:
                group[launch.subkey] = command

    def _apply_settings_dict(self, settings: Dict[str, Any]):
        """Apply settings from a dictionary using dot notation"""
        for key, value in settings.items():
            self._set_nested_value(self.config, key, value)

    def _set_nested_value(self, obj: Any, key_path: str, value: Any):
        """Set a nested value using dot notation (e.g., 'launch.env_names.embedding')"""
        keys = key_path.split(".")
        current = obj

        # Navigate to the parent object
        for depth, key in enumerate(keys[:-1]):
            if isinstance(current, dict) and key in current:
                current = current[key]
            elif not isinstance(current, dict) and hasattr(current, key):
                current = getattr(current, key)
            else:
                self.logger.warning(
                    f"Unknown config path: {'.'.join(keys[:depth + 1])}"
                )
                return

        # Set the final value
        final_key = keys[-1]

        if isinstance(current, dict):
            if final_key not in current:
                self.logger.warning(f"Unknown config key: {key_path}")
                return
            existing = current[final_key]
        elif hasattr(current, final_key):
            existing = getattr(current, final_key)
        else:
            self.logger.warning(f"Unknown config key: {key_path}")
            return

        if isinstance(existing, dict) and isinstance(value, dict):
            # Merge dictionaries; new keys are allowed, existing ones keep their type
            for sub_key, sub_value in value.items():
                if sub_key in existing and not self._is_compatible(
                    existing[sub_key], sub_value
                ):
                    self._warn_type(f"{key_path}.{sub_key}", existing[sub_key], sub_value)
                else:
                    existing[sub_key] = sub_value
        elif not self._is_compatible(existing, value):
            self._warn_type(key_path, existing, value)
        elif isinstance(current, dict):
            current[final_key] = value
        else:
            setattr(current, final_key, value)

    @staticmethod
    def _is_compatible(existing: Any, value: Any) -> bool:
        """Whether a user value may replace an existing setting"""
        if existing is None:
            # Optional settings hold a string or nothing
            return value is None or isinstance(value, str)
        if isinstance(existing, bool) or isinstance(value, bool):
            return isinstance(existing, bool) and isinstance(value, bool)
        return isinstance(value, type(existing))

    def _warn_type(self, key_path: str, existing: Any, value: Any):
        expected = "string or null" if existing is None else type(existing).__name__
        self.logger.warning(
            f"Ignoring config key {key_path}: expected {expected}, "
            f"got {type(value).__name__}"
        )

    def get_launch_command(self) -> List[str]:
        """Get the configured run tool command template"""
        launch = self.config.launch
        template = self.config.commands.commands.get(launch.command_key)
        if launch.subkey is not None and isinstance(template, dict):
            template = template.get(launch.subkey)
        if not isinstance(template, list):
            return []
        return list(template)

    def _validate_config(self):
        """Validate the loaded configuration"""
        try:
            projects_root = self.config.project.projects_root
            if projects_root and not Path(projects_root).exists():
                self.logger.warning(f"Projects root does not exist: {projects_root}")

            if not self.get_launch_command():
                raise ConfigValidationError("Launch command must not be empty")

            env_names = list(self.config.launch.env_names.values())
            if not all(env_names):
                raise ConfigValidationError(
                    "Environment variable names must not be empty"
                )
            if len(set(env_names)) != len(env_names):
                raise ConfigValidationError(
                    f"Environment variable names must be distinct: {env_names}"
                )

            self.logger.info("Configuration validation completed")

        except ConfigValidationError as e:
            self.logger.error(f"Configuration validation failed: {e}")
            raise ConfigValidationError(f"Invalid configuration: {e}") from e

    def get_config(self) -> UnifiedConfig:
        """Get the current configuration"""
        if self.config is None:
            raise RuntimeError("Configuration not loaded")
        return self.config

    def reload_config(self):
        """Reload configuration from files"""
        self._load_config()


# Global configuration manager instance
_config_manager: Optional[ConfigManager] = None


def initialize_config(config_dir: Optional[Path] = None) -> ConfigManager:
    """Initialize the global configuration manager"""
    global _config_manager
    _config_manager = ConfigManager(config_dir)
    return _config_manager


def get_config() -> UnifiedConfig:
    """Get the current configuration"""
    if _config_manager is None:
        # Auto-initialize with default settings
        initialize_config()
    return _config_manager.get_config()
