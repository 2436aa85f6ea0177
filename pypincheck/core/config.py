"""Manages configuration for pypincheck.

This module is responsible for loading, managing, and saving the PIN rule
settings. It aggregates settings from default values, TOML files, and
environment variables, and turns them into the immutable
`RuleConfiguration` the engine consumes.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

try:
    import tomllib  # Available in Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for Python versions < 3.11

import tomli_w

from .models import RepetitionRule, RuleConfiguration

logger = logging.getLogger(__name__)

# The default path for the user-specific global configuration file.
USER_CONFIG_PATH = Path.home() / ".config" / "pincheck" / "config.toml"

# The project-level configuration file, looked up in the working directory.
PROJECT_CONFIG_NAME = "pincheck.toml"

_TRUE_VALUES = ("true", "1", "yes", "on")


class ConfigError(ValueError):
    """Raised when the configured rules are inconsistent."""


class Config:
    """Handles the configuration for the pypincheck application.

    This class loads configuration from multiple sources with a defined
    precedence:
    1.  Default values (lowest precedence).
    2.  Project-specific `pincheck.toml` file.
    3.  User-level `~/.config/pincheck/config.toml` file.
    4.  A custom configuration file specified at runtime (replaces 2 and 3).
    5.  Environment variables (highest precedence).

    Attributes:
        DEFAULT_CONFIG (Dict[str, Any]): A dictionary containing the default
            configuration values.
    """

    DEFAULT_CONFIG = {
        "pin_rules": RuleConfiguration().to_dict(),
        "output": {
            "colors": True,
        },
    }

    ENV_MAPPING = {
        "PINCHECK_MIN_LENGTH": "pin_rules.min_length",
        "PINCHECK_MAX_LENGTH": "pin_rules.max_length",
        "PINCHECK_ONLY_NUMBERS": "pin_rules.only_numbers",
        "PINCHECK_NO_CROSS_PATTERN": "pin_rules.no_cross_pattern",
        "PINCHECK_NO_EVEN_OR_ODD_SERIES": "pin_rules.no_even_or_odd_series_of_numbers",
        "PINCHECK_NO_SERIES_OF_NUMBERS": "pin_rules.no_series_of_numbers",
        "PINCHECK_NO_REPEATED_NUMBERS": "pin_rules.no_repeated_numbers",
        "PINCHECK_NO_REPETITION_OF_TWO_SAME_NUMBERS": "pin_rules.no_repetition_of_two_same_numbers",
        "PINCHECK_COLORS": "output.colors",
    }

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initializes the configuration manager.

        Args:
            config_path (Optional[Path]): An optional path to a specific
                configuration file to load. If provided, it takes precedence
                over default file locations.
        """
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        # Values passed to `set` in this session; only these are saved.
        self._changes: Dict[str, Any] = {}
        self._load_config(config_path)

    def _load_config(self, config_path: Optional[Path] = None) -> None:
        if config_path:
            self._load_file_config(Path(config_path))
        else:
            self._load_default_configs()

        self._load_env_config()

    def _load_default_configs(self) -> None:
        """Loads configs from standard locations if they exist."""
        project_config = Path.cwd() / PROJECT_CONFIG_NAME
        if project_config.exists():
            self._load_file_config(project_config)

        if USER_CONFIG_PATH.exists():
            self._load_file_config(USER_CONFIG_PATH)

    def _merge_configs(self, base: Dict[str, Any], new: Dict[str, Any]) -> None:
        """Recursively merges a new config dict into a base dict.

        Args:
            base (Dict[str, Any]): The base configuration dictionary.
            new (Dict[str, Any]): The new configuration to merge in.
        """
        for key, value in new.items():
            if isinstance(value, dict) and key in base and isinstance(base[key], dict):
                self._merge_configs(base[key], value)
            else:
                base[key] = value

    def _load_file_config(self, config_path: Path) -> None:
        """Loads and merges configuration from a TOML file.

        A file that cannot be read or parsed is skipped with a warning.

        Args:
            config_path (Path): The path to the TOML configuration file.
        """
        try:
            with open(config_path, "rb") as f:
                file_config = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Could not load config from {config_path}: {e}")
            return
        self._merge_configs(self.config, file_config)

    def _load_env_config(self) -> None:
        """Loads and merges configuration from environment variables."""
        for env_var, config_key in self.ENV_MAPPING.items():
            value = os.getenv(env_var)
            if value is not None:
                self._set_nested_key(config_key, value)

    def _set_nested_key(self, key_path: str, value: str) -> None:
        """Sets a value in the config dict using a dot-separated path.

        This method parses and casts values from environment variables,
        which are always strings.

        Args:
            key_path (str): The dot-separated key (e.g., "pin_rules.min_length").
            value (str): The string value from the environment variable.
        """
        keys = key_path.split('.')
        target_config = self.config
        for key in keys[:-1]:
            if key not in target_config or not isinstance(target_config[key], dict):
                target_config[key] = {}
            target_config = target_config[key]

        leaf_key = keys[-1]

        if leaf_key in ("min_length", "max_length"):
            try:
                target_config[leaf_key] = int(value)
            except ValueError:
                logger.warning(f"Invalid integer value for {leaf_key}: {value}")
        elif leaf_key in ("no_repeated_numbers", "no_repetition_of_two_same_numbers"):
            # Either a boolean or a threshold.
            target_config[leaf_key] = parse_flag_or_int(value)
        else:
            target_config[leaf_key] = value.strip().lower() in _TRUE_VALUES

    def get(self, key: str, default: Any = None) -> Any:
        """Retrieves a configuration value using a dot-separated key.

        Args:
            key (str): The dot-separated key (e.g., "pin_rules.min_length").
            default (Any): The default value to return if the key is not found.

        Returns:
            Any: The configuration value or the default.
        """
        keys = key.split('.')
        value = self.config
        try:
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """Sets a configuration value in memory.

        The value is also recorded as a change for `save_user_config`.

        Args:
            key (str): The dot-separated key (e.g., "pin_rules.min_length").
            value (Any): The value to set.
        """
        keys = key.split('.')
        target_config = self.config
        for k in keys[:-1]:
            target_config = target_config.setdefault(k, {})
        target_config[keys[-1]] = value

        changes = self._changes
        for k in keys[:-1]:
            changes = changes.setdefault(k, {})
        changes[keys[-1]] = value

    def rule_configuration(self) -> RuleConfiguration:
        """Builds the immutable rule configuration from the `pin_rules` table.

        The engine does not check its configuration, so this is where
        inconsistent settings are rejected.

        Returns:
            RuleConfiguration: The rules to validate PINs against.

        Raises:
            ConfigError: If a setting has the wrong type, a length bound is
                negative, `min_length` exceeds `max_length`, or a repetition
                threshold is negative.
        """
        table = self.get("pin_rules", {})
        if not isinstance(table, dict):
            raise ConfigError(f"'pin_rules' must be a table, got {type(table).__name__}")
        try:
            rules = RuleConfiguration.from_dict(table)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid PIN rule setting: {e}") from e

        if rules.min_length < 0:
            raise ConfigError(f"min_length must not be negative, got {rules.min_length}")
        if rules.max_length < rules.min_length:
            raise ConfigError(
                f"max_length ({rules.max_length}) must not be less than min_length ({rules.min_length})"
            )
        for name in ("no_repeated_numbers", "no_repetition_of_two_same_numbers"):
            repetition: RepetitionRule = getattr(rules, name)
            if repetition.enabled and repetition.min_run < 0:
                raise ConfigError(f"{name} threshold must not be negative, got {repetition.min_run}")
        return rules

    def colors_enabled(self) -> bool:
        return bool(self.get("output.colors", True))

    def _get_user_config(self) -> Dict[str, Any]:
        """Loads and returns the contents of the user config file.

        Returns:
            Dict[str, Any]: The user configuration dictionary, or an empty
            dict if the file doesn't exist or fails to parse.
        """
        if not USER_CONFIG_PATH.exists():
            return {}
        try:
            with open(USER_CONFIG_PATH, "rb") as f:
                return tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Ignoring unreadable user config {USER_CONFIG_PATH}: {e}")
            return {}

    def save_user_config(self) -> None:
        """Saves the current configuration to the user config file.

        Only the values changed with `set` are merged into the existing
        file. Settings that came from environment variables or a project
        `pincheck.toml` stay out of the user-wide file.

        Raises:
            IOError: If the configuration file cannot be written.
        """
        user_config = self._get_user_config()
        self._merge_configs(user_config, self._changes)

        try:
            USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
            with open(USER_CONFIG_PATH, "wb") as f:
                tomli_w.dump(user_config, f)
        except OSError as e:
            raise IOError(f"Failed to save configuration to {USER_CONFIG_PATH}: {e}") from e

    @staticmethod
    def reset_user_config() -> bool:
        """Deletes the user config file.

        Returns:
            bool: True if a file was removed, False if there was none.
        """
        if not USER_CONFIG_PATH.exists():
            return False
        USER_CONFIG_PATH.unlink()
        return True

    def __str__(self) -> str:
        return f"Config({self.config})"


def parse_flag_or_int(value: str) -> Any:
    """Parses a ``bool | int`` setting given as a string.

    Args:
        value (str): For example "true", "off" or "3".

    Returns:
        Any: An int if the string is a number, otherwise a bool.
    """
    value = value.strip()
    try:
        return int(value)
    except ValueError:
        return value.lower() in _TRUE_VALUES

