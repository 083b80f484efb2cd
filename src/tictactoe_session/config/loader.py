"""Configuration loading and management."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from tictactoe_session.config.models import SessionConfig, resolve_env_vars
from tictactoe_session.exceptions import ConfigurationError

CONFIG_FILE_NAME = "config.yaml"
PROJECT_DIR_NAME = ".tictactoe"
GLOBAL_DIR_NAME = "tictactoe-session"


def load_config(
    explicit_config_path: Optional[Path] = None,
    project_config_path: Optional[Path] = None,
    global_config_path: Optional[Path] = None,
) -> SessionConfig:
    """Load configuration from multiple sources.

    Configuration is loaded in the following order (later sources override earlier ones):
    1. Default configuration (built into the models)
    2. Global configuration (~/.config/tictactoe-session/config.yaml)
    3. Project configuration (.tictactoe/config.yaml)
    4. Explicit configuration file (the --config option)

    Args:
        explicit_config_path: Config file layered over all other sources
        project_config_path: Path replacing the discovered project config file
        global_config_path: Path replacing the discovered global config file

    Returns:
        Merged and validated configuration

    Raises:
        ConfigurationError: If configuration is invalid or cannot be loaded
    """
    config_data: Dict[str, Any] = {}

    global_path = global_config_path or _get_global_config_path()
    if global_path and global_path.exists():
        config_data = _merge_config(config_data, _load_yaml_file(global_path))

    project_path = project_config_path or _get_project_config_path()
    if project_path and project_path.exists():
        config_data = _merge_config(config_data, _load_yaml_file(project_path))

    if explicit_config_path:
        config_data = _merge_config(config_data, _load_yaml_file(explicit_config_path))

    try:
        return SessionConfig(**resolve_env_vars(config_data))
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e


def save_config(config: SessionConfig, config_path: Path) -> None:
    """Save configuration to a YAML file.

    Args:
        config: Configuration to save
        config_path: Path to save the configuration file

    Raises:
        ConfigurationError: If configuration cannot be saved
    """
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = config.model_dump(mode="json")

        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(
                config_dict,
                f,
                default_flow_style=False,
                sort_keys=False,
                indent=2,
            )

    except OSError as e:
        raise ConfigurationError(
            f"Failed to save configuration to {config_path}: {e}"
        ) from e


def get_config_paths() -> Dict[str, Optional[Path]]:
    """Get all possible configuration file paths.

    Returns:
        Dictionary with 'global' and 'project' config paths
    """
    return {"global": _get_global_config_path(), "project": _get_project_config_path()}


def _get_global_config_path() -> Optional[Path]:
    """Get the global configuration file path."""
    xdg_config = os.getenv("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / GLOBAL_DIR_NAME / CONFIG_FILE_NAME

    return Path.home() / ".config" / GLOBAL_DIR_NAME / CONFIG_FILE_NAME


def _get_project_config_path() -> Optional[Path]:
    """Get the project configuration file path."""
    # Look for .tictactoe directory in current directory and parents
    current = Path.cwd()

    for path in [current] + list(current.parents):
        project_dir = path / PROJECT_DIR_NAME
        if project_dir.is_dir():
            return project_dir / CONFIG_FILE_NAME

    return None


def _load_yaml_file(file_path: Path) -> Dict[str, Any]:
    """Load and parse a YAML file.

    Args:
        file_path: Path to YAML file

    Returns:
        Parsed YAML data as dictionary

    Raises:
        ConfigurationError: If file cannot be loaded or parsed
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read {file_path}: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file must contain a YAML object, got {type(data).__name__}"
        )

    return data


def _merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries recursively."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_config(result[key], value)
        else:
            result[key] = value

    return result
