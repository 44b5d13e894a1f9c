#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the codediff CLI.

Configuration values become parser defaults, so flags given on the command
line always win. Keys use the long option names with dashes or underscores,
for example ``ignore_whitespace = true`` or ``view = "side-by-side"``.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CODEDIFF_CONFIG"
ENV_PREFIX = "CODEDIFF_"
DOTFILE_NAMES = [".codediff.toml", ".codediff.yaml", ".codediff.yml", ".codediff.json"]
_TRUE_VALUES = ("true", "1", "yes", "on")


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.codediff]`` table from a pyproject.toml file.

    Returns
    -------
    dict
        The table, or an empty dict when the file has none

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get("codediff", {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.codediff] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file in ``start_dir`` or any parent directory.

    Each directory is checked for the dotfiles in priority order
    (``.codediff.toml``, ``.codediff.yaml``, ``.codediff.yml``,
    ``.codediff.json``) and then for a pyproject.toml carrying a
    ``[tool.codediff]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in DOTFILE_NAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                logger.debug("Skipping unreadable %s", pyproject_path)

        parent = current.parent
        if parent == current:
            return None
        current = parent


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    The directory tree from ``start_dir`` (default: cwd) up to the root is
    searched first, then the dotfiles in the user's home directory.
    """
    found = find_config_in_parents(start_dir)
    if found:
        return found

    home = Path.home()
    for filename in DOTFILE_NAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has invalid format

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_section(config_path)

    ext = config_path.suffix.lower()
    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise argparse.ArgumentTypeError(f"Invalid config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"Config file {config_path} must contain a mapping, got {type(config).__name__}"
        )
    return config


def load_config_with_priority(explicit_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (``--config``)
    2. Path in the ``CODEDIFF_CONFIG`` environment variable
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    """
    if explicit_path:
        return load_config_file(explicit_path)

    env_var_path = os.environ.get(CONFIG_ENV_VAR)
    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        logger.debug("Using configuration from %s", discovered_path)
        return load_config_file(discovered_path)

    return {}


def _coerce(action: argparse.Action, value: Any, source: str) -> Any:
    """Convert a config or environment value to what ``action`` expects."""
    if isinstance(action, argparse._StoreTrueAction):
        return value if isinstance(value, bool) else str(value).lower() in _TRUE_VALUES
    if isinstance(action, argparse._StoreFalseAction):
        return value if isinstance(value, bool) else str(value).lower() not in _TRUE_VALUES
    if action.type is not None and isinstance(value, str):
        try:
            value = action.type(value)
        except (ValueError, argparse.ArgumentTypeError):
            logger.warning("Invalid value for %s from %s: %s", action.dest, source, value)
            return action.default
    if action.choices and value not in action.choices:
        logger.warning("Invalid choice for %s from %s: %s. Choices: %s", action.dest, source, value, list(action.choices))
        return action.default
    return value


def apply_defaults(parser: argparse.ArgumentParser, config: Dict[str, Any]) -> None:
    """Use configuration and ``CODEDIFF_*`` environment values as parser defaults.

    Environment variables take precedence over the configuration file;
    explicit command-line flags take precedence over both.
    """
    normalized = {str(key).replace("-", "_"): value for key, value in config.items()}
    known = {action.dest for action in parser._actions}
    for key in sorted(set(normalized) - known):
        logger.warning("Ignoring unknown configuration key: %s", key)

    for action in parser._actions:
        if not action.dest or action.dest in ("help", "version", "left", "right", "config"):
            continue

        if action.dest in normalized:
            action.default = _coerce(action, normalized[action.dest], "config file")

        env_value = os.environ.get(f"{ENV_PREFIX}{action.dest.upper()}")
        if env_value is not None:
            action.default = _coerce(action, env_value, f"{ENV_PREFIX}{action.dest.upper()}")
