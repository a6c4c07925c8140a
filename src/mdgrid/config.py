#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for mdgrid.

This module handles automatic discovery of configuration files, loading
configs from TOML, YAML or JSON format, merging them with command line
overrides and turning the result into option objects.

Configuration layout
--------------------
Layout keys sit at the top level, typography and colors in a ``style``
table::

    cell_width = 3.0
    row_height = 20.0
    indent_column_offset = 1
    sheet_name = "Markdown"

    [style]
    font_name = "Meiryo"
    code_font_name = "Consolas"
    link_color = "FF0563C1"

    [style.header_font_sizes]
    1 = 18
    2 = 16

In ``pyproject.toml`` the same keys live under ``[tool.mdgrid]``.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import fields
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from mdgrid.exceptions import ConfigurationError
from mdgrid.options.grid import GridRendererOptions
from mdgrid.options.markdown import MarkdownParserOptions
from mdgrid.options.style import StyleOptions

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = [".mdgrid.toml", ".mdgrid.yaml", ".mdgrid.yml", ".mdgrid.json"]
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "MDGRID_CONFIG"

STYLE_SECTION = "style"
_LAYOUT_KEYS = frozenset(f.name for f in fields(GridRendererOptions)) - {STYLE_SECTION}
_STYLE_KEYS = frozenset(f.name for f in fields(StyleOptions))


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.mdgrid]`` table of a pyproject.toml file.

    Returns an empty dict when the table is absent.

    Raises
    ------
    ConfigurationError
        If the file is not valid TOML or the section is not a table

    """
    data = _load_toml_config(pyproject_path)
    config = data.get("tool", {}).get("mdgrid")
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"[tool.mdgrid] section in {pyproject_path} must be a table, got {type(config).__name__}",
            config_path=str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` (default: the working directory) to the
    filesystem root. In each directory the dedicated config files are
    checked in the order of :data:`CONFIG_FILENAMES`, then a pyproject.toml
    with a ``[tool.mdgrid]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / PYPROJECT_FILENAME
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigurationError as e:
                logger.debug(f"Skipping unreadable {pyproject_path}: {e}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in standard locations.

    Searches the directory tree above ``start_dir`` first and falls back to
    the dedicated config files in the user's home directory.
    """
    found = find_config_in_parents(start_dir)
    if found:
        return found

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    The format is chosen from the file name and extension.

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
    ConfigurationError
        If the file does not exist, cannot be parsed, or has an unsupported format

    Examples
    --------
    >>> config = load_config_file(".mdgrid.toml")
    >>> config.get("sheet_name")
    'Notes'

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))
    if not config_path.is_file():
        raise ConfigurationError(f"Configuration path is not a file: {config_path}", config_path=str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == PYPROJECT_FILENAME:
        return _load_pyproject_section(config_path)
    if ext == ".toml":
        return _load_toml_config(config_path)
    if ext in (".yaml", ".yml"):
        return _load_yaml_config(config_path)
    if ext == ".json":
        return _load_json_config(config_path)
    raise ConfigurationError(
        f"Unsupported config file format: {ext}. Use .toml, .yaml or .json", config_path=str(config_path)
    )


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(
            f"Invalid TOML in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Error reading TOML config {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f"Error reading JSON config {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    if not isinstance(config, dict):
        raise ConfigurationError(
            f"JSON config file must contain an object, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f"Error reading YAML config {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    # An empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"YAML config file must contain a mapping, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries with deep merging.

    The override dictionary takes precedence over base for conflicting keys.
    Nested dictionaries are merged recursively, not replaced entirely.

    Examples
    --------
    >>> base = {"style": {"font_name": "Meiryo"}, "cell_width": 3.0}
    >>> override = {"style": {"link_color": "FF0000FF"}, "cell_width": 2.5}
    >>> merge_configs(base, override)
    {'style': {'font_name': 'Meiryo', 'link_color': 'FF0000FF'}, 'cell_width': 2.5}

    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):

    1. Explicit config file path (``--config``)
    2. Config file path from the ``MDGRID_CONFIG`` environment variable
    3. Auto-discovered config file

    Returns an empty dict when no configuration file is found.

    Raises
    ------
    ConfigurationError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    env_var_path = env_var_path if env_var_path is not None else os.environ.get(CONFIG_ENV_VAR)
    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        logger.debug(f"Using configuration file {discovered_path}")
        return load_config_file(discovered_path)

    return {}


def _pick_known(section: Dict[str, Any], known: frozenset[str], section_name: str) -> Dict[str, Any]:
    picked = {}
    for key, value in section.items():
        if key in known:
            picked[key] = value
        else:
            logger.debug(f"Ignoring unknown configuration key '{section_name}{key}'")
    return picked


def options_from_config(config: Dict[str, Any]) -> tuple[MarkdownParserOptions, GridRendererOptions]:
    """Build parser and renderer options from a configuration dictionary.

    Unknown keys are ignored with a DEBUG log message. Missing keys keep
    their defaults.

    Parameters
    ----------
    config : dict
        Configuration as returned by :func:`load_config_with_priority`,
        possibly merged with command line overrides

    Returns
    -------
    tuple of (MarkdownParserOptions, GridRendererOptions)
        Options sharing one :class:`StyleOptions` instance

    Raises
    ------
    ConfigurationError
        If a value is rejected by option validation

    """
    style_section = config.get(STYLE_SECTION, {})
    if not isinstance(style_section, dict):
        raise ConfigurationError(f"'{STYLE_SECTION}' must be a table, got {type(style_section).__name__}")

    layout = _pick_known({k: v for k, v in config.items() if k != STYLE_SECTION}, _LAYOUT_KEYS, "")
    style_values = _pick_known(style_section, _STYLE_KEYS, f"{STYLE_SECTION}.")

    try:
        style = StyleOptions(**style_values)
        return MarkdownParserOptions(style=style), GridRendererOptions(style=style, **layout)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}", original_error=e) from e


__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_FILENAMES",
    "discover_config_file",
    "find_config_in_parents",
    "load_config_file",
    "load_config_with_priority",
    "merge_configs",
    "options_from_config",
]
