"""Configuration management for simple-ui.

Settings come from $XDG_CONFIG_HOME/simple-ui/config.yaml, then
environment variables (SIMPLE_UI_PALETTE, SIMPLE_UI_DEBUG) on top.
"""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "palette": "classic",
    "debug": False,
}

_TRUTHY = {"1", "true", "yes", "on"}


def _as_bool(value: Any) -> bool:
    """Interpret a YAML or environment flag; strings must be a truthy word."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def get_config_dir() -> Path:
    """Get the simple-ui config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config) / "simple-ui"


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.yaml"


def get_log_path() -> Path:
    """Get the path to the debug log file."""
    return get_config_dir() / "debug.log"


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML, with defaults and environment overrides.

    Args:
        path: Config file to read (defaults to get_config_path()).

    Raises:
        ConfigurationError: If the file exists but is not a YAML mapping.
    """
    path = path or get_config_path()
    cfg = copy.deepcopy(DEFAULT_CONFIG)

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text()) or {}
        except (yaml.YAMLError, OSError) as e:
            raise ConfigurationError(f"Cannot read {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path} must contain a mapping")
        cfg.update(data)

    palette = os.environ.get("SIMPLE_UI_PALETTE")
    if palette:
        cfg["palette"] = palette
    debug = os.environ.get("SIMPLE_UI_DEBUG")
    if debug:
        cfg["debug"] = debug
    cfg["debug"] = _as_bool(cfg["debug"])

    return cfg


def configure_logging(debug: bool) -> None:
    """Send simple_ui logs to the debug log file when debug is on."""
    package_logger = logging.getLogger("simple_ui")
    if not debug:
        return
    log_path = get_log_path()
    for existing in package_logger.handlers:
        if isinstance(existing, logging.FileHandler):
            if existing.baseFilename == os.path.abspath(log_path):
                return
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    logger.debug("Debug logging to %s", log_path)
