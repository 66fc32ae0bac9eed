"""Configuration loader for fixcode."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml

log = logging.getLogger(__name__)

CONFIG_FILENAME = ".fixcode.yaml"

DEFAULTS: dict = {
    "env_file": ".env",
    "log_level": "warning",
    "providers": {
        "openai": {
            "model": "gpt-4.1-mini",
            "base_url": "https://api.openai.com",
            "timeout": None,
        },
        "gemini": {
            "model": "gemini-2.0-flash",
            "base_url": "https://generativelanguage.googleapis.com",
            "timeout": None,
        },
    },
}


def config_path(cwd: Path | None = None) -> Path:
    """Resolve the config file: FIXCODE_CONFIG env var > ./.fixcode.yaml."""
    env_config = os.environ.get("FIXCODE_CONFIG")
    if env_config:
        return Path(env_config).expanduser().resolve()
    return (cwd or Path.cwd()) / CONFIG_FILENAME


def load_config(path: Path | None = None) -> dict:
    """Load the YAML config and merge it with defaults.

    Args:
        path: Explicit path to the config file. If None, uses config_path().

    Returns:
        Merged configuration dict.
    """
    if path is None:
        path = config_path()

    user_config: dict = {}
    if path.exists():
        try:
            raw = path.read_text(encoding="utf-8")
            user_config = yaml.safe_load(raw) or {}
        except (OSError, yaml.YAMLError):
            log.warning("Failed to read config at %s, using defaults", path, exc_info=True)
        if not isinstance(user_config, dict):
            log.warning("Config at %s is not a mapping, using defaults", path)
            user_config = {}

    return _deep_merge(DEFAULTS, user_config)


def provider_config(config: dict, name: str) -> dict:
    """Return the settings block for one provider."""
    return dict(config.get("providers", {}).get(name) or {})


def env_file_path(config: dict, cwd: Path | None = None) -> Path:
    """Resolve the credentials file, relative to the working directory."""
    env_file = Path(config.get("env_file") or DEFAULTS["env_file"]).expanduser()
    if env_file.is_absolute():
        return env_file
    return (cwd or Path.cwd()) / env_file


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base, returning a new dict."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result
