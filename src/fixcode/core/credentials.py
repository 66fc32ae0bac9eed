"""Credential store: provider API keys in a flat KEY=value env file.

Only lines starting with OPENAI_API_KEY or GEMINI_API_KEY are managed; an
upsert clears all of them before writing the new key. Any other line in the
file is kept verbatim. No locking: two setup runs at once may race.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values

from fixcode.core.fileutil import atomic_write
from fixcode.providers.registry import Provider

log = logging.getLogger(__name__)

ENV_FILENAME = ".env"


def key_name(provider: str | Provider) -> str:
    """Env variable name holding the key for a provider."""
    return Provider.parse(provider).key_name


def upsert_key(
    provider: str | Provider,
    api_key: str,
    env_path: Path | None = None,
) -> Path:
    """Store an API key, dropping every earlier provider key line.

    Returns:
        Path of the written env file.
    """
    name = key_name(provider)
    env_path = env_path or Path.cwd() / ENV_FILENAME

    lines: list[str] = []
    if env_path.exists():
        lines = env_path.read_text(encoding="utf-8").split("\n")

    kept = [line for line in lines if not _is_key_line(line)]
    # Drop a trailing blank left by a final newline so it isn't duplicated
    while kept and kept[-1] == "":
        kept.pop()
    kept.append(f"{name}={api_key}")

    atomic_write(env_path, "\n".join(kept) + "\n")
    log.info("Saved %s to %s", name, env_path)
    return env_path


def load_credentials(
    env_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[Provider, str]:
    """Collect API keys from the env file and the process environment.

    Process environment wins over the file, the same way dotenv never
    overrides variables that are already set.
    """
    env_path = env_path or Path.cwd() / ENV_FILENAME
    environ = os.environ if environ is None else environ

    file_values: dict[str, str | None] = {}
    if env_path.exists():
        file_values = dotenv_values(env_path)

    credentials: dict[Provider, str] = {}
    for provider in Provider:
        value = environ.get(provider.key_name) or file_values.get(provider.key_name)
        if value:
            credentials[provider] = value
    log.debug(
        "Credentials available for: %s",
        ", ".join(p.value for p in credentials) or "none",
    )
    return credentials


def _is_key_line(line: str) -> bool:
    """True for lines that start with any known provider key name."""
    stripped = line.lstrip()
    if stripped.startswith("export "):
        stripped = stripped[len("export "):].lstrip()
    return stripped.startswith(tuple(p.key_name for p in Provider))
