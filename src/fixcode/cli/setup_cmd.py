"""Interactive API key setup: fixcode --setup."""

from __future__ import annotations

from pathlib import Path

import click

from fixcode.core.credentials import key_name, upsert_key
from fixcode.providers.registry import get_provider, list_providers

MIN_KEY_LENGTH = 11


def _validate_key(value: str) -> str:
    value = value.strip()
    if len(value) < MIN_KEY_LENGTH:
        raise click.BadParameter("Please enter a valid key")
    return value


def run_setup(env_path: Path) -> None:
    """Ask for a provider and its API key, then save it to the env file."""
    click.echo("Setup API keys for OpenAI and/or Gemini")

    provider = click.prompt(
        "Which provider do you want to set up?",
        type=click.Choice(list_providers()),
        default=list_providers()[0],
    )
    info = get_provider(provider).info
    click.echo(f"Get your {info.display_name} API key at: {info.key_url}")
    if info.free_tier:
        click.echo("A free tier is available.")
    api_key = click.prompt(
        "Enter your API key",
        hide_input=True,
        value_proc=_validate_key,
    )

    saved = upsert_key(provider, api_key, env_path)
    click.echo(f"{provider} key saved to {saved.name} ({key_name(provider)})")
