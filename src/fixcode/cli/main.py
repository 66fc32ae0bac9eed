"""CLI entry point for fixcode."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import click

from fixcode import __version__
from fixcode.cli.setup_cmd import run_setup
from fixcode.core.config import env_file_path, load_config
from fixcode.core.credentials import load_credentials
from fixcode.core.pipeline import fix_file
from fixcode.providers.base import ProviderAuthError
from fixcode.providers.registry import Provider

log = logging.getLogger(__name__)


def _setup_logging(config: dict, verbose: bool) -> None:
    level_name = "debug" if verbose else str(config.get("log_level", "warning"))
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(1)


@click.command("fixcode")
@click.version_option(version=__version__, prog_name="fixcode")
@click.argument("file", required=False, type=click.Path(path_type=Path))
@click.option("--setup", is_flag=True, help="Set up API keys for OpenAI or Gemini.")
@click.option("--apply", is_flag=True, help="Overwrite original file after fixing.")
@click.option("--explain", is_flag=True, help="Include reasoning for the fixes.")
@click.option(
    "--ai",
    "provider",
    default=Provider.OPENAI.value,
    show_default=True,
    metavar="PROVIDER",
    help="AI provider: openai | gemini.",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Path to a YAML config file (default: ./.fixcode.yaml).",
)
@click.option("--verbose", "-v", is_flag=True, help="Debug logging on stderr.")
def cli(
    file: Path | None,
    setup: bool,
    apply: bool,
    explain: bool,
    provider: str,
    config_file: Path | None,
    verbose: bool,
) -> None:
    """Fix FILE with an LLM and save the result next to it.

    The fixed code goes to FILE with '.fixed' before the extension
    (main.py -> main.fixed.py) unless --apply is given.
    """
    config = load_config(config_file)
    _setup_logging(config, verbose)
    env_path = env_file_path(config)
    log.debug("Using credentials file %s", env_path)

    if setup:
        run_setup(env_path)
        return

    if file is None:
        _fail("No file provided. Example: fixcode ./main.py")

    credentials = load_credentials(env_path)

    try:
        result = fix_file(
            file,
            provider=provider,
            credentials=credentials,
            apply=apply,
            explain=explain,
            config=config,
        )
    except FileNotFoundError:
        _fail(f"File not found: {file}")
    except ValueError as e:
        _fail(str(e))
    except ProviderAuthError as e:
        _fail(str(e))

    click.echo(f"Fixed code saved to {result.output_path}")


if __name__ == "__main__":
    cli()
