"""Fix pipeline: read file -> build prompt -> call provider -> write result.

One file, one request, one write. Nothing is written if the provider
call fails.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from fixcode.core.config import DEFAULTS, provider_config
from fixcode.core.fileutil import fixed_sibling
from fixcode.core.models import FixRequest, FixResult
from fixcode.providers.registry import Provider, get_provider

log = logging.getLogger(__name__)


def output_path(path: Path, apply: bool) -> Path:
    """Where the fixed code goes: the file itself, or its .fixed sibling."""
    return path if apply else fixed_sibling(path)


def fix_file(
    path: Path,
    provider: str | Provider = Provider.OPENAI,
    credentials: Mapping[Provider, str] | None = None,
    apply: bool = False,
    explain: bool = False,
    config: dict | None = None,
) -> FixResult:
    """Run one file through a provider and write the answer to disk.

    Args:
        path: Source file, absolute or relative to the working directory.
        provider: Which provider to ask.
        credentials: API keys by provider, from load_credentials().
        apply: Overwrite the source file instead of writing a sibling.
        explain: Ask the model to explain its changes before the code.
        config: Merged config dict from load_config().

    Returns:
        FixResult with the written text and its location.

    Raises:
        FileNotFoundError: The source file does not exist.
        ValueError: Unknown provider name.
        ProviderAuthError: No API key for the chosen provider.
        ProviderAPIError: The provider call failed.
    """
    path = Path(path).expanduser().resolve()
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    member = Provider.parse(provider)
    config = config or DEFAULTS
    credentials = credentials or {}
    client = get_provider(
        member,
        api_key=credentials.get(member),
        config=provider_config(config, member.value),
    )

    request = FixRequest.from_file(path, explain=explain)
    log.info(
        "Fixing %s (%s, explain=%s) with %s/%s",
        path, request.language, request.explain, member.value, client.model,
    )

    text = client.generate_fix(request.prompt())

    out = output_path(path, apply)
    out.write_text(text, encoding="utf-8")
    log.info("Wrote %d chars to %s", len(text), out)
    return FixResult(text=text, output_path=out, provider=member.value, model=client.model)
