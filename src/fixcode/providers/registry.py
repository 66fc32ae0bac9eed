"""Provider selection: maps a Provider enum member to its adapter class."""

from __future__ import annotations

import logging
from enum import Enum

from fixcode.providers.base import FixProvider
from fixcode.providers.gemini import GeminiProvider
from fixcode.providers.openai import OpenAIProvider

log = logging.getLogger(__name__)


class Provider(str, Enum):
    """Remote LLM services fixcode can talk to."""

    OPENAI = "openai"
    GEMINI = "gemini"

    @property
    def key_name(self) -> str:
        """Env variable that holds this provider's API key."""
        return f"{self.name}_API_KEY"

    @classmethod
    def parse(cls, value: str | Provider) -> Provider:
        """Convert a CLI string to a Provider.

        Raises:
            ValueError: Unknown provider name.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            available = ", ".join(list_providers())
            raise ValueError(f"Unknown provider: {value!r}. Available: {available}") from None


_PROVIDERS: dict[Provider, type] = {
    Provider.OPENAI: OpenAIProvider,
    Provider.GEMINI: GeminiProvider,
}


def get_provider(
    provider: str | Provider,
    api_key: str | None = None,
    config: dict | None = None,
) -> FixProvider:
    """Get a provider instance by name.

    Args:
        provider: Provider enum member or name ('openai', 'gemini').
        api_key: Credential for that provider; may be None, in which case
            ``generate_fix`` raises ProviderAuthError.
        config: Provider-specific overrides (model, base_url, timeout).

    Returns:
        Configured FixProvider instance.

    Raises:
        ValueError: Unknown provider name.
    """
    member = Provider.parse(provider)
    log.debug("Selected provider: %s", member.value)
    return _PROVIDERS[member](api_key, config)


def list_providers() -> list[str]:
    """Return all available provider names."""
    return [p.value for p in Provider]
