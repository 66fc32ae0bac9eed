"""Remote LLM providers that turn a fix prompt into corrected source text.

Both providers need an API key of their own:
- OpenAI: https://platform.openai.com/api-keys (pay-per-token)
- Gemini: https://aistudio.google.com/apikey (free tier available)

Run ``fixcode --setup`` to store a key in the local .env file.
"""

from fixcode.providers.base import (
    FixError,
    FixProvider,
    ProviderAPIError,
    ProviderAuthError,
    ProviderInfo,
)
from fixcode.providers.gemini import GeminiProvider
from fixcode.providers.openai import OpenAIProvider
from fixcode.providers.registry import Provider, get_provider, list_providers

__all__ = [
    "FixError",
    "FixProvider",
    "GeminiProvider",
    "OpenAIProvider",
    "Provider",
    "ProviderAPIError",
    "ProviderAuthError",
    "ProviderInfo",
    "get_provider",
    "list_providers",
]
