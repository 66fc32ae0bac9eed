"""Fix provider protocol and supporting types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass
class ProviderInfo:
    """Display metadata for a provider."""

    name: str
    display_name: str
    key_url: str = ""
    free_tier: bool = False


@runtime_checkable
class FixProvider(Protocol):
    """Contract for remote LLM APIs that fix source code."""

    @property
    def name(self) -> str:
        """Provider ID: 'openai' or 'gemini'."""
        ...

    @property
    def info(self) -> ProviderInfo:
        """Provider metadata."""
        ...

    @property
    def model(self) -> str:
        """Model identifier sent with every request."""
        ...

    def generate_fix(self, prompt: str) -> str:
        """Send a fix prompt and return the model's text verbatim.

        Raises:
            ProviderAuthError: No API key configured.
            ProviderAPIError: Transport failure, error status, or a response
                without any text in it.
        """
        ...


class FixError(Exception):
    """Base error for fixcode provider operations."""


class ProviderAuthError(FixError):
    """Missing API key."""


class ProviderAPIError(FixError):
    """API returned an error or could not be reached."""
