"""OpenAI adapter (Responses API)."""

from __future__ import annotations

import logging

from fixcode.providers.base import ProviderAPIError, ProviderAuthError, ProviderInfo

log = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4.1-mini"
DEFAULT_BASE_URL = "https://api.openai.com"


class OpenAIProvider:
    """Send fix prompts to OpenAI via the Responses API."""

    def __init__(self, api_key: str | None = None, config: dict | None = None) -> None:
        config = config or {}
        self._api_key = api_key
        self._model = config.get("model") or DEFAULT_MODEL
        self._base_url = (config.get("base_url") or DEFAULT_BASE_URL).rstrip("/")
        self._timeout = config.get("timeout")

    @property
    def name(self) -> str:
        return "openai"

    @property
    def info(self) -> ProviderInfo:
        return ProviderInfo(
            name="openai",
            display_name="OpenAI",
            key_url="https://platform.openai.com/api-keys",
        )

    @property
    def model(self) -> str:
        return self._model

    def generate_fix(self, prompt: str) -> str:
        if not self._api_key:
            raise ProviderAuthError(
                "Missing OPENAI_API_KEY. Run `fixcode --setup`.\n"
                "Get your key at: https://platform.openai.com/api-keys"
            )

        import httpx

        log.debug("POST %s/v1/responses (model=%s)", self._base_url, self._model)
        try:
            resp = httpx.post(
                f"{self._base_url}/v1/responses",
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "Content-Type": "application/json",
                },
                json={
                    "model": self._model,
                    "input": prompt,
                },
                timeout=self._timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            raise ProviderAPIError(f"OpenAI API error ({e.response.status_code}): {e}") from e
        except (httpx.TransportError, OSError) as e:
            raise ProviderAPIError(f"OpenAI API unreachable: {e}") from e

        text = _first_output_text(data)
        if text is None:
            raise ProviderAPIError("OpenAI API returned no text output.")
        return text


def _first_output_text(data: dict) -> str | None:
    """Pull the first text block out of a Responses API payload.

    Response shape:
    {"output": [{"type": "message", "content": [{"type": "output_text", "text": "..."}]}]}

    Reasoning items may precede the message, so non-message items are skipped.
    """
    for item in data.get("output") or []:
        if item.get("type", "message") != "message":
            continue
        for block in item.get("content") or []:
            if block.get("type", "output_text") == "output_text" and "text" in block:
                return block["text"]
    return None
