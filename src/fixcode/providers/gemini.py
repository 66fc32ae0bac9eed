"""Gemini adapter (Google Generative Language REST API).

FREE tier: rate-limited requests on the Flash models.
"""

from __future__ import annotations

import logging

from fixcode.providers.base import ProviderAPIError, ProviderAuthError, ProviderInfo

log = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"


class GeminiProvider:
    """Send fix prompts to Gemini via generateContent."""

    def __init__(self, api_key: str | None = None, config: dict | None = None) -> None:
        config = config or {}
        self._api_key = api_key
        self._model = config.get("model") or DEFAULT_MODEL
        self._base_url = (config.get("base_url") or DEFAULT_BASE_URL).rstrip("/")
        self._timeout = config.get("timeout")

    @property
    def name(self) -> str:
        return "gemini"

    @property
    def info(self) -> ProviderInfo:
        return ProviderInfo(
            name="gemini",
            display_name="Gemini (Google)",
            key_url="https://aistudio.google.com/apikey",
            free_tier=True,
        )

    @property
    def model(self) -> str:
        return self._model

    def generate_fix(self, prompt: str) -> str:
        if not self._api_key:
            raise ProviderAuthError(
                "Missing GEMINI_API_KEY. Run `fixcode --setup`.\n"
                "Get a FREE API key at: https://aistudio.google.com/apikey"
            )

        import httpx

        url = f"{self._base_url}/v1beta/models/{self._model}:generateContent"
        log.debug("POST %s", url)
        try:
            resp = httpx.post(
                url,
                params={"key": self._api_key},
                headers={"Content-Type": "application/json"},
                json={"contents": [{"role": "user", "parts": [{"text": prompt}]}]},
                timeout=self._timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            raise ProviderAPIError(f"Gemini API error ({e.response.status_code}): {e}") from e
        except (httpx.TransportError, OSError) as e:
            raise ProviderAPIError(f"Gemini API unreachable: {e}") from e

        # {"candidates": [{"content": {"parts": [{"text": "..."}]}}]}
        candidates = data.get("candidates") or []
        if not candidates:
            raise ProviderAPIError("Gemini API returned no candidates.")
        parts = candidates[0].get("content", {}).get("parts", [])
        texts = [p["text"] for p in parts if "text" in p]
        if not texts:
            raise ProviderAPIError("Gemini API returned no text output.")
        return "".join(texts)
