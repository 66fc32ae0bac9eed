"""Prompt template for fix requests."""

from __future__ import annotations

EXPLAIN_DIRECTIVE = "Explain your reasoning first, then show the corrected code."

_FIX_PROMPT = """
You are an expert {language} developer.
Fix and improve the following code while preserving functionality.
{explain}
---
{source}
"""


def build_prompt(language: str, explain: bool, source: str) -> str:
    """Format the fix prompt. The source goes in as-is, unescaped."""
    return _FIX_PROMPT.format(
        language=language,
        explain=EXPLAIN_DIRECTIVE if explain else "",
        source=source,
    )
