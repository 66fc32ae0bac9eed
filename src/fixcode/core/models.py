"""Data models for a single fix run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fixcode.core.prompt import build_prompt

DEFAULT_LANGUAGE = "text"


def detect_language(path: Path) -> str:
    """Language label from the file extension: main.py -> 'py'."""
    return path.suffix[1:] or DEFAULT_LANGUAGE


@dataclass
class FixRequest:
    """Source text headed for a provider, plus how to ask about it."""

    source: str
    language: str = DEFAULT_LANGUAGE
    explain: bool = False

    @classmethod
    def from_file(cls, path: Path, explain: bool = False) -> FixRequest:
        return cls(
            source=path.read_text(encoding="utf-8", errors="replace"),
            language=detect_language(path),
            explain=explain,
        )

    def prompt(self) -> str:
        return build_prompt(self.language, self.explain, self.source)


@dataclass
class FixResult:
    """Provider output and where it was written."""

    text: str
    output_path: Path
    provider: str
    model: str = ""
