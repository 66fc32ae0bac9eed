"""Tests for fixcode.core.credentials."""

from __future__ import annotations

import platform
from pathlib import Path

import pytest

from fixcode.core.credentials import key_name, load_credentials, upsert_key
from fixcode.providers.registry import Provider


class TestKeyName:
    def test_known_providers(self):
        assert key_name("openai") == "OPENAI_API_KEY"
        assert key_name(Provider.GEMINI) == "GEMINI_API_KEY"

    def test_unknown_provider(self):
        with pytest.raises(ValueError):
            key_name("claude")


class TestUpsertKey:
    def test_creates_missing_file(self, tmp_path: Path):
        env = tmp_path / ".env"
        upsert_key("openai", "sk-aaaaaaaaaaaa", env)

        assert env.read_text(encoding="utf-8") == "OPENAI_API_KEY=sk-aaaaaaaaaaaa\n"

    def test_second_upsert_replaces_first(self, tmp_path: Path):
        env = tmp_path / ".env"
        upsert_key("openai", "sk-first-key-1", env)
        upsert_key("openai", "sk-second-key-2", env)

        lines = env.read_text(encoding="utf-8").splitlines()
        matching = [line for line in lines if line.startswith("OPENAI_API_KEY")]
        assert matching == ["OPENAI_API_KEY=sk-second-key-2"]

    def test_unrelated_lines_preserved(self, tmp_path: Path):
        env = tmp_path / ".env"
        env.write_text(
            "# local settings\nDEBUG=1\nOPENAI_API_KEY=old-key-value\nDATABASE_URL=sqlite://\n",
            encoding="utf-8",
        )

        upsert_key("openai", "new-key-value", env)

        assert env.read_text(encoding="utf-8").splitlines() == [
            "# local settings",
            "DEBUG=1",
            "DATABASE_URL=sqlite://",
            "OPENAI_API_KEY=new-key-value",
        ]

    def test_clears_other_provider_key(self, tmp_path: Path):
        env = tmp_path / ".env"
        env.write_text("DEBUG=1\nOPENAI_API_KEY=old-openai-key\n", encoding="utf-8")

        upsert_key("gemini", "gemini-key-123", env)

        assert env.read_text(encoding="utf-8") == "DEBUG=1\nGEMINI_API_KEY=gemini-key-123\n"

    def test_removes_duplicate_lines(self, tmp_path: Path):
        env = tmp_path / ".env"
        env.write_text(
            "GEMINI_API_KEY=a\nexport GEMINI_API_KEY=b\nGEMINI_API_KEY = c\n",
            encoding="utf-8",
        )

        upsert_key("gemini", "fresh-gemini-key", env)

        assert env.read_text(encoding="utf-8") == "GEMINI_API_KEY=fresh-gemini-key\n"

    def test_prefix_match_removes_similar_names(self, tmp_path: Path):
        env = tmp_path / ".env"
        env.write_text(
            "OPENAI_API_KEY_BACKUP=old\nGEMINI_API_KEY2=old\nMY_OPENAI_API_KEY=keep-me\n",
            encoding="utf-8",
        )

        upsert_key("openai", "sk-new-key-000", env)

        assert env.read_text(encoding="utf-8").splitlines() == [
            "MY_OPENAI_API_KEY=keep-me",
            "OPENAI_API_KEY=sk-new-key-000",
        ]

    @pytest.mark.skipif(platform.system() == "Windows", reason="POSIX permissions")
    def test_file_is_private(self, tmp_path: Path):
        env = tmp_path / ".env"
        upsert_key("openai", "sk-aaaaaaaaaaaa", env)
        assert env.stat().st_mode & 0o777 == 0o600

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        written = upsert_key("openai", "sk-aaaaaaaaaaaa")
        assert written == tmp_path / ".env"
        assert written.exists()


class TestLoadCredentials:
    def test_reads_env_file(self, tmp_path: Path):
        env = tmp_path / ".env"
        env.write_text("OPENAI_API_KEY=sk-file\nGEMINI_API_KEY=gm-file\n", encoding="utf-8")

        creds = load_credentials(env, environ={})

        assert creds == {Provider.OPENAI: "sk-file", Provider.GEMINI: "gm-file"}

    def test_missing_file(self, tmp_path: Path):
        assert load_credentials(tmp_path / ".env", environ={}) == {}

    def test_environment_wins(self, tmp_path: Path):
        env = tmp_path / ".env"
        env.write_text("OPENAI_API_KEY=sk-file\n", encoding="utf-8")

        creds = load_credentials(env, environ={"OPENAI_API_KEY": "sk-env"})

        assert creds[Provider.OPENAI] == "sk-env"

    def test_empty_value_is_absent(self, tmp_path: Path):
        env = tmp_path / ".env"
        env.write_text("GEMINI_API_KEY=\n", encoding="utf-8")

        assert Provider.GEMINI not in load_credentials(env, environ={})

    def test_does_not_touch_process_environment(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        env = tmp_path / ".env"
        env.write_text("GEMINI_API_KEY=gm-file\n", encoding="utf-8")

        load_credentials(env)

        import os

        assert "GEMINI_API_KEY" not in os.environ

    def test_roundtrip_with_upsert(self, tmp_path: Path):
        env = tmp_path / ".env"
        upsert_key("gemini", "gemini-key-123", env)

        assert load_credentials(env, environ={}) == {Provider.GEMINI: "gemini-key-123"}
