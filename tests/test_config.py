"""core/config.py: BtpSettings y .env de usuario"""

from __future__ import annotations

import sys

import pytest
from pydantic import ValidationError

from core.config import DEFAULT_SERVER_URL, BtpSettings, get_user_config_dir, write_user_env_vars


class TestBtpSettings:
    def test_defaults(self):
        settings = BtpSettings(_env_file=None)

        assert settings.server_url == DEFAULT_SERVER_URL
        assert settings.max_redirects == 10
        assert settings.globalaccount == ""
        assert settings.idtoken is None
        assert settings.log_level == "WARNING"

    def test_reads_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("BTP_GLOBALACCOUNT", "my-ga")
        monkeypatch.setenv("BTP_SERVER_URL", "https://cli.example.test")
        monkeypatch.setenv("BTP_MAX_REDIRECTS", "3")

        settings = BtpSettings(_env_file=None)

        assert settings.globalaccount == "my-ga"
        assert settings.server_url == "https://cli.example.test"
        assert settings.max_redirects == 3

    def test_reads_env_file(self, tmp_path):
        env_file = tmp_path / "custom.env"
        env_file.write_text("BTP_USERNAME=jane\nBTP_IDP=my.ias.test\n", encoding="utf-8")

        settings = BtpSettings(_env_file=env_file)

        assert settings.username == "jane"
        assert settings.idp == "my.ias.test"

    def test_validation(self):
        with pytest.raises(ValidationError):
            BtpSettings(_env_file=None, http_timeout_seconds=0)
        with pytest.raises(ValidationError):
            BtpSettings(_env_file=None, max_redirects=51)


class TestUserEnvFile:
    def test_write_creates_sorted_file(self, tmp_path):
        env_path = tmp_path / "cfg" / ".env"

        written = write_user_env_vars({"BTP_SERVER_URL": "https://a.test", "BTP_GLOBALACCOUNT": "ga"}, env_path=env_path)

        assert written == env_path
        lines = env_path.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("#")
        assert lines[1:] == ["BTP_GLOBALACCOUNT=ga", "BTP_SERVER_URL=https://a.test"]

    def test_none_keeps_existing_value(self, tmp_path):
        env_path = tmp_path / ".env"
        env_path.write_text('BTP_USERNAME="jane"\n# comment\nBTP_IDP=old\n', encoding="utf-8")

        write_user_env_vars({"BTP_USERNAME": None, "BTP_IDP": "new"}, env_path=env_path)

        content = env_path.read_text(encoding="utf-8")
        assert "BTP_USERNAME=jane" in content
        assert "BTP_IDP=new" in content
        assert "old" not in content

    def test_config_dir_follows_xdg(self, tmp_path, monkeypatch):
        monkeypatch.setattr(sys, "platform", "linux")

        assert get_user_config_dir() == tmp_path / "config" / "btp-cli-client"
