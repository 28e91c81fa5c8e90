"""Tests for settings loading."""

import pytest

from chatwire.config import DecodePolicy, DecoderConfig, Settings, load_settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.setenv("CHATWIRE_CONFIG_DIR", str(tmp_path))
    monkeypatch.delenv("CHATWIRE_CONFIG", raising=False)
    monkeypatch.delenv("CHATWIRE_DECODER__POLICY", raising=False)
    monkeypatch.delenv("CHATWIRE_LOG_LEVEL", raising=False)


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.decoder.policy == DecodePolicy.LENIENT
        assert settings.decoder.log_placeholders is True
        assert settings.log_level == "INFO"
        assert settings.log_json is False

    def test_decoder_config_accepts_string(self):
        assert DecoderConfig(policy="strict").policy == DecodePolicy.STRICT

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("CHATWIRE_DECODER__POLICY", "strict")
        monkeypatch.setenv("CHATWIRE_LOG_LEVEL", "DEBUG")
        settings = Settings()
        assert settings.decoder.policy == DecodePolicy.STRICT
        assert settings.log_level == "DEBUG"


class TestLoadSettings:
    def test_no_config_file(self):
        settings = load_settings()
        assert settings.decoder.policy == DecodePolicy.LENIENT

    def test_explicit_yaml(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("decoder:\n  policy: strict\n  log_placeholders: false\nlog_json: true\n")
        settings = load_settings(path)
        assert settings.decoder.policy == DecodePolicy.STRICT
        assert settings.decoder.log_placeholders is False
        assert settings.log_json is True

    def test_yaml_from_env_path(self, monkeypatch, tmp_path):
        path = tmp_path / "env.yaml"
        path.write_text("log_level: WARNING\n")
        monkeypatch.setenv("CHATWIRE_CONFIG", str(path))
        assert load_settings().log_level == "WARNING"

    def test_default_config_dir(self, tmp_path):
        (tmp_path / "config.yaml").write_text("decoder:\n  policy: strict\n")
        assert load_settings().decoder.policy == DecodePolicy.STRICT

    def test_missing_path_uses_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "nope.yaml")
        assert settings.log_level == "INFO"

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_settings(path).decoder.policy == DecodePolicy.LENIENT
