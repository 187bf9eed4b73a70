"""Tests for config manager."""

import os
import stat

import pytest

from nitrapi_cli.client.errors import ConfigurationError
from nitrapi_cli.config.manager import ConfigManager
from nitrapi_cli.config.models import ApiProfile


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    for var in ("NITRAPI_URL", "NITRAPI_TOKEN", "NITRAPI_PROFILE"):
        monkeypatch.delenv(var, raising=False)


class TestConfigManager:
    def test_load_empty(self, config_manager: ConfigManager):
        assert config_manager.config.profiles == {}
        assert config_manager.config.default_profile is None

    def test_add_profile(self, config_manager: ConfigManager, sample_profile: ApiProfile):
        config_manager.add_profile(sample_profile)
        assert "test" in config_manager.config.profiles
        assert config_manager.config.default_profile == "test"

    def test_add_sets_first_as_default(self, config_manager: ConfigManager):
        config_manager.add_profile(ApiProfile(name="first", token="a"))
        config_manager.add_profile(ApiProfile(name="second", token="b"))
        assert config_manager.config.default_profile == "first"

    def test_remove_profile(self, config_manager: ConfigManager, sample_profile: ApiProfile):
        config_manager.add_profile(sample_profile)
        assert config_manager.remove_profile("test") is True
        assert "test" not in config_manager.config.profiles

    def test_remove_nonexistent(self, config_manager: ConfigManager):
        assert config_manager.remove_profile("nope") is False

    def test_remove_default_reassigns(self, config_manager: ConfigManager):
        config_manager.add_profile(ApiProfile(name="a", token="a"))
        config_manager.add_profile(ApiProfile(name="b", token="b"))
        config_manager.remove_profile("a")
        assert config_manager.config.default_profile == "b"

    def test_set_default(self, config_manager: ConfigManager):
        config_manager.add_profile(ApiProfile(name="a", token="a"))
        config_manager.add_profile(ApiProfile(name="dev", token="d"))
        assert config_manager.set_default("dev") is True
        assert config_manager.config.default_profile == "dev"

    def test_set_default_nonexistent(self, config_manager: ConfigManager):
        assert config_manager.set_default("nope") is False

    def test_set_default_format_persists(self, config_manager: ConfigManager, tmp_config):
        config_manager.set_default_format("yaml")
        assert ConfigManager(tmp_config).config.default_format == "yaml"

    def test_get_default_profile(self, config_manager: ConfigManager, sample_profile: ApiProfile):
        config_manager.add_profile(sample_profile)
        p = config_manager.get_profile()
        assert p is not None
        assert p.name == "test"

    def test_save_and_reload(self, config_manager: ConfigManager, sample_profile: ApiProfile):
        config_manager.add_profile(sample_profile)
        mgr2 = ConfigManager(config_path=config_manager.config_path)
        p = mgr2.get_profile("test")
        assert p is not None
        assert p.url == "https://api.test"
        assert p.token == "test-access-token"
        assert p.application_name == "pytest"

    def test_save_omits_defaults(self, config_manager: ConfigManager):
        config_manager.add_profile(ApiProfile(name="plain", token="abc"))
        text = config_manager.config_path.read_text()
        assert 'token = "abc"' in text
        assert "url" not in text
        assert "verify_ssl" not in text
        assert "timeout" not in text

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
    def test_config_file_is_private(self, config_manager: ConfigManager, sample_profile: ApiProfile):
        config_manager.add_profile(sample_profile)
        mode = stat.S_IMODE(config_manager.config_path.stat().st_mode)
        assert mode == 0o600


class TestResolveProfile:
    def test_from_profile(self, config_manager: ConfigManager, sample_profile: ApiProfile):
        config_manager.add_profile(sample_profile)
        resolved = config_manager.resolve_profile()
        assert resolved.url == "https://api.test"
        assert resolved.token == "test-access-token"
        assert resolved.application_name == "pytest"

    def test_cli_overrides(self, config_manager: ConfigManager, sample_profile: ApiProfile):
        config_manager.add_profile(sample_profile)
        resolved = config_manager.resolve_profile(url="https://other.test", token="flag")
        assert resolved.url == "https://other.test"
        assert resolved.token == "flag"
        assert resolved.application_name == "pytest"

    def test_env_vars(self, config_manager: ConfigManager, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NITRAPI_URL", "https://env.test")
        monkeypatch.setenv("NITRAPI_TOKEN", "env-token")
        resolved = config_manager.resolve_profile()
        assert resolved.url == "https://env.test"
        assert resolved.token == "env-token"
        assert resolved.name == "cli"

    def test_env_profile(self, config_manager: ConfigManager, monkeypatch: pytest.MonkeyPatch):
        config_manager.add_profile(ApiProfile(name="a", token="token-a"))
        config_manager.add_profile(ApiProfile(name="b", token="token-b"))
        monkeypatch.setenv("NITRAPI_PROFILE", "b")
        assert config_manager.resolve_profile().token == "token-b"

    def test_flag_beats_env(self, config_manager: ConfigManager, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NITRAPI_TOKEN", "env-token")
        assert config_manager.resolve_profile(token="flag").token == "flag"

    def test_default_url(self, config_manager: ConfigManager):
        resolved = config_manager.resolve_profile(token="t")
        assert resolved.url == "https://api.nitrado.net"

    def test_no_token_raises(self, config_manager: ConfigManager):
        with pytest.raises(ConfigurationError, match="No access token configured"):
            config_manager.resolve_profile()

    def test_unknown_profile_raises(self, config_manager: ConfigManager):
        with pytest.raises(ConfigurationError, match="Profile 'ghost' not found"):
            config_manager.resolve_profile(profile_name="ghost", token="t")

    def test_invalid_url_override(self, config_manager: ConfigManager):
        with pytest.raises(ValueError, match="URL must start with http"):
            config_manager.resolve_profile(url="api.test", token="t")


class TestBrokenConfig:
    def test_invalid_toml(self, config_manager: ConfigManager):
        config_manager.config_path.write_text("profiles = [unclosed")
        with pytest.raises(ConfigurationError, match="Cannot read config file"):
            config_manager.config

    def test_invalid_profile(self, config_manager: ConfigManager):
        config_manager.config_path.write_text('[profiles.dev]\ntimeout = -1\n')
        with pytest.raises(ConfigurationError):
            config_manager.get_profile("dev")
