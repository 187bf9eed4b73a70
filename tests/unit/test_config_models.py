"""Tests for config models."""

import pytest
from pydantic import ValidationError

from nitrapi_cli.config.models import ApiProfile, CLIConfig


class TestApiProfile:
    def test_create_with_token(self):
        p = ApiProfile(name="test", url="https://api.test", token="abc")
        assert p.name == "test"
        assert p.url == "https://api.test"
        assert p.token == "abc"
        assert p.auth_configured is True

    def test_create_no_auth(self):
        p = ApiProfile(name="test")
        assert p.auth_configured is False

    def test_defaults(self):
        p = ApiProfile(name="test")
        assert p.url == "https://api.nitrado.net"
        assert p.verify_ssl is True
        assert p.timeout == 30.0
        assert p.application_name == "nitrapi-cli"

    def test_url_must_start_with_http(self):
        with pytest.raises(ValidationError, match="URL must start with http"):
            ApiProfile(name="test", url="ftp://api.test")

    def test_url_strips_trailing_slash(self):
        p = ApiProfile(name="test", url="https://api.test/")
        assert p.url == "https://api.test"

    def test_url_accepts_http(self):
        p = ApiProfile(name="test", url="http://localhost:8080")
        assert p.url == "http://localhost:8080"

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            ApiProfile(name="test", timeout=0)

    def test_timeout_max_600(self):
        with pytest.raises(ValidationError):
            ApiProfile(name="test", timeout=601)


class TestCLIConfig:
    def test_empty_config(self):
        c = CLIConfig()
        assert c.default_profile is None
        assert c.default_format == "table"
        assert c.profiles == {}

    def test_config_with_profiles(self):
        p = ApiProfile(name="dev", token="abc")
        c = CLIConfig(default_profile="dev", profiles={"dev": p})
        assert c.default_profile == "dev"
        assert "dev" in c.profiles
