"""Tests for error_handler and custom exceptions."""

from __future__ import annotations

import pytest

from nitrapi_cli.client.errors import (
    AuthenticationError,
    ConfigurationError,
    ConflictError,
    DecodeError,
    NitrapiAPIError,
    NitrapiConnectionError,
    NitrapiError,
    NotFoundError,
    RateLimitError,
    ValidationError,
    error_handler,
)


class TestExceptionHierarchy:
    def test_base_error(self):
        exc = NitrapiError("test")
        assert str(exc) == "test"
        assert exc.exit_code == 1

    @pytest.mark.parametrize(
        ("exc_type", "code"),
        [
            (NitrapiConnectionError, 2),
            (AuthenticationError, 3),
            (NotFoundError, 4),
            (ConflictError, 5),
            (ConfigurationError, 6),
            (RateLimitError, 8),
            (DecodeError, 9),
        ],
    )
    def test_exit_codes(self, exc_type: type[NitrapiError], code: int):
        exc = exc_type("boom")
        assert isinstance(exc, NitrapiError)
        assert exc.exit_code == code

    def test_validation_error(self):
        exc = ValidationError("hours must be between 1 and 24")
        assert exc.exit_code == 7
        assert "hours must be" in str(exc)

    def test_validation_error_empty(self):
        assert str(ValidationError()) == "Validation error"

    def test_api_error(self):
        exc = NitrapiAPIError(500, "server error")
        assert exc.exit_code == 1
        assert exc.status_code == 500
        assert str(exc) == "API returned 500: server error"

    def test_decode_error_key(self):
        exc = DecodeError("missing", key="gameserver")
        assert exc.key == "gameserver"
        assert DecodeError("bad body").key is None


class TestErrorHandler:
    def test_catches_nitrapi_error(self):
        @error_handler
        def raises_auth():
            raise AuthenticationError("bad token")

        with pytest.raises(SystemExit) as exc_info:
            raises_auth()
        assert exc_info.value.code == 3

    def test_catches_decode_error(self):
        @error_handler
        def raises_decode():
            raise DecodeError("unexpected shape")

        with pytest.raises(SystemExit) as exc_info:
            raises_decode()
        assert exc_info.value.code == 9

    def test_catches_value_error(self):
        @error_handler
        def raises_value():
            raise ValueError("URL must start with http:// or https://")

        with pytest.raises(SystemExit) as exc_info:
            raises_value()
        assert exc_info.value.code == 1

    def test_passes_through_normal_return(self):
        @error_handler
        def returns_value():
            return 42

        assert returns_value() == 42

    def test_does_not_catch_other_exceptions(self):
        @error_handler
        def raises_type_error():
            raise TypeError("bad type")

        with pytest.raises(TypeError):
            raises_type_error()
