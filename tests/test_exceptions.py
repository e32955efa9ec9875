"""Tests for the exception hierarchy and exit-code mapping."""

from __future__ import annotations

import pytest

from gamers_console.exceptions import (
    AuthError,
    ConfigError,
    ErrorKind,
    GamersConsoleError,
    InvalidUsageError,
    QueryError,
)
from gamers_console.exit_codes import (
    EXIT_INTERNAL_ERROR,
    EXIT_INVALID_USAGE,
    EXIT_SUCCESS,
)


class TestExitCodes:
    def test_codes_are_distinct_and_non_zero(self) -> None:
        assert EXIT_SUCCESS == 0
        assert EXIT_INVALID_USAGE != 0
        assert EXIT_INTERNAL_ERROR != 0
        assert EXIT_INVALID_USAGE != EXIT_INTERNAL_ERROR

    @pytest.mark.parametrize("cls", [ConfigError, AuthError, QueryError])
    def test_runtime_errors_use_internal_error_code(self, cls: type[GamersConsoleError]) -> None:
        assert cls(ErrorKind.TRANSPORT, "x").exit_code == EXIT_INTERNAL_ERROR

    def test_usage_error_code(self) -> None:
        assert InvalidUsageError("Usage: x").exit_code == EXIT_INVALID_USAGE

    def test_exit_code_override(self) -> None:
        exc = QueryError(ErrorKind.READ, "x", exit_code=42)
        assert exc.exit_code == 42
        assert QueryError.exit_code == EXIT_INTERNAL_ERROR


class TestMessages:
    @pytest.mark.parametrize(
        ("cls", "context"),
        [
            (ConfigError, "failed to retrieve client ID and secret"),
            (AuthError, "failed to get auth token"),
            (QueryError, "failed to query the internet games database"),
        ],
    )
    def test_context_with_error_format(self, cls: type[GamersConsoleError], context: str) -> None:
        exc = cls(ErrorKind.TRANSPORT, "connection refused")
        assert str(exc) == f"{context}: with error: connection refused"
        assert exc.context == context
        assert exc.detail == "connection refused"
        assert exc.kind is ErrorKind.TRANSPORT

    def test_context_override(self) -> None:
        exc = ConfigError(ErrorKind.INVALID_VALUE, "bad", context="failed to resolve settings")
        assert str(exc) == "failed to resolve settings: with error: bad"
        assert ConfigError.context == "failed to retrieve client ID and secret"

    def test_usage_error_is_not_wrapped(self) -> None:
        exc = InvalidUsageError('Usage: gamers-console "<endpoint>" "<query>"')
        assert str(exc) == 'Usage: gamers-console "<endpoint>" "<query>"'
        assert "with error" not in str(exc)

    def test_all_errors_share_base(self) -> None:
        for cls in (InvalidUsageError, ConfigError, AuthError, QueryError):
            assert issubclass(cls, GamersConsoleError)
