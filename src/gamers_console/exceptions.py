"""Exception hierarchy for gamers-console.

All exceptions inherit from :class:`GamersConsoleError`, which carries an
``exit_code`` attribute mapped to a constant from
:mod:`gamers_console.exit_codes`, a ``kind`` tag naming the failure, and
a one-line ``context`` naming the step that failed. The entry point in
:func:`gamers_console.app.main` catches ``GamersConsoleError``, prints it
and exits with the appropriate code.

Subclass hierarchy::

    GamersConsoleError (exit 1)
    +-- InvalidUsageError   (exit 2)
    +-- ConfigError         (exit 1)  MISSING_VARIABLE, INVALID_VALUE
    +-- AuthError           (exit 1)  CONSTRUCTION, TRANSPORT, MALFORMED_RESPONSE
    +-- QueryError          (exit 1)  CONSTRUCTION, TRANSPORT, READ

Rendered messages take the form ``"<context>: with error: <detail>"``::

    >>> str(QueryError(ErrorKind.TRANSPORT, "connection refused"))
    'failed to query the internet games database: with error: connection refused'
"""

from __future__ import annotations

import enum
from typing import Optional

from gamers_console.exit_codes import EXIT_INTERNAL_ERROR, EXIT_INVALID_USAGE


class ErrorKind(str, enum.Enum):
    """Tag identifying which part of a step failed."""

    MISSING_VARIABLE = "missing_variable"
    INVALID_VALUE = "invalid_value"
    TRANSPORT = "transport"
    MALFORMED_RESPONSE = "malformed_response"
    CONSTRUCTION = "construction"
    READ = "read"


class GamersConsoleError(Exception):
    """Base exception for all gamers-console errors.

    Args:
        kind: Which failure occurred within the step.
        detail: Human-readable description of the underlying problem.
        context: Optional override for the class-level step description.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_INTERNAL_ERROR
    context: str = "internal error"

    def __init__(
        self,
        kind: ErrorKind,
        detail: str,
        context: Optional[str] = None,
        exit_code: Optional[int] = None,
    ):
        self.kind = kind
        self.detail = detail
        if context is not None:
            self.context = context
        if exit_code is not None:
            self.exit_code = exit_code
        super().__init__(f"{self.context}: with error: {detail}")


class InvalidUsageError(GamersConsoleError):
    """Raised when the CLI is invoked with the wrong number of arguments.

    Rendered as the bare usage line, without the ``with error`` wrapping.
    """

    exit_code = EXIT_INVALID_USAGE
    context = "invalid usage"

    def __init__(self, usage: str):
        super().__init__(ErrorKind.INVALID_VALUE, usage)
        self.args = (usage,)


class ConfigError(GamersConsoleError):
    """Raised when a required environment variable is absent or a setting is invalid."""

    context = "failed to retrieve client ID and secret"


class AuthError(GamersConsoleError):
    """Raised when the token exchange fails or its reply cannot be parsed."""

    context = "failed to get auth token"


class QueryError(GamersConsoleError):
    """Raised when the database query cannot be built, sent, or read."""

    context = "failed to query the internet games database"
