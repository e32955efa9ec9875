"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to an error category and is referenced by the
corresponding :class:`~gamers_console.exceptions.GamersConsoleError`
subclass. Shell wrappers can inspect the exit code to tell a mistyped
invocation apart from a runtime failure without parsing stderr.

Example::

    $ gamers-console games
    Usage: gamers-console "<endpoint>" "<query>"
    $ echo $?
    2   # EXIT_INVALID_USAGE
"""

EXIT_SUCCESS = 0
"""The query completed and its result was printed."""

EXIT_INTERNAL_ERROR = 1
"""Configuration, authentication, or query failure."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with the wrong number of arguments or a bad option."""

EXIT_INTERRUPTED = 130
"""The user pressed Ctrl-C."""
