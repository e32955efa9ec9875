"""Typer application and CLI entry point for gamers-console.

The single command takes an endpoint and a query, authenticates with the
Twitch client-credentials flow, sends the query to the IGDB, and prints the
raw reply::

    gamers-console games "fields name, rating; limit 5;"

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs a SIGINT handler and invokes the Typer app.
Errors raised by the components are
:class:`~gamers_console.exceptions.GamersConsoleError` subclasses; the
command prints them and exits with the error's ``exit_code``.

See Also:
    :mod:`gamers_console.config`: Credential loading and settings precedence.
    :mod:`gamers_console.output`: stdout/stderr discipline.
"""

from __future__ import annotations

import signal
import sys
from typing import Any, Optional

import typer

from gamers_console import __version__
from gamers_console.auth import TokenProvider
from gamers_console.client import QueryClient
from gamers_console.config import load_credentials, resolve_settings
from gamers_console.exceptions import GamersConsoleError, InvalidUsageError
from gamers_console.exit_codes import EXIT_INTERNAL_ERROR, EXIT_INTERRUPTED
from gamers_console.models import ConsoleSettings, Credentials
from gamers_console.output import OutputManager, debug, error, info, print_data, set_output

USAGE = 'Usage: gamers-console "<endpoint>" "<query>"'


app = typer.Typer(
    name="gamers-console",
    help="Query the internet games database from the command line.",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"gamers-console {__version__}")
        raise typer.Exit()


def run_query(
    endpoint: str,
    query: str,
    settings: ConsoleSettings,
    credentials: Credentials,
) -> str:
    """Authenticate, send one query, and return the raw reply text.

    The token is used for this single request and then discarded.

    Args:
        endpoint: Path segment of the database API, e.g. ``"games"``.
        query: Query text, sent verbatim.
        settings: Resolved URLs and timeout.
        credentials: Client ID and secret loaded at startup.

    Returns:
        The response body exactly as received.

    Raises:
        AuthError: If the token exchange fails.
        QueryError: If the query fails.
    """
    token = TokenProvider(settings).fetch_token(credentials)
    client = QueryClient(credentials.client_id, token, settings)
    return client.query(endpoint, query)


@app.command()
def run(
    args: Optional[list[str]] = typer.Argument(
        None,
        metavar="ENDPOINT QUERY",
        help="API endpoint (e.g. games) and the query to send to it.",
        show_default=False,
    ),
    auth_url: Optional[str] = typer.Option(
        None, "--auth-url", help="Override the OAuth2 token endpoint."
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="Override the database API base URL."
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Request timeout in seconds."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Send QUERY to ENDPOINT of the internet games database.

    Reads CLIENT_ID and CLIENT_SECRET from the environment.
    """
    set_output(OutputManager(no_color=no_color, verbose=verbose))

    try:
        if args is None or len(args) != 2:
            raise InvalidUsageError(USAGE)
        endpoint, query = args

        credentials = load_credentials()
        settings = resolve_settings(auth_url=auth_url, base_url=base_url, timeout=timeout)
        debug(f"Querying endpoint '{endpoint}' at {settings.base_url}")

        result = run_query(endpoint, query, settings, credentials)
    except InvalidUsageError as exc:
        info(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    except GamersConsoleError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    print_data(f"Query result: \n{result}")


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``gamers-console`` console script.

    Unexpected exceptions are reported on stderr and exit with
    :data:`~gamers_console.exit_codes.EXIT_INTERNAL_ERROR`.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except Exception as exc:
        error(f"unexpected error: {exc}")
        sys.exit(EXIT_INTERNAL_ERROR)
