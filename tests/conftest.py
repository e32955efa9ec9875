"""Shared test fixtures for gamers-console.

Provides reusable fixtures for settings and credentials, an isolated
environment for CLI runs, and a helper that routes every ``httpx.Client``
the package creates through an in-memory handler. These fixtures are
automatically discovered by pytest and available to all test modules.
"""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from gamers_console.models import ConsoleSettings, Credentials
from gamers_console.output import reset_output


AUTH_URL = "https://auth.example.com/oauth2/token"
BASE_URL = "https://api.example.com/v4"

Handler = Callable[[httpx.Request], httpx.Response]


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager's Rich console holds a reference to sys.stderr from
    creation time. When CliRunner or capsys swap those streams out, the
    cached reference goes stale. Resetting forces a fresh manager on next use.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Settings and credentials
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> ConsoleSettings:
    """Settings pointing at example.com stubs, with no timeout override."""
    return ConsoleSettings(auth_url=AUTH_URL, base_url=BASE_URL)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(client_id="my-client-id", client_secret="my-client-secret")


@pytest.fixture
def cli_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment for a CLI run: valid credentials, stub URLs, no colour."""
    monkeypatch.setenv("CLIENT_ID", "my-client-id")
    monkeypatch.setenv("CLIENT_SECRET", "my-client-secret")
    monkeypatch.setenv("GAMERS_CONSOLE_AUTH_URL", AUTH_URL)
    monkeypatch.setenv("GAMERS_CONSOLE_BASE_URL", BASE_URL)
    monkeypatch.delenv("GAMERS_CONSOLE_TIMEOUT", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


# ---------------------------------------------------------------------------
# HTTP routing
# ---------------------------------------------------------------------------


@pytest.fixture
def route_http(monkeypatch: pytest.MonkeyPatch) -> Callable[[Handler], list[httpx.Request]]:
    """Route every ``httpx.Client`` through *handler*.

    Returns an installer; calling it with a handler patches ``httpx.Client``
    and returns the list that collects every request sent.
    """
    real_client = httpx.Client

    def install(handler: Handler) -> list[httpx.Request]:
        seen: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        def client_factory(*args: object, **kwargs: object) -> httpx.Client:
            kwargs["transport"] = httpx.MockTransport(recording_handler)
            return real_client(*args, **kwargs)  # type: ignore[arg-type]

        monkeypatch.setattr(httpx, "Client", client_factory)
        return seen

    return install
