"""Constants, credential loading, and settings resolution.

This module holds everything gamers-console needs to know before it talks
to the network:

* **Constants** -- the fixed Twitch and IGDB URLs, environment variable
  names, header names, and the OAuth2 grant type.
* **Credential loading** -- :func:`load_credentials` reads the client ID
  and secret from the environment exactly once at startup.
* **Precedence resolution** -- :func:`resolve_settings` merges CLI flags,
  environment variables, and built-in defaults into a
  :class:`~gamers_console.models.ConsoleSettings`.

Both functions accept an explicit ``environ`` mapping so tests can inject
fake credentials without touching ``os.environ``.
"""

from __future__ import annotations

import math
import os
from typing import Mapping, Optional

from gamers_console.exceptions import ConfigError, ErrorKind
from gamers_console.models import ConsoleSettings, Credentials

# Twitch developer API authentication.
AUTH_URL = "https://id.twitch.tv/oauth2/token"
CLIENT_ID_ENV_VAR = "CLIENT_ID"
CLIENT_SECRET_ENV_VAR = "CLIENT_SECRET"
GRANT_TYPE = "client_credentials"

# IGDB developer API.
BASE_URL = "https://api.igdb.com/v4"
CLIENT_ID_HEADER = "Client-ID"
AUTHORIZATION_HEADER = "Authorization"

# Optional overrides.
AUTH_URL_ENV_VAR = "GAMERS_CONSOLE_AUTH_URL"
BASE_URL_ENV_VAR = "GAMERS_CONSOLE_BASE_URL"
TIMEOUT_ENV_VAR = "GAMERS_CONSOLE_TIMEOUT"

_SETTINGS_CONTEXT = "failed to resolve settings"


# --- Credentials ---


def _require(environ: Mapping[str, str], var_name: str) -> str:
    """Return a non-empty environment value or raise :class:`ConfigError`."""
    value = environ.get(var_name, "")
    if not value:
        raise ConfigError(ErrorKind.MISSING_VARIABLE, f"{var_name} must be initialized")
    return value


def load_credentials(environ: Optional[Mapping[str, str]] = None) -> Credentials:
    """Read the OAuth2 client ID and secret from the environment.

    An unset variable and an empty one are treated alike.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        The immutable :class:`~gamers_console.models.Credentials`.

    Raises:
        ConfigError: If either variable is missing; the message names it.
    """
    if environ is None:
        environ = os.environ
    client_id = _require(environ, CLIENT_ID_ENV_VAR)
    client_secret = _require(environ, CLIENT_SECRET_ENV_VAR)
    return Credentials(client_id=client_id, client_secret=client_secret)


# --- Settings precedence ---


def _parse_timeout(raw: str, source: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(
            ErrorKind.INVALID_VALUE,
            f"timeout must be a number of seconds, got {raw!r} (source: {source})",
            context=_SETTINGS_CONTEXT,
        ) from None
    if not (math.isfinite(value) and value > 0):
        raise ConfigError(
            ErrorKind.INVALID_VALUE,
            f"timeout must be a positive, finite number, got {raw!r} (source: {source})",
            context=_SETTINGS_CONTEXT,
        )
    return value


def resolve_settings(
    auth_url: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ConsoleSettings:
    """Resolve the effective settings using a precedence chain.

    Resolution order (highest precedence first):

    1. Explicit arguments (from CLI flags).
    2. ``GAMERS_CONSOLE_AUTH_URL``, ``GAMERS_CONSOLE_BASE_URL`` and
       ``GAMERS_CONSOLE_TIMEOUT``.
    3. Built-in defaults (:data:`AUTH_URL`, :data:`BASE_URL`, no timeout).

    A trailing slash on the base URL is dropped so that query URLs are
    always ``{base_url}/{endpoint}``.

    Args:
        auth_url: Token endpoint override.
        base_url: Database API base URL override.
        timeout: Request timeout override in seconds.
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        The resolved :class:`~gamers_console.models.ConsoleSettings`.

    Raises:
        ConfigError: If a timeout is not a positive number.
    """
    if environ is None:
        environ = os.environ

    if not auth_url:
        auth_url = environ.get(AUTH_URL_ENV_VAR) or AUTH_URL
    if not base_url:
        base_url = environ.get(BASE_URL_ENV_VAR) or BASE_URL

    if timeout is not None:
        timeout = _parse_timeout(str(timeout), "--timeout")
    elif environ.get(TIMEOUT_ENV_VAR):
        timeout = _parse_timeout(environ[TIMEOUT_ENV_VAR], TIMEOUT_ENV_VAR)

    return ConsoleSettings(
        auth_url=auth_url,
        base_url=base_url.rstrip("/"),
        timeout=timeout,
    )
