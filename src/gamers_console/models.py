"""Pydantic models shared across gamers-console.

The models fall into two groups:

**Wire models** -- the JSON bodies exchanged with the OAuth2 provider:
    :class:`TokenRequest` and :class:`TokenResponse`.

**Runtime models** -- values built once at startup and handed to the
components: :class:`Credentials`, :class:`ConsoleSettings`, and
:class:`Query`.

All models use Pydantic v2. The query result itself is not modelled; it is
the raw response text, passed through as a plain ``str``.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# --- Credentials ---


class Credentials(BaseModel):
    """OAuth2 client identifier and secret read from the environment.

    Immutable for the lifetime of the process and never persisted. The
    secret is kept out of ``repr()`` so that it cannot leak into debug
    output or tracebacks.
    """

    model_config = ConfigDict(frozen=True)

    client_id: str
    client_secret: str = Field(repr=False)


# --- Token exchange wire models ---


class TokenRequest(BaseModel):
    """JSON body of the client-credentials token exchange."""

    client_id: str
    client_secret: str
    grant_type: str = "client_credentials"


class TokenResponse(BaseModel):
    """JSON reply of the token endpoint.

    Every field defaults to its zero value, so any JSON object is accepted.
    Only ``access_token`` is consumed; ``expires_in`` and ``token_type``
    are parsed but unused since every invocation re-authenticates.

    Validation is strict: a quoted number such as ``"3600"`` is rejected
    rather than coerced.
    """

    model_config = ConfigDict(strict=True)

    access_token: str = ""
    expires_in: int = 0
    token_type: str = ""


# --- Query ---


class Query(BaseModel):
    """A single query against the database API.

    Both values are supplied verbatim by the caller. ``body`` is opaque text
    in the API's own query language and is never interpreted.
    """

    endpoint: str
    body: str


# --- Settings ---


class ConsoleSettings(BaseModel):
    """Where the two HTTP calls go and how long they may take.

    Built by :func:`~gamers_console.config.resolve_settings` from CLI
    flags, environment variables, and built-in defaults.
    """

    auth_url: str = Field(description="OAuth2 client-credentials token endpoint")
    base_url: str = Field(description="Base URL of the database API")
    timeout: Optional[float] = Field(
        default=None,
        description="Request timeout in seconds; httpx's default when unset",
    )
