"""OAuth2 Client Credentials token exchange.

This module provides :class:`TokenProvider`, which performs the
non-interactive Client Credentials grant (:rfc:`6749` section 4.4) against
the Twitch identity service, exchanging a ``client_id`` and
``client_secret`` for an access token.

Unlike a long-running client, gamers-console issues exactly one query per
process, so the token is fetched fresh on every invocation and never
cached. The reply's HTTP status is not inspected: any body that parses as a
token response is accepted.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx
from pydantic import ValidationError

from gamers_console.config import GRANT_TYPE
from gamers_console.exceptions import AuthError, ErrorKind
from gamers_console.models import ConsoleSettings, Credentials, TokenRequest, TokenResponse
from gamers_console.output import debug


class TokenProvider:
    """Exchange client credentials for a bearer token.

    Args:
        settings: Resolved settings; ``auth_url`` and ``timeout`` are used.
        transport: Optional httpx transport, e.g. an
            :class:`httpx.MockTransport` in tests.

    Example::

        provider = TokenProvider(settings)
        token = provider.fetch_token(credentials)
    """

    def __init__(
        self,
        settings: ConsoleSettings,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    def fetch_token(self, credentials: Credentials) -> str:
        """POST the credentials to the token endpoint and return the access token.

        Args:
            credentials: The client ID and secret loaded at startup.

        Returns:
            The ``access_token`` field of the reply, unvalidated.

        Raises:
            AuthError: ``CONSTRUCTION`` when the token URL is invalid,
                ``TRANSPORT`` when the request cannot be completed,
                ``MALFORMED_RESPONSE`` when the body is not a JSON token
                response.
        """
        token_request = TokenRequest(
            client_id=credentials.client_id,
            client_secret=credentials.client_secret,
            grant_type=GRANT_TYPE,
        )

        debug(f"Requesting access token from {self._settings.auth_url}")
        try:
            with httpx.Client(**self._client_kwargs()) as client:
                response = client.post(
                    self._settings.auth_url,
                    json=token_request.model_dump(),
                    headers={"Content-Type": "application/json"},
                )
        except httpx.InvalidURL as exc:
            raise AuthError(ErrorKind.CONSTRUCTION, str(exc) or type(exc).__name__) from exc
        except httpx.HTTPError as exc:
            raise AuthError(ErrorKind.TRANSPORT, str(exc) or type(exc).__name__) from exc

        debug(f"Token endpoint replied HTTP {response.status_code}")
        return self._parse_token(response.content).access_token

    def _client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        if self._settings.timeout is not None:
            kwargs["timeout"] = self._settings.timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return kwargs

    @staticmethod
    def _parse_token(body: bytes) -> TokenResponse:
        """Deserialise the reply body into a :class:`TokenResponse`."""
        try:
            return TokenResponse.model_validate_json(body)
        except ValidationError as exc:
            first = exc.errors()[0]
            raise AuthError(
                ErrorKind.MALFORMED_RESPONSE,
                f"invalid token response: {first['msg']}",
            ) from exc
