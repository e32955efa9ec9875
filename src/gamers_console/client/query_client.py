"""Authenticated query client for the IGDB v4 API.

This module provides :class:`QueryClient`, which sends a single query to a
named endpoint of the database API and returns the raw response text.

- **Auth injection** -- every request carries the ``Client-ID`` header and
  an ``Authorization: Bearer <token>`` header.
- **Pass-through** -- the query body is sent exactly as supplied and the
  reply is returned exactly as received. Neither side is parsed, and the
  HTTP status is not inspected, so an error reply from the API reaches the
  caller as ordinary result text.
- **Scoped resources** -- the response stream and the underlying
  connection are released on every exit path.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from gamers_console.config import AUTHORIZATION_HEADER, CLIENT_ID_HEADER
from gamers_console.exceptions import ErrorKind, QueryError
from gamers_console.models import ConsoleSettings, Query
from gamers_console.output import debug


class QueryClient:
    """Client for querying the database API with a bearer token.

    Args:
        client_id: The OAuth2 client identifier, sent as ``Client-ID``.
        access_token: Token obtained from
            :class:`~gamers_console.auth.TokenProvider`.
        settings: Resolved settings; ``base_url`` and ``timeout`` are used.
        transport: Optional httpx transport, e.g. an
            :class:`httpx.MockTransport` in tests.

    Example::

        client = QueryClient(credentials.client_id, token, settings)
        text = client.query("games", "fields name; limit 5;")
    """

    def __init__(
        self,
        client_id: str,
        access_token: str,
        settings: ConsoleSettings,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._client_id = client_id
        self._access_token = access_token
        self._settings = settings
        self._transport = transport

    def query(self, endpoint: str, body: str) -> str:
        """Send *body* to ``{base_url}/{endpoint}`` and return the reply text.

        Args:
            endpoint: Path segment naming the resource collection, e.g.
                ``"games"``.
            body: Query text in the API's own query language.

        Returns:
            The full response body decoded as text.

        Raises:
            QueryError: ``CONSTRUCTION`` when no valid request can be built,
                ``TRANSPORT`` when it cannot be sent, ``READ`` when the
                response body cannot be read.
        """
        return self.execute(Query(endpoint=endpoint, body=body))

    def execute(self, query: Query) -> str:
        """Run a prepared :class:`~gamers_console.models.Query`.

        See :meth:`query` for the error contract.
        """
        with httpx.Client(**self._client_kwargs()) as client:
            request = self._build_request(client, query)
            debug(f"POST {request.url}")

            try:
                response = client.send(request, stream=True)
            except httpx.HTTPError as exc:
                raise QueryError(ErrorKind.TRANSPORT, _describe(exc)) from exc

            try:
                text = self._read_response(response)
            finally:
                response.close()

        debug(f"Database API replied HTTP {response.status_code}")
        return text

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        if self._settings.timeout is not None:
            kwargs["timeout"] = self._settings.timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return kwargs

    def _build_request(self, client: httpx.Client, query: Query) -> httpx.Request:
        """Build the POST request with both auth headers and the raw body."""
        url = f"{self._settings.base_url}/{query.endpoint}"
        headers = {
            CLIENT_ID_HEADER: self._client_id,
            AUTHORIZATION_HEADER: f"Bearer {self._access_token}",
        }
        try:
            return client.build_request(
                "POST",
                url,
                content=query.body.encode("utf-8", "surrogateescape"),
                headers=headers,
            )
        except (httpx.InvalidURL, UnicodeEncodeError) as exc:
            raise QueryError(ErrorKind.CONSTRUCTION, _describe(exc)) from exc

    @staticmethod
    def _read_response(response: httpx.Response) -> str:
        """Read the entire streamed body and decode it without losing bytes.

        Bytes that are not valid UTF-8 (e.g. protobuf replies) survive as
        surrogate escapes and are restored on output.
        """
        try:
            response.read()
        except httpx.HTTPError as exc:
            raise QueryError(ErrorKind.READ, _describe(exc)) from exc
        return response.content.decode("utf-8", "surrogateescape")


def _describe(exc: Exception) -> str:
    """Return the exception message, or its type name when the message is empty."""
    return str(exc) or type(exc).__name__
