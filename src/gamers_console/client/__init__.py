"""HTTP client for the database API.

Classes:
    :class:`QueryClient` -- sends one authenticated POST to a named
    endpoint and returns the raw response text.

Example::

    from gamers_console.client import QueryClient

    text = QueryClient(client_id, token, settings).query("games", "fields name;")
"""

from gamers_console.client.query_client import QueryClient

__all__ = ["QueryClient"]
