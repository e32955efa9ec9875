"""Authentication against the OAuth2 client-credentials provider.

Classes:
    :class:`TokenProvider` -- exchanges a client ID and secret for a
    bearer token with a single JSON POST.

Example::

    from gamers_console.auth import TokenProvider

    token = TokenProvider(settings).fetch_token(credentials)
"""

from gamers_console.auth.token_provider import TokenProvider

__all__ = ["TokenProvider"]
