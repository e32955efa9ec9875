"""gamers-console -- query the IGDB from the command line.

The package authenticates against the Twitch OAuth2 client-credentials
endpoint, then forwards one query to an endpoint of the IGDB v4 API and
prints the raw response body.

Typical usage::

    export CLIENT_ID=... CLIENT_SECRET=...
    gamers-console games "fields name; limit 5;"

Modules:
    app: Typer application and CLI entry point.
    auth: Token exchange against the OAuth2 provider.
    client: Authenticated query client for the database API.
    config: Constants, credential loading, and settings resolution.
    models: Pydantic models for the wire formats and settings.
    exceptions: Typed error hierarchy with exit-code mapping.
    exit_codes: Numeric process exit codes.
    output: stdout/stderr formatting with Rich support.
"""

__version__ = "0.1.0"
