"""Shared HTTP client construction using httpx."""

import httpx

DEFAULT_USER_AGENT = "httpmd5/0.1"


def create_client(
    user_agent: str = DEFAULT_USER_AGENT,
    max_connections: int = 100,
    max_keepalive_connections: int = 20,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an async client suitable for sharing across fetch workers.

    The caller owns the client and is responsible for closing it.
    """
    limits = httpx.Limits(
        max_connections=max_connections,
        max_keepalive_connections=max_keepalive_connections,
    )
    return httpx.AsyncClient(
        limits=limits,
        headers={"User-Agent": user_agent},
        follow_redirects=True,
        transport=transport,
    )
