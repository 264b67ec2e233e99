"""Shared fixtures: an in-process HTTP server built on httpx.MockTransport."""

import hashlib

import httpx
import pytest

from httpmd5.core import create_client

BASE_URL = "http://testserver"
UNREACHABLE_HOST = "www.not-existing-host-anywhere"


def make_md5(s: str) -> str:
    return hashlib.md5(s.encode()).hexdigest()


def echo_handler(request: httpx.Request) -> httpx.Response:
    """Echo the request path for / and /path*, 404 for everything else.

    Like the real transport, non-http(s) or host-less URLs are rejected.
    """
    if request.url.scheme not in ("http", "https") or not request.url.host:
        raise httpx.UnsupportedProtocol(f"unsupported URL: {request.url}", request=request)
    if request.url.host == UNREACHABLE_HOST:
        raise httpx.ConnectError("Name or service not known", request=request)

    path = request.url.raw_path.decode()
    if path == "/" or path.startswith("/path"):
        return httpx.Response(200, content=path.encode())
    return httpx.Response(404, content=b"not found")


@pytest.fixture
def transport():
    return httpx.MockTransport(echo_handler)


@pytest.fixture
async def client(transport):
    async with create_client(transport=transport) as c:
        yield c
