"""Shared fixtures: an in-memory redirecting site and a real local HTTP server."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import httpx
import pytest

from adapters.redirect_resolver import HttpxRedirectResolver
from core.config import AppSettings

BASE = "http://localhost:8000"


class EndlessBody(httpx.SyncByteStream):
    """Response body that never ends; records whether anyone iterated it."""

    def __init__(self) -> None:
        self.iterated = False

    def __iter__(self):
        self.iterated = True
        while True:
            yield b"x" * 65536


class RecordingSite:
    """Routes for `httpx.MockTransport`; remembers every request it saw."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.endless_body = EndlessBody()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path == "/a":
            return httpx.Response(302, headers={"Location": f"{BASE}/b"})
        if path == "/chain":
            return httpx.Response(301, headers={"Location": "/a"})
        if path == "/vhost":
            host = request.headers["host"]
            return httpx.Response(302, headers={"Location": f"http://{host}/landing"})
        if path == "/loop":
            return httpx.Response(302, headers={"Location": "/loop"})
        if path == "/gone":
            return httpx.Response(302, headers={"Location": f"{BASE}/missing"})
        if path == "/missing":
            return httpx.Response(404)
        if path == "/stream":
            return httpx.Response(302, headers={"Location": f"{BASE}/endless"})
        if path == "/endless":
            return httpx.Response(200, stream=self.endless_body)
        if path == "/down":
            raise httpx.ConnectError("[Errno 111] Connection refused", request=request)
        return httpx.Response(200, text="ok")


@pytest.fixture()
def site() -> RecordingSite:
    return RecordingSite()


@pytest.fixture()
def make_resolver(site: RecordingSite) -> Callable[..., HttpxRedirectResolver]:
    def _make(**settings: object) -> HttpxRedirectResolver:
        return HttpxRedirectResolver(
            settings=AppSettings(**settings),
            transport=httpx.MockTransport(site),
        )

    return _make


class _RedirectHandler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:  # noqa: N802
        port = self.server.server_address[1]
        origin = f"http://127.0.0.1:{port}"
        if self.path == "/a":
            self._redirect(f"{origin}/b")
        elif self.path == "/vhost":
            self._redirect(f"{origin}/landing/{self.headers['Host']}")
        elif self.path == "/loop":
            self._redirect(f"{origin}/loop")
        else:
            body = b"ok"
            self.send_response(200)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

    def _redirect(self, location: str) -> None:
        self.send_response(302)
        self.send_header("Location", location)
        self.send_header("Content-Length", "0")
        self.end_headers()

    def log_message(self, format: str, *args: object) -> None:  # noqa: A002
        pass


@pytest.fixture()
def live_server(monkeypatch: pytest.MonkeyPatch) -> Iterator[str]:
    """Local redirecting server; yields its origin, e.g. `http://127.0.0.1:54321`."""

    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(name, raising=False)

    server = ThreadingHTTPServer(("127.0.0.1", 0), _RedirectHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()
