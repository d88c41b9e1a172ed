"""Helpers for running a service app on a real port during tests."""

from __future__ import annotations

import socket
import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager

import httpx
import uvicorn
from fastapi import FastAPI


class ServiceRunner:
    """Runs an ASGI app under uvicorn in a background thread.

    The listening socket is bound to an OS-assigned port before uvicorn
    starts, so the URL is known up front and no other test can take it.
    """

    def __init__(self, app: FastAPI, host: str = "127.0.0.1"):
        self.app = app
        self.host = host
        self._socket: socket.socket | None = None
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None

    @property
    def port(self) -> int:
        if self._socket is None:
            raise RuntimeError("service is not running")
        return self._socket.getsockname()[1]

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def start(self, timeout: float = 10.0) -> None:
        """Start the server and wait until it answers on /health/live."""
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((self.host, 0))
        self._socket = sock

        config = uvicorn.Config(self.app, log_config=None, lifespan="on")
        self._server = uvicorn.Server(config)
        self._thread = threading.Thread(
            target=self._server.run, kwargs={"sockets": [sock]}, daemon=True
        )
        self._thread.start()

        if not self.wait_until_live(timeout):
            self.stop()
            raise RuntimeError(f"service did not start within {timeout}s")

    def wait_until_live(self, timeout: float) -> bool:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if self._server is not None and self._server.started:
                try:
                    response = httpx.get(f"{self.url}/health/live", timeout=1.0)
                    if response.status_code == 200:
                        return True
                except httpx.TransportError:
                    pass
            if self._thread is not None and not self._thread.is_alive():
                return False
            time.sleep(0.05)
        return False

    def stop(self, timeout: float = 10.0) -> None:
        if self._server is not None:
            self._server.should_exit = True
        if self._thread is not None:
            self._thread.join(timeout)
        if self._socket is not None:
            self._socket.close()
        self._socket = None
        self._server = None
        self._thread = None


@contextmanager
def run_service(app: FastAPI) -> Iterator[ServiceRunner]:
    """Serve ``app`` on a free local port for the duration of the block."""
    runner = ServiceRunner(app)
    runner.start()
    try:
        yield runner
    finally:
        runner.stop()
