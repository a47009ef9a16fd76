"""Live-console helpers for the E2E suite."""

from __future__ import annotations

import logging
import socket
import threading
import time
from contextlib import closing
from dataclasses import dataclass
from typing import cast

import requests
from werkzeug.serving import BaseWSGIServer, make_server

logger = logging.getLogger(__name__)


def is_console_ready(url: str, timeout: int = 2) -> bool:
    """Return True when the launch URL answers with a non-5xx status."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code < 500


def wait_for_console_ready(url: str, timeout: int = 60, interval: float = 1) -> None:
    """Poll the launch URL until it is ready or the timeout expires."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_console_ready(url):
            return
        time.sleep(interval)
    raise RuntimeError(f"Console at {url} not ready after {timeout}s")


def find_free_port() -> int:
    """Find an available port on localhost."""
    with closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind(("127.0.0.1", 0))
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        return cast(int, s.getsockname()[1])


@dataclass
class StubConsole:
    """A stub console served from a background thread."""

    url: str
    server: BaseWSGIServer
    thread: threading.Thread

    def shutdown(self) -> None:
        """Stop serving and wait for the server thread to exit."""
        self.server.shutdown()
        self.server.server_close()
        self.thread.join(timeout=5)
        logger.info("Stub console at %s stopped", self.url)


def start_stub_console(host: str = "127.0.0.1", port: int | None = None) -> StubConsole:
    """
    Serve a fresh stub console in a daemon thread.

    Args:
        host: Interface to bind.
        port: Port to bind; a free one is picked when omitted.

    Returns:
        Handle with the base URL; call ``shutdown()`` when done.
    """
    from console_app import create_app

    app = create_app("testing")
    server = make_server(host, port or find_free_port(), app, threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    url = f"http://{host}:{server.server_port}"
    wait_for_console_ready(f"{url}/kylin/api/health", timeout=10, interval=0.1)
    logger.info("Stub console serving at %s", url)
    return StubConsole(url=url, server=server, thread=thread)
