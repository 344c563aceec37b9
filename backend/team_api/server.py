"""Listener handle that serves the ASGI app with uvicorn under caller control."""

from __future__ import annotations

import socket
import threading
import time
from typing import Optional

import uvicorn
from fastapi import FastAPI

from .config import DEFAULT_HOST, DEFAULT_PORT, Settings, get_settings
from .errors import ServerStartError, ServerStateError
from .logging_utils import configure_logging, get_logger
from .main import create_app

logger = get_logger("server")

_WILDCARD_HOSTS = {"": "127.0.0.1", "0.0.0.0": "127.0.0.1", "::": "::1"}


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind a TCP socket the way uvicorn does, letting ``OSError`` propagate."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family=family, type=socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    return sock


class ApiServer:
    """Own one listening socket and serve an ASGI app on it.

    Nothing is bound until :meth:`start` (background thread) or
    :meth:`serve` (foreground) is called.
    """

    def __init__(
        self,
        app: FastAPI,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        *,
        startup_timeout: float = 5.0,
    ) -> None:
        self.app = app
        self.host = host
        self.port = port
        self.startup_timeout = startup_timeout
        self._lock = threading.Lock()
        self._server: Optional[uvicorn.Server] = None
        self._thread: Optional[threading.Thread] = None
        self._socket: Optional[socket.socket] = None

    @classmethod
    def from_settings(cls, app: FastAPI, settings: Optional[Settings] = None) -> "ApiServer":
        """Build a handle bound to the configured host and port."""
        settings = settings or get_settings()
        return cls(app, host=settings.host, port=settings.port)

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def url(self) -> str:
        host = _WILDCARD_HOSTS.get(self.host, self.host)
        if ":" in host:
            host = f"[{host}]"
        return f"http://{host}:{self.port}"

    def _config(self) -> uvicorn.Config:
        return uvicorn.Config(
            self.app,
            log_level=logger.getEffectiveLevel(),
            access_log=False,
        )

    def start(self, port: Optional[int] = None) -> int:
        """Bind and serve on a background thread; return the bound port."""
        with self._lock:
            if self.is_running:
                raise ServerStateError(f"Server already running on {self.url}.")
            # The serving thread may have exited on its own since the last start.
            self._release()

            sock = bind_socket(self.host, self.port if port is None else port)
            self.port = sock.getsockname()[1]
            server = uvicorn.Server(self._config())
            thread = threading.Thread(
                target=server.run,
                kwargs={"sockets": [sock]},
                name=f"team-api-{self.port}",
                daemon=True,
            )
            thread.start()

            deadline = time.monotonic() + self.startup_timeout
            while not server.started:
                if not thread.is_alive():
                    sock.close()
                    raise ServerStartError("Server thread exited before accepting connections.")
                if time.monotonic() >= deadline:
                    server.should_exit = True
                    thread.join()
                    sock.close()
                    raise ServerStartError(
                        f"Server did not start within {self.startup_timeout} seconds."
                    )
                time.sleep(0.01)

            self._server, self._thread, self._socket = server, thread, sock
            logger.info("Server running on port %s", self.port)
            return self.port

    def stop(self) -> None:
        """Signal the server to exit and release the socket."""
        with self._lock:
            if self._server is None:
                return
            self._release()
            logger.info("Server on port %s stopped", self.port)

    def _release(self) -> None:
        if self._server is not None:
            self._server.should_exit = True
        if self._thread is not None:
            self._thread.join()
        if self._socket is not None:
            self._socket.close()
        self._server = self._thread = self._socket = None

    def serve(self) -> None:
        """Bind and serve in the foreground until a shutdown signal arrives."""
        sock = bind_socket(self.host, self.port)
        self.port = sock.getsockname()[1]
        logger.info("Server running on port %s", self.port)
        try:
            uvicorn.Server(self._config()).run(sockets=[sock])
        finally:
            sock.close()

    def __enter__(self) -> "ApiServer":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


def main() -> None:
    """Process entry point: load settings and serve until interrupted."""
    configure_logging()
    ApiServer.from_settings(create_app()).serve()


if __name__ == "__main__":
    main()
