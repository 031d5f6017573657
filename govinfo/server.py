"""
Blocking HTTP server runner.

The listening socket is bound here rather than inside uvicorn so that a
bind failure surfaces as an exception the caller can handle.
"""

import logging
import socket
from typing import Optional

import uvicorn
from sqlalchemy.engine import Engine

from .config import Config
from .main import create_app


class ServerStartupError(Exception):
    """The listener could not be started (bad port, address in use, ...)."""


def bind_socket(config: Config) -> socket.socket:
    """
    Bind and listen on config.host:config.port.

    An empty host (or `::`) means every interface; IPv4 and IPv6 share one
    dual-stack socket when the OS supports it.
    """
    try:
        port = int(config.port)
    except ValueError:
        raise ServerStartupError(f"Invalid port: {config.port!r}")
    if not 0 <= port <= 65535:
        raise ServerStartupError(f"Port out of range: {port}")

    host = config.host
    try:
        if host in ("", "::") and socket.has_dualstack_ipv6():
            # All interfaces, IPv4 and IPv6 on one socket
            sock = socket.create_server(
                ("::", port),
                family=socket.AF_INET6,
                backlog=socket.SOMAXCONN,
                dualstack_ipv6=True,
            )
        else:
            family = socket.AF_INET6 if ":" in host else socket.AF_INET
            sock = socket.create_server((host, port), family=family, backlog=socket.SOMAXCONN)
    except OSError as e:
        raise ServerStartupError(f"Cannot listen on {config.address}: {e}") from e
    sock.set_inheritable(True)
    return sock


def start(config: Config, logger: logging.Logger, engine: Optional[Engine] = None) -> None:
    """
    Serve the API until the process is stopped. Blocks.

    Raises ServerStartupError when the listener cannot be bound.
    """
    app = create_app(config, logger, engine)

    logger.info(f"Server listening on {config.address}")
    sock = bind_socket(config)

    server = uvicorn.Server(uvicorn.Config(
        app=app,
        log_level=logger.getEffectiveLevel(),
        lifespan="on",
    ))
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()

    if not server.started:
        raise ServerStartupError("Server exited before startup completed")
