import logging
import os
import socket

import pytest
from fastapi.testclient import TestClient

from govinfo.config import Config
from govinfo.main import create_app

CONFIG_VARS = [
    "PORT", "HOST", "DATABASE_URL", "TWILIO_SID", "TWILIO_TOKEN", "LOG_LEVEL",
    "DB_POOL_SIZE", "DB_MAX_OVERFLOW", "DB_POOL_TIMEOUT", "DB_POOL_RECYCLE",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Swap in a copy of os.environ without any GovInfo variables.

    python-dotenv writes straight into os.environ, so a copy keeps
    values loaded from .env files out of other tests.
    """
    env = {k: v for k, v in os.environ.items() if k not in CONFIG_VARS}
    monkeypatch.setattr(os, "environ", env)
    return env


@pytest.fixture
def logger():
    return logging.getLogger("govinfo.tests")


@pytest.fixture
def client(logger):
    app = create_app(Config(), logger)
    return TestClient(app)


@pytest.fixture
def occupied_port():
    """A port with a live listener on 127.0.0.1."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(1)
    yield sock.getsockname()[1]
    sock.close()
