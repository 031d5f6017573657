"""
Environment-based configuration for the GovInfo API.

Settings are resolved once at process start. A local `.env` file is loaded
first (dev only); anything already set in the environment wins.
"""

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Tuple

from dotenv import load_dotenv

DEFAULT_ENV_FILE = ".env"
DEFAULT_PORT = "8080"
DEFAULT_HOST = ""  # all interfaces, IPv6 included where the OS supports it
DEFAULT_LOG_LEVEL = "INFO"

# Connection pooling defaults
DEFAULT_POOL_SIZE = 5
DEFAULT_MAX_OVERFLOW = 10
DEFAULT_POOL_TIMEOUT = 30
DEFAULT_POOL_RECYCLE = 3600


@dataclass(frozen=True)
class Config:
    port: str = DEFAULT_PORT
    db_url: str = field(default="", repr=False)
    twilio_sid: str = ""
    twilio_token: str = field(default="", repr=False)
    host: str = DEFAULT_HOST
    log_level: str = DEFAULT_LOG_LEVEL
    db_pool_size: int = DEFAULT_POOL_SIZE
    db_max_overflow: int = DEFAULT_MAX_OVERFLOW
    db_pool_timeout: int = DEFAULT_POOL_TIMEOUT
    db_pool_recycle: int = DEFAULT_POOL_RECYCLE
    # (key, raw value) pairs that were ignored; reported once logging is up
    ignored_settings: Tuple[Tuple[str, str], ...] = field(default=(), repr=False)

    @property
    def address(self) -> str:
        if ":" in self.host:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"

    @property
    def database_configured(self) -> bool:
        return bool(self.db_url)

    @property
    def twilio_configured(self) -> bool:
        return bool(self.twilio_sid and self.twilio_token)


def _get_env(environ: Mapping[str, str], key: str, fallback: str) -> str:
    # Empty counts as unset
    val = environ.get(key, "")
    if val == "":
        return fallback
    return val


def _get_int(environ: Mapping[str, str], key: str, fallback: int, ignored: List[Tuple[str, str]]) -> int:
    raw = environ.get(key, "")
    if raw == "":
        return fallback
    try:
        return int(raw)
    except ValueError:
        ignored.append((key, raw))
        return fallback


def load_config(env_file: str = DEFAULT_ENV_FILE, environ: Optional[Mapping[str, str]] = None) -> Config:
    """
    Build the process configuration.

    When `environ` is None the process environment is used, after a
    best-effort load of `env_file` (a missing file is not an error).
    An explicit mapping is read as-is and no file is loaded.

    Never raises: unset values fall back to defaults or empty strings.
    Non-integer pool settings fall back too and are listed in
    `ignored_settings`. Nothing is logged here since logging is
    configured from the result.
    """
    if environ is None:
        load_dotenv(env_file)
        environ = os.environ

    ignored: List[Tuple[str, str]] = []
    return Config(
        port=_get_env(environ, "PORT", DEFAULT_PORT),
        db_url=environ.get("DATABASE_URL", ""),
        twilio_sid=environ.get("TWILIO_SID", ""),
        twilio_token=environ.get("TWILIO_TOKEN", ""),
        host=_get_env(environ, "HOST", DEFAULT_HOST),
        log_level=_get_env(environ, "LOG_LEVEL", DEFAULT_LOG_LEVEL),
        db_pool_size=_get_int(environ, "DB_POOL_SIZE", DEFAULT_POOL_SIZE, ignored),
        db_max_overflow=_get_int(environ, "DB_MAX_OVERFLOW", DEFAULT_MAX_OVERFLOW, ignored),
        db_pool_timeout=_get_int(environ, "DB_POOL_TIMEOUT", DEFAULT_POOL_TIMEOUT, ignored),
        db_pool_recycle=_get_int(environ, "DB_POOL_RECYCLE", DEFAULT_POOL_RECYCLE, ignored),
        ignored_settings=tuple(ignored),
    )


if __name__ == "__main__":
    # Debug: print resolved configuration (secrets are excluded from repr)
    cfg = load_config()
    print(cfg)
    print(f"Address: {cfg.address}")
    print(f"Database configured: {cfg.database_configured}")
    print(f"Twilio configured: {cfg.twilio_configured}")
    for key, raw in cfg.ignored_settings:
        print(f"Ignored: {key}={raw!r}")
