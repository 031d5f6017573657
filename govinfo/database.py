"""
Database connectivity for the GovInfo API.

Only the engine and a liveness probe live here; the schema is managed
elsewhere. Engines are created lazily and never connect until first use.
"""

import logging
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import QueuePool, StaticPool

from .config import Config

logger = logging.getLogger(__name__)


def get_sqlalchemy_url(url: str) -> str:
    """
    Get SQLAlchemy-compatible PostgreSQL URL with psycopg2 driver.
    Heroku/Render style `postgres://` URLs are accepted too.
    """
    for prefix in ("postgresql://", "postgres://"):
        if url.startswith(prefix):
            return "postgresql+psycopg2://" + url[len(prefix):]
    return url


def get_pool_config(config: Config) -> dict:
    return {
        "pool_size": config.db_pool_size,
        "max_overflow": config.db_max_overflow,
        "pool_timeout": config.db_pool_timeout,
        "pool_recycle": config.db_pool_recycle,
        "pool_pre_ping": True,  # Test connection before using (prevents stale connections)
    }


def create_db_engine(config: Config) -> Optional[Engine]:
    """
    Return an engine for DATABASE_URL, or None when it is not set.

    A malformed URL or a missing driver is logged and also yields None;
    the API keeps serving and /ready reports the database as failed.
    """
    if not config.database_configured:
        logger.info("DATABASE_URL not set; database features disabled")
        return None

    url = get_sqlalchemy_url(config.db_url)
    try:
        if url.startswith("sqlite"):
            return create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_engine(url, poolclass=QueuePool, **get_pool_config(config))
    except (SQLAlchemyError, ImportError, ValueError) as e:
        logger.error(f"Cannot create database engine from DATABASE_URL: {e}")
        return None


def check_connection(engine: Engine) -> None:
    """Run a trivial query. Raises SQLAlchemyError when the database is unreachable."""
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
