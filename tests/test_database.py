import logging

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import QueuePool, StaticPool

from govinfo.config import Config
from govinfo.database import check_connection, create_db_engine, get_sqlalchemy_url


@pytest.mark.parametrize("url,expected", [
    ("postgresql://u:p@db:5432/x", "postgresql+psycopg2://u:p@db:5432/x"),
    ("postgres://u:p@db:5432/x?sslmode=disable", "postgresql+psycopg2://u:p@db:5432/x?sslmode=disable"),
    ("postgresql+psycopg2://db/x", "postgresql+psycopg2://db/x"),
    ("sqlite:///govinfo.db", "sqlite:///govinfo.db"),
])
def test_get_sqlalchemy_url(url, expected):
    assert get_sqlalchemy_url(url) == expected


def test_no_engine_without_database_url():
    assert create_db_engine(Config()) is None


def test_postgres_engine_uses_pool_settings():
    config = Config(db_url="postgres://u:p@localhost:1/govinfo", db_pool_size=3, db_max_overflow=4)
    engine = create_db_engine(config)

    assert engine.dialect.name == "postgresql"
    assert engine.dialect.driver == "psycopg2"
    assert isinstance(engine.pool, QueuePool)
    assert engine.pool.size() == 3
    engine.dispose()


def test_sqlite_engine_connects():
    engine = create_db_engine(Config(db_url="sqlite://"))
    assert isinstance(engine.pool, StaticPool)
    check_connection(engine)
    engine.dispose()


def test_check_connection_raises_when_unreachable(tmp_path):
    engine = create_db_engine(Config(db_url=f"sqlite:///{tmp_path / 'nope' / 'x.db'}"))
    with pytest.raises(OperationalError):
        check_connection(engine)


@pytest.mark.parametrize("url", ["not a url", "nosuchdialect://u:p@db/x"])
def test_bad_database_url_yields_no_engine(url, caplog):
    caplog.set_level(logging.ERROR, logger="govinfo.database")

    assert create_db_engine(Config(db_url=url)) is None
    assert any("Cannot create database engine" in r.getMessage() for r in caplog.records)
