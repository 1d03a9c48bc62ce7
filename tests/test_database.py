import logging

import pytest
from sqlalchemy import inspect, select
from sqlalchemy.orm import Session

from skeleton.config import load_config
from skeleton.database import Database, data_seeds, new_database, sqlite_url
from skeleton.models import Example


def make_config(tmp_path, **overrides):
    environ = {
        "DB_SQLITE_PATH": str(tmp_path / "db.sqlite"),
        "ENVIRONMENT": "production",
        "ENABLE_MIGRATION": "true",
    }
    environ.update(overrides)
    return load_config(environ=environ)


@pytest.fixture
def logger():
    return logging.getLogger("db-test")


def test_sqlite_url_with_path():
    config = load_config(environ={"DB_SQLITE_PATH": "./db.sqlite"})
    assert sqlite_url(config) == "sqlite:///file:./db.sqlite?cache=shared&uri=true"


def test_sqlite_url_in_memory():
    config = load_config(environ={"DB_SQLITE_PATH": ""})
    assert sqlite_url(config) == "sqlite:///file::memory:?cache=shared&uri=true"


def test_no_default_seeds():
    assert data_seeds() == []


def test_new_database_creates_tables(tmp_path, logger, caplog):
    caplog.set_level(logging.INFO)
    engine = new_database(make_config(tmp_path), logger)
    try:
        assert inspect(engine).has_table("examples")
        with Session(engine) as session:
            session.add(Example(name="Contoh", price=2500))
            session.commit()
            assert session.scalars(select(Example.name)).all() == ["Contoh"]
    finally:
        engine.dispose()
    messages = [r.getMessage() for r in caplog.records]
    assert "AUTOMIGRATE START" in messages
    assert "Start database connection to sqlite" in messages


def test_migration_disabled(tmp_path, logger, caplog):
    caplog.set_level(logging.INFO)
    engine = new_database(make_config(tmp_path, ENABLE_MIGRATION="false"), logger)
    try:
        assert not inspect(engine).has_table("examples")
    finally:
        engine.dispose()
    assert "MIGRATION IS DISABLED" in [r.getMessage() for r in caplog.records]


def test_migration_connection_is_not_announced(tmp_path, logger, caplog):
    caplog.set_level(logging.INFO)
    engine = Database(make_config(tmp_path), logger).connect("migration")
    engine.dispose()
    assert not any("Start database connection" in r.getMessage() for r in caplog.records)


def test_seeds_skip_conflicts(tmp_path, logger):
    database = Database(make_config(tmp_path), logger)
    database.seeds = [
        [Example(id=1, name="first", price=1.0), Example(id=1, name="dup", price=2.0)],
        [Example(name="second", price=3.0)],
    ]
    database.migrate()
    engine = database.connect()
    try:
        with Session(engine) as session:
            rows = session.scalars(select(Example).order_by(Example.id)).all()
            assert [(r.id, r.name) for r in rows] == [(1, "first"), (2, "second")]
            assert rows[0].created_at is not None
    finally:
        engine.dispose()


def test_migration_is_idempotent(tmp_path, logger):
    config = make_config(tmp_path)
    database = Database(config, logger)
    database.seeds = [[Example(id=1, name="only", price=1.0)]]
    database.migrate()
    database.migrate()
    engine = database.connect()
    try:
        with Session(engine) as session:
            assert session.scalars(select(Example.name)).all() == ["only"]
    finally:
        engine.dispose()