"""Database engine set-up, schema migration and seeding."""

from __future__ import annotations

import logging
import time
from typing import Any

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import QueuePool

from skeleton.config import Config
from skeleton.models import Base, Example

ENTITY_MIGRATIONS: list[type[Base]] = [
    # entities whose tables are created on start-up
    Example,
]

_SEED_BATCH = 100
_DEFAULT_POOL_SIZE = 5


def data_seeds() -> list[list[Any]]:
    """Rows inserted after migration, one list of entities per batch."""
    return []


def sqlite_url(config: Config) -> str:
    """SQLAlchemy URL for the configured SQLite database (shared in-memory when unset)."""
    path = config.get_string("DB_SQLITE_PATH")
    target = path if path else ":memory:"
    return f"sqlite:///file:{target}?cache=shared&uri=true"


def _rows(batch: list[Any]) -> list[dict[str, Any]]:
    rows = []
    for entity in batch:
        touch = getattr(entity, "touch", None)
        if callable(touch):
            touch()
        mapper = inspect(type(entity))
        rows.append({prop.columns[0].key: getattr(entity, prop.key) for prop in mapper.column_attrs})
    return rows


class Database:
    """Opens engines and migrates the schema according to configuration."""

    def __init__(self, config: Config, logger: logging.Logger) -> None:
        self.config = config
        self.logger = logger
        self.entities: list[type[Base]] = list(ENTITY_MIGRATIONS)
        self.seeds: list[list[Any]] = data_seeds()

    def connect(self, mode: str | None = None) -> Engine:
        """Create an engine and check that it connects."""
        environment = self.config.get_string("ENVIRONMENT")
        echo = environment not in ("staging", "production")

        pool_size = self.config.get_int("DB_MAX_IDLE_CONNS")
        if pool_size <= 0:
            pool_size = _DEFAULT_POOL_SIZE
        max_open = self.config.get_int("DB_MAX_OPEN_CONNS")
        max_overflow = max(max_open - pool_size, 0) if max_open > 0 else -1
        lifetime = self.config.get_int("DB_MAX_LIFE_TIME")

        engine = create_engine(
            sqlite_url(self.config),
            echo=echo,
            poolclass=QueuePool,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_recycle=lifetime if lifetime > 0 else -1,
            connect_args={"check_same_thread": False},
        )
        with engine.connect():
            pass

        if mode != "migration":
            self.logger.info(
                "Start database connection to %s", self.config.get_string("DB_DRIVER")
            )
        return engine

    def migrate(self) -> None:
        """Create the entity tables and insert the seed rows, when ENABLE_MIGRATION is on."""
        if not self.config.get_bool("ENABLE_MIGRATION"):
            self.logger.info("MIGRATION IS DISABLED")
            return

        engine = self.connect("migration")
        try:
            if not self.entities:
                return
            self.logger.info("AUTOMIGRATE START")
            start = time.perf_counter()
            Base.metadata.create_all(engine, tables=[e.__table__ for e in self.entities])
            self.logger.info("AUTOMIGRATE FINISH IN : %.3f s", time.perf_counter() - start)

            if self.seeds:
                self.logger.info("AUTO SEEDER START")
                start = time.perf_counter()
                for batch in self.seeds:
                    self._seed(engine, batch)
                self.logger.info("AUTO SEEDER FINISH IN : %.3f s", time.perf_counter() - start)

            with engine.begin() as conn:
                conn.execute(text('DROP TABLE IF EXISTS "schema_migration"'))
        finally:
            engine.dispose()

    def _seed(self, engine: Engine, batch: list[Any]) -> None:
        if not batch:
            return
        table = type(batch[0]).__table__
        rows = _rows(batch)
        statement = insert(table).on_conflict_do_nothing()
        try:
            with engine.begin() as conn:
                for start in range(0, len(rows), _SEED_BATCH):
                    conn.execute(statement, rows[start : start + _SEED_BATCH])
        except SQLAlchemyError as exc:
            self.logger.error("Seeding %s failed: %s", table.name, exc)


def new_database(config: Config, logger: logging.Logger) -> Engine:
    """Migrate the schema, then return a connected engine."""
    database = Database(config, logger)
    database.migrate()
    return database.connect()