"""Configuration values: built-in defaults overridden by the process environment."""

from __future__ import annotations

import os
from collections.abc import Mapping

_APP_DEFAULTS = dict(
    APP_NAME="skeleton",
    PORT="9009",
    ENVIRONMENT="development",
    TZ="Asia/Jakarta",
    MAX_BODY_LIMIT="10",  # megabytes
    AES="placeholder",
    SALT="SALT",
    LIMITER_MAX_HIT="60",
    LIMITER_DURATION="5",
)

_TELEGRAM_DEFAULTS = dict(
    ENABLE_TELEGRAM_LOG="false",
    TELEGRAM_BOT_ENDPOINT="https://api.telegram.org/bot",
    TELEGRAM_BOT_TOKEN="",
    TELEGRAM_BOT_CHATID="",
)

# Timeouts and lifetimes are in seconds; a zero limit means unlimited.
_DATABASE_DEFAULTS = dict(
    ENABLE_MIGRATION="true",
    DB_DRIVER="sqlite",
    DB_HOST="localhost",
    DB_PORT="5432",
    DB_USER="postgres",
    DB_PASS="password",
    DB_NAME="postgres",
    DB_TABLE_PREFIX="",
    DB_SQLITE_PATH="./db.sqlite",
    DB_CONNECTION_TIMEOUT="5",
    DB_STATEMENT_TIMEOUT="30",
    DB_MAX_LIFE_TIME="3600",
    DB_MAX_IDLE_TIME="300",
    DB_MAX_IDLE_CONNS="2",
    DB_MAX_OPEN_CONNS="3",
    DB_LOG_NOT_FOUND="false",
)

_LOG_DEFAULTS = dict(
    LOG_LEVEL="debug",
    LOG_MAX_SIZE="50",
    LOG_PATH="./logs/app.log",
    TELEGRAM_BOT_LOG_PATH="./logs/telegram.log",
)

ENVIRONMENT: dict[str, str] = {
    **_APP_DEFAULTS,
    **_TELEGRAM_DEFAULTS,
    **_DATABASE_DEFAULTS,
    **_LOG_DEFAULTS,
}

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})


class Config:
    """Read-only key/value settings with typed accessors."""

    def __init__(
        self,
        defaults: Mapping[str, str] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        if environ is None:
            environ = os.environ
        self._values: dict[str, str] = {**(defaults or {}), **environ}

    def get(self, key: str) -> str | None:
        """Return the raw value of ``key`` or None when it is not set."""
        return self._values.get(key)

    def get_string(self, key: str) -> str:
        """Return the value of ``key`` or an empty string."""
        value = self._values.get(key)
        return "" if value is None else str(value)

    def get_int(self, key: str) -> int:
        """Return ``key`` as an integer, 0 when missing or not a number."""
        try:
            return int(self.get_string(key).strip())
        except ValueError:
            return 0

    def get_bool(self, key: str) -> bool:
        """Return ``key`` as a boolean, False when missing or unrecognised."""
        return self.get_string(key).strip() in _TRUE_VALUES

    def __contains__(self, key: object) -> bool:
        return key in self._values


def load_config(
    defaults: Mapping[str, str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> Config:
    """Build a Config from ``defaults`` (the built-in table by default) and the environment."""
    return Config(ENVIRONMENT if defaults is None else defaults, environ)