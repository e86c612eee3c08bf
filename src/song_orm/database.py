"""Process-wide SQLAlchemy connection shared by mapped records."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from sqlalchemy import create_engine

from song_orm.config import database_uri as configured_database_uri

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

log = getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the database handle is used before initialisation."""


@dataclass(slots=True)
class _DatabaseState:
    engine: Engine | None = None
    _connection: Connection | None = None

    @property
    def connection(self) -> Connection:
        if self._connection is None:
            raise StartupError(
                "Database not initialised. Call song_orm.database.startup() "
                "before persisting records."
            )
        return self._connection

    def open(self, engine: Engine) -> None:
        try:
            conn = engine.connect()
        except Exception:
            engine.dispose()
            raise
        self.engine = engine
        self._connection = conn

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
        if self.engine is not None:
            self.engine.dispose()
        self._connection = None
        self.engine = None


_STATE = _DatabaseState()


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Create the engine and open the single connection records talk to.

    ``last_insert_rowid()`` only reports inserts made on the same connection,
    so one connection is held open for the whole process.
    """

    if _STATE.engine is not None:
        if not force:
            raise StartupError("Database already initialised. Pass force=True to reconfigure.")
        _STATE.close()

    resolved_engine = engine or create_engine(
        database_uri or configured_database_uri(), future=True
    )
    _STATE.open(resolved_engine)
    log.info("Opened database connection: %s", resolved_engine.url)


def connection() -> Connection:
    """Return the open connection, raising ``StartupError`` if there is none."""

    return _STATE.connection


def configured_engine() -> Engine | None:
    return _STATE.engine


def is_started() -> bool:
    return _STATE.engine is not None


def shutdown() -> None:
    """Close the connection, dispose the engine and reset state."""

    if _STATE.engine is not None:
        log.info("Closing database connection: %s", _STATE.engine.url)
    _STATE.close()
