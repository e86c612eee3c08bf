"""Song record mapped onto the ``songs`` table."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import ClassVar, Self

from song_orm import database

log = getLogger(__name__)


class SongAlreadyPersistedError(RuntimeError):
    """Raised when saving a song that already has a row id."""


@dataclass(eq=False, kw_only=True)
class Song:
    TABLE_NAME: ClassVar[str] = "songs"

    name: str
    album: str
    _id: int | None = field(default=None, init=False, repr=False)

    @property
    def id(self) -> int | None:
        return self._id

    @classmethod
    def ensure_table(cls) -> None:
        """Create the backing table unless it already exists."""

        conn = database.connection()
        conn.exec_driver_sql(
            f"CREATE TABLE IF NOT EXISTS {cls.TABLE_NAME} ("
            "id INTEGER PRIMARY KEY, name TEXT, album TEXT)"
        )
        conn.commit()
        log.debug("Ensured table %s", cls.TABLE_NAME)

    create_table = ensure_table

    @classmethod
    def create(cls, *, name: str, album: str) -> Self:
        return cls(name=name, album=album).save()

    def save(self) -> Self:
        """Insert this song as a new row and take over its generated id."""

        if self.id is not None:
            raise SongAlreadyPersistedError(f"Song already saved with id={self.id}")

        conn = database.connection()
        try:
            conn.exec_driver_sql(
                f"INSERT INTO {self.TABLE_NAME} (name, album) VALUES (?, ?)",
                (self.name, self.album),
            )
            row_id = conn.exec_driver_sql("SELECT last_insert_rowid()").scalar_one()
        except Exception:
            conn.rollback()
            raise
        conn.commit()

        self._id = row_id
        log.info("Saved song %r (%r) as id=%s", self.name, self.album, row_id)
        return self
