from __future__ import annotations

import os
from pathlib import Path
from typing import Final

DEFAULT_DB_PATH: Final[Path] = Path("db") / "songs.db"


def database_uri() -> str:
    """Return ``DATABASE_URI`` if set, else a SQLite file under ``./db``.

    The directory of the default file is created on demand.
    """

    env_uri = os.getenv("DATABASE_URI")
    if env_uri:
        return env_uri
    path = DEFAULT_DB_PATH.resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite+pysqlite:///{path}"
