from __future__ import annotations

from importlib import metadata

from song_orm.song import Song, SongAlreadyPersistedError

try:
    __version__ = metadata.version("song-orm")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = ["Song", "SongAlreadyPersistedError"]
