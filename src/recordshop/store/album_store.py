"""
Album Store
Ordered, append-only in-memory album collection
"""

import threading
from typing import Iterable, List, Optional

from ..core.exceptions import AlbumNotFoundError
from .models import SEED_ALBUMS, Album


class AlbumStore:
    """In-memory album store owned by one application instance.

    Albums keep insertion order and are never removed or replaced. Ids are
    not unique; lookups return the first match. Every operation holds the
    store lock, so concurrent appends are totally ordered.
    """

    def __init__(self, albums: Optional[Iterable[Album]] = None) -> None:
        self._lock = threading.Lock()
        self._albums: List[Album] = [album.model_copy() for album in albums or ()]

    @classmethod
    def seeded(cls) -> "AlbumStore":
        """Create a store holding the three catalogue seed albums"""
        return cls(SEED_ALBUMS)

    def list_albums(self) -> List[Album]:
        """Snapshot of all albums in insertion order"""
        with self._lock:
            return [album.model_copy() for album in self._albums]

    def add_album(self, album: Album) -> Album:
        """Append an album to the end of the store"""
        stored = album.model_copy()
        with self._lock:
            self._albums.append(stored)
        return stored.model_copy()

    def get_album(self, album_id: str) -> Album:
        """Get the first album with the given id or raise AlbumNotFoundError"""
        with self._lock:
            for album in self._albums:
                if album.id == album_id:
                    return album.model_copy()
        raise AlbumNotFoundError(album_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._albums)
