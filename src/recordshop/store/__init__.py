"""
RecordShop Store Module
Exports the album model and the in-memory album store
"""

from .album_store import AlbumStore
from .models import SEED_ALBUMS, Album

__all__ = [
    "Album",
    "AlbumStore",
    "SEED_ALBUMS",
]
