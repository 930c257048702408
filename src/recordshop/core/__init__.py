"""
RecordShop Core
Configuration, logging and exception types shared by the API and store
"""

from .config import RecordShopSettings, get_settings
from .exceptions import (
    AlbumNotFoundError,
    MalformedBodyError,
    RecordShopError,
    StoreError,
)

__all__ = [
    "RecordShopSettings",
    "get_settings",
    "RecordShopError",
    "StoreError",
    "AlbumNotFoundError",
    "MalformedBodyError",
]
