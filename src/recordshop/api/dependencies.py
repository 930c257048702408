"""
RecordShop API Dependencies
Resolves per-application objects for route handlers via Depends()
"""

from fastapi import Request

from ..core.config import RecordShopSettings
from ..store.album_store import AlbumStore


def get_album_store(request: Request) -> AlbumStore:
    """Album store owned by the running application"""
    return request.app.state.album_store


def get_app_settings(request: Request) -> RecordShopSettings:
    """Settings the running application was built with"""
    return request.app.state.settings
