"""
RecordShop Exceptions
Error types raised by the store and the request handlers
"""


class RecordShopError(Exception):
    """Base RecordShop error"""
    pass


class StoreError(RecordShopError):
    """Base album store error"""
    pass


class AlbumNotFoundError(StoreError):
    """No album with the requested id"""

    def __init__(self, album_id: str):
        self.album_id = album_id
        super().__init__(f"Album with id {album_id!r} not found")


class MalformedBodyError(RecordShopError):
    """Request body is not a JSON object"""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed request body: {reason}")
