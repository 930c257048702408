"""
RecordShop Albums API Routes
REST endpoints for listing, creating and looking up albums
"""

import json
import math
from typing import Any, List

from fastapi import APIRouter, Depends, Request, status

from ...core.exceptions import AlbumNotFoundError, MalformedBodyError
from ...core.logging import store_logger
from ...store.album_store import AlbumStore
from ...store.models import Album
from ..dependencies import get_album_store

router = APIRouter()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON number")


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"{literal} is out of range for a JSON number")
    return value


def parse_album_body(raw: bytes) -> Album:
    """Decode a request body into an Album.

    Raises MalformedBodyError unless the body is a JSON object. Fields of the
    object are read leniently by the Album model.
    """
    try:
        payload = json.loads(
            raw,
            parse_float=_parse_finite_float,
            parse_constant=_reject_constant,
        )
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        raise MalformedBodyError(str(e)) from e

    if not isinstance(payload, dict):
        raise MalformedBodyError(f"expected a JSON object, got {type(payload).__name__}")

    return Album.model_validate(payload)


@router.get("", response_model=List[Album])
async def list_albums(store: AlbumStore = Depends(get_album_store)) -> List[Album]:
    """List every album in insertion order"""
    albums = store.list_albums()
    store_logger.log_albums_listed(len(albums))
    return albums


@router.post("", response_model=Album, status_code=status.HTTP_201_CREATED)
async def create_album(
    request: Request,
    store: AlbumStore = Depends(get_album_store),
) -> Album:
    """Append the album in the request body and echo it back"""
    raw = await request.body()
    try:
        album = parse_album_body(raw)
    except MalformedBodyError as e:
        store_logger.log_malformed_body(e.reason, len(raw))
        raise

    created = store.add_album(album)
    store_logger.log_album_created(created.id, created.title, len(store))
    return created


@router.get("/{album_id}", response_model=Album)
async def get_album(album_id: str, store: AlbumStore = Depends(get_album_store)) -> Album:
    """Get the first album with the given id"""
    try:
        return store.get_album(album_id)
    except AlbumNotFoundError:
        store_logger.log_album_missing(album_id)
        raise
