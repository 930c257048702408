"""
RecordShop - Record Album Catalogue Service
FastAPI backend serving an in-memory album store
"""

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import structlog
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.dependencies import get_album_store, get_app_settings
from .api.routes import albums
from .core.config import RecordShopSettings, get_settings
from .core.exceptions import AlbumNotFoundError, MalformedBodyError
from .core.logging import setup_logging
from .store.album_store import AlbumStore

logger = structlog.get_logger("recordshop")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events"""
    logger.info(
        "Starting RecordShop server",
        version=app.state.settings.APP_VERSION,
        albums=len(app.state.album_store),
    )

    yield

    # Albums are never persisted; everything added since startup is dropped here
    logger.info("RecordShop shutdown complete", albums=len(app.state.album_store))


def create_app(
    settings: Optional[RecordShopSettings] = None,
    store: Optional[AlbumStore] = None,
) -> FastAPI:
    """Build a RecordShop application around its own album store"""
    settings = settings or get_settings()
    setup_logging(settings)

    if store is None:
        store = AlbumStore.seeded() if settings.SEED_ALBUMS else AlbumStore()

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="In-memory record album catalogue",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.album_store = store

    if settings.ALLOWED_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.ALLOWED_ORIGINS,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    @app.exception_handler(MalformedBodyError)
    async def malformed_body_handler(request: Request, exc: MalformedBodyError):
        return JSONResponse(
            status_code=400,
            content={"error": "Malformed request body", "detail": exc.reason}
        )

    @app.exception_handler(AlbumNotFoundError)
    async def album_not_found_handler(request: Request, exc: AlbumNotFoundError):
        return JSONResponse(status_code=404, content={"message": "album not found"})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled exceptions"""
        logger.error("Unhandled exception", path=request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "detail": str(exc)}
        )

    @app.get("/health")
    async def health_check(
        app_settings: RecordShopSettings = Depends(get_app_settings),
        album_store: AlbumStore = Depends(get_album_store),
    ) -> Dict[str, Any]:
        """Health check endpoint"""
        return {
            "status": "healthy",
            "version": app_settings.APP_VERSION,
            "albums": len(album_store),
        }

    app.include_router(albums.router, prefix="/albums", tags=["Albums"])

    return app


def main() -> None:
    """Run the development server"""
    settings = get_settings()
    uvicorn.run(
        "recordshop.main:create_app",
        factory=True,
        **settings.get_server_config()
    )


if __name__ == "__main__":
    main()
