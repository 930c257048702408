"""
RecordShop Configuration Management
Centralized settings using Pydantic with environment variable support
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RecordShopSettings(BaseSettings):
    """RecordShop application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ============================================================================
    # APPLICATION SETTINGS
    # ============================================================================
    APP_NAME: str = "RecordShop"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")

    # ============================================================================
    # SERVER SETTINGS
    # ============================================================================
    HOST: str = Field(default="localhost")
    PORT: int = Field(default=8080)
    RELOAD: bool = Field(default=False)

    # CORS settings (middleware is skipped when empty)
    ALLOWED_ORIGINS: List[str] = []

    # ============================================================================
    # STORE SETTINGS
    # ============================================================================
    SEED_ALBUMS: bool = Field(default=True)

    # ============================================================================
    # LOGGING SETTINGS
    # ============================================================================
    LOG_FILE_PATH: Optional[str] = Field(default=None)
    LOG_MAX_SIZE: int = Field(default=10 * 1024 * 1024)  # 10MB
    LOG_BACKUP_COUNT: int = Field(default=5)
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode"""
        return self.DEBUG

    @property
    def is_production(self) -> bool:
        """Check if running in production mode"""
        return not self.DEBUG

    def get_server_config(self) -> dict:
        """Get uvicorn server configuration dictionary"""
        return {
            "host": self.HOST,
            "port": self.PORT,
            "reload": self.RELOAD,
            "log_level": self.LOG_LEVEL.lower(),
        }


@lru_cache()
def get_settings() -> RecordShopSettings:
    """Get application settings (cached)"""
    return RecordShopSettings()
