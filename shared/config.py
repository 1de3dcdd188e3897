"""
Configuration module - Central access point for environment variables.

CRITICAL: Access ALL environment variables through this module.
NEVER use os.getenv() directly in application code.
"""

__all__ = [
    "Settings",
    "get_settings",
    "REQUIRED_APPWRITE_SETTINGS",
]

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


# Identifiers the seeder cannot run without
REQUIRED_APPWRITE_SETTINGS: tuple[str, ...] = (
    "APPWRITE_PROJECT_ID",
    "APPWRITE_API_KEY",
    "APPWRITE_DATABASE_ID",
    "APPWRITE_BUCKET_ID",
    "APPWRITE_CATEGORIES_COLLECTION_ID",
    "APPWRITE_CUSTOMIZATIONS_COLLECTION_ID",
    "APPWRITE_MENU_COLLECTION_ID",
    "APPWRITE_MENU_CUSTOMIZATIONS_COLLECTION_ID",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project
    PROJECT_NAME: str = Field(
        default="Food Ordering",
        description="Project name displayed in logs"
    )
    ENVIRONMENT: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )
    LOG_LEVEL: str = Field(default="INFO")

    # Appwrite
    APPWRITE_ENDPOINT: str = Field(
        default="https://cloud.appwrite.io/v1",
        description="Appwrite API endpoint including the /v1 suffix"
    )
    APPWRITE_PROJECT_ID: str = Field(default="")
    APPWRITE_API_KEY: str = Field(
        default="",
        description="Server API key with databases and storage scopes"
    )
    APPWRITE_PLATFORM: str = Field(
        default="",
        description="Mobile platform bundle identifier (informational only)"
    )
    APPWRITE_DATABASE_ID: str = Field(default="")
    APPWRITE_BUCKET_ID: str = Field(default="")
    APPWRITE_CATEGORIES_COLLECTION_ID: str = Field(default="")
    APPWRITE_CUSTOMIZATIONS_COLLECTION_ID: str = Field(default="")
    APPWRITE_MENU_COLLECTION_ID: str = Field(default="")
    APPWRITE_MENU_CUSTOMIZATIONS_COLLECTION_ID: str = Field(default="")
    APPWRITE_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for every Appwrite API request"
    )
    APPWRITE_PAGE_SIZE: int = Field(
        default=100,
        ge=1,
        le=5000,
        description="Documents/files requested per listing page"
    )

    # Seeding
    SEED_ITEM_DELAY_SECONDS: float = Field(
        default=1.0,
        ge=0,
        description="Pause before each menu item to stay under the API rate limit"
    )
    IMAGE_FETCH_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for downloading source images"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"

    def missing_appwrite_settings(self) -> list[str]:
        """Return the names of required Appwrite settings that are empty."""
        return [name for name in REQUIRED_APPWRITE_SETTINGS if not getattr(self, name)]

    @property
    def collection_ids(self) -> dict[str, str]:
        """Collections cleared by the seeder, in reset order."""
        return {
            "categories": self.APPWRITE_CATEGORIES_COLLECTION_ID,
            "customizations": self.APPWRITE_CUSTOMIZATIONS_COLLECTION_ID,
            "menu": self.APPWRITE_MENU_COLLECTION_ID,
            "menu_customizations": self.APPWRITE_MENU_CUSTOMIZATIONS_COLLECTION_ID,
        }


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once.
    """
    return Settings()
