"""
Food Ordering - Shared module.

This module contains shared utilities, configuration, and clients
used by the seeding scripts.
"""

from shared.appwrite_client import AppwriteClient, Query, unique_id
from shared.config import Settings, get_settings
from shared.image_rehoster import ImageRehoster, RehostResult
from shared.logging_config import configure_logging
from shared.errors import (
    AppwriteAPIError,
    ConfigurationError,
    ErrorCategory,
    ErrorLogger,
    get_error_logger,
    map_status_to_category,
)

__all__ = [
    # Core utilities
    "Settings",
    "get_settings",
    "configure_logging",
    # Clients
    "AppwriteClient",
    "Query",
    "unique_id",
    # Images
    "ImageRehoster",
    "RehostResult",
    # Error handling
    "AppwriteAPIError",
    "ConfigurationError",
    "ErrorCategory",
    "ErrorLogger",
    "get_error_logger",
    "map_status_to_category",
]
