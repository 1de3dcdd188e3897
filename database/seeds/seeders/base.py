"""
Food Ordering Base Seeder.

Provides common functionality for all seeders:
- Uniform logging format
- Document creation against one Appwrite database
- Statistics tracking
"""

import logging
from typing import Any

from shared.appwrite_client import AppwriteClient
from shared.config import Settings

logger = logging.getLogger(__name__)


class BaseSeeder:
    """
    Base class for all seeders with common functionality.

    Provides:
    - Consistent logging format
    - Statistics tracking (created, deleted, skipped)
    - Generic create operation
    """

    def __init__(self, client: AppwriteClient, settings: Settings):
        """
        Initialize the seeder.

        Args:
            client: Appwrite client (or any object with the same methods)
            settings: Settings holding the database, bucket and collection IDs
        """
        self.client = client
        self.settings = settings
        self.database_id = settings.APPWRITE_DATABASE_ID
        self.stats = {
            "created": 0,
            "deleted": 0,
            "skipped": 0,
        }

    def reset_stats(self) -> None:
        """Reset statistics counters."""
        self.stats = {"created": 0, "deleted": 0, "skipped": 0}

    def log_created(self, entity_type: str, code: str, document_id: str) -> None:
        """Log a created entity."""
        self.stats["created"] += 1
        logger.info(
            f"  + {entity_type} {code}: Created ({document_id})",
            extra={"document_id": document_id},
        )

    def log_deleted(self, count: int) -> None:
        """Count deleted documents or files."""
        self.stats["deleted"] += count

    def log_skipped(self, entity_type: str, code: str, reason: str) -> None:
        """Log a skipped entity."""
        self.stats["skipped"] += 1
        logger.warning(f"  ! {entity_type} {code}: Skipped ({reason})")

    def log_summary(self, entity_type: str) -> None:
        """Log a summary of operations."""
        logger.info(
            f"  {entity_type}: {self.stats['created']} created, "
            f"{self.stats['deleted']} deleted, {self.stats['skipped']} skipped"
        )

    async def create(
        self,
        collection_id: str,
        data: dict[str, Any],
        entity_type: str = "Entity",
        code: str | None = None,
    ) -> dict[str, Any]:
        """
        Create one document in the seeder's database.

        Backend errors propagate to the caller.

        Args:
            collection_id: Target collection ID
            data: Document attributes
            entity_type: Name for logging (e.g., "Category", "MenuItem")
            code: Identifier for logging

        Returns:
            The created document
        """
        document = await self.client.create_document(self.database_id, collection_id, data)
        self.log_created(entity_type, code or str(data.get("name", "")), document["$id"])
        return document
