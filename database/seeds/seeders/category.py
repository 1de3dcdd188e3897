"""
Food Ordering Category Seeder.

Seeds menu categories and returns the name -> document ID map the menu
seeder resolves category references with.
"""

import logging

from database.seeds.data.common import CategoryData
from database.seeds.seeders.base import BaseSeeder

logger = logging.getLogger(__name__)


class CategorySeeder(BaseSeeder):
    """Seeder for the categories collection."""

    async def seed(self, categories: list[CategoryData]) -> dict[str, str]:
        """
        Create one document per category.

        Args:
            categories: Category data dictionaries

        Returns:
            Dict of category name -> created document ID
        """
        logger.info(f"Seeding {len(categories)} categories")
        collection_id = self.settings.APPWRITE_CATEGORIES_COLLECTION_ID
        category_ids: dict[str, str] = {}

        for category in categories:
            document = await self.create(
                collection_id,
                {"name": category["name"], "description": category["description"]},
                entity_type="Category",
                code=category["name"],
            )
            category_ids[category["name"]] = document["$id"]

        self.log_summary("Categories")
        return category_ids
