"""
Food Ordering Customization Seeder.

Seeds customizations (toppings, sides, sizes...).
"""

import logging

from database.seeds.data.common import CustomizationData
from database.seeds.seeders.base import BaseSeeder

logger = logging.getLogger(__name__)


class CustomizationSeeder(BaseSeeder):
    """Seeder for the customizations collection."""

    async def seed(self, customizations: list[CustomizationData]) -> dict[str, str]:
        """
        Create one document per customization.

        Returns:
            Dict of customization name -> created document ID
        """
        logger.info(f"Seeding {len(customizations)} customizations")
        collection_id = self.settings.APPWRITE_CUSTOMIZATIONS_COLLECTION_ID
        customization_ids: dict[str, str] = {}

        for customization in customizations:
            document = await self.create(
                collection_id,
                {
                    "name": customization["name"],
                    "price": customization["price"],
                    "type": customization["type"],
                },
                entity_type="Customization",
                code=customization["name"],
            )
            customization_ids[customization["name"]] = document["$id"]

        self.log_summary("Customizations")
        return customization_ids
