"""
Food Ordering Menu Seeder.

Seeds menu items and their menu <-> customization join records:
- Rehosts each item's image into the Appwrite bucket
- Resolves the category reference by name
- Creates one join record per customization listed for the item
"""

import asyncio
import logging
from dataclasses import dataclass, field

from database.seeds.data.common import MenuItemData
from database.seeds.seeders.base import BaseSeeder
from shared.appwrite_client import AppwriteClient
from shared.config import Settings
from shared.image_rehoster import ImageRehoster

logger = logging.getLogger(__name__)


@dataclass
class MenuSeedResult:
    """What the menu phase produced."""
    menu_ids: dict[str, str] = field(default_factory=dict)
    link_count: int = 0
    images_rehosted: int = 0
    images_fallback: int = 0
    unresolved_references: list[str] = field(default_factory=list)


class MenuSeeder(BaseSeeder):
    """
    Seeder for the menu and menu_customizations collections.

    Items are processed one at a time in fixture order with a fixed pause
    before each one (SEED_ITEM_DELAY_SECONDS) to stay under the backend's
    request rate limit.
    """

    def __init__(
        self,
        client: AppwriteClient,
        settings: Settings,
        rehoster: ImageRehoster | None = None,
        skip_images: bool = False,
    ):
        super().__init__(client, settings)
        self.rehoster = rehoster or ImageRehoster(client, settings)
        self.skip_images = skip_images
        self.item_delay = settings.SEED_ITEM_DELAY_SECONDS

    async def seed(
        self,
        menu: list[MenuItemData],
        category_ids: dict[str, str],
        customization_ids: dict[str, str],
    ) -> MenuSeedResult:
        """
        Create menu documents and their customization links.

        Args:
            menu: Menu item data dictionaries
            category_ids: Category name -> document ID (from CategorySeeder)
            customization_ids: Customization name -> document ID

        Returns:
            MenuSeedResult with the menu name -> ID map and counters
        """
        result = MenuSeedResult()
        menu_collection = self.settings.APPWRITE_MENU_COLLECTION_ID

        for item in menu:
            logger.info(f"Processing menu item: {item['name']}")
            await asyncio.sleep(self.item_delay)

            image_url = await self._image_url(item, result)

            category_id = category_ids.get(item["category_name"])
            if category_id is None:
                problem = f"{item['name']}: unknown category '{item['category_name']}'"
                logger.warning(f"  ! {problem}, storing menu item without category")
                result.unresolved_references.append(problem)

            document = await self.create(
                menu_collection,
                {
                    "name": item["name"],
                    "description": item["description"],
                    "image_url": image_url,
                    "price": item["price"],
                    "rating": item["rating"],
                    "calories": item["calories"],
                    "protein": item["protein"],
                    "categories": category_id,
                },
                entity_type="MenuItem",
                code=item["name"],
            )
            result.menu_ids[item["name"]] = document["$id"]

            result.link_count += await self._seed_links(
                item, document["$id"], customization_ids, result
            )

        self.log_summary("Menu")
        return result

    async def _image_url(self, item: MenuItemData, result: MenuSeedResult) -> str:
        """Rehost the item's image unless images are skipped."""
        if self.skip_images:
            return item["image_url"]

        rehosted = await self.rehoster.rehost(item["image_url"])
        if rehosted.rehosted:
            result.images_rehosted += 1
        else:
            result.images_fallback += 1
            logger.info(f"  Using original image URL for {item['name']} ({rehosted.reason})")
        return rehosted.url

    async def _seed_links(
        self,
        item: MenuItemData,
        menu_id: str,
        customization_ids: dict[str, str],
        result: MenuSeedResult,
    ) -> int:
        """Create one join record per customization of a menu item."""
        links_collection = self.settings.APPWRITE_MENU_CUSTOMIZATIONS_COLLECTION_ID
        created = 0

        for cus_name in item["customizations"]:
            customization_id = customization_ids.get(cus_name)
            if customization_id is None:
                problem = f"{item['name']}: unknown customization '{cus_name}'"
                result.unresolved_references.append(problem)
                self.log_skipped("MenuCustomization", f"{item['name']}/{cus_name}", "unknown customization")
                continue

            await self.create(
                links_collection,
                {"menu": menu_id, "customizations": customization_id},
                entity_type="MenuCustomization",
                code=f"{item['name']}/{cus_name}",
            )
            created += 1

        return created
