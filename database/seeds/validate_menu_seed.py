"""
Food Ordering - Validation script for the seeded menu.

Verifies that the Appwrite backend holds what the fixture describes:
document counts per collection, menu -> category references and
menu -> customization links.

Run with: python -m database.seeds.validate_menu_seed
"""

import asyncio
import logging
import sys
from collections import Counter
from typing import Any

from database.seeds.data import SEED_DATA, SeedData
from shared.appwrite_client import AppwriteClient
from shared.config import Settings, get_settings
from shared.logging_config import configure_logging

logger = logging.getLogger(__name__)


def _reference_id(value: Any) -> str | None:
    """Relationship attributes come back either as an ID or as the nested document."""
    if isinstance(value, dict):
        return value.get("$id")
    return value


async def _fetch_all(client: AppwriteClient, database_id: str, collection_id: str) -> list[dict]:
    return [doc async for doc in client.iter_documents(database_id, collection_id)]


async def validate_seed(
    client: AppwriteClient | None = None,
    data: SeedData | None = None,
    settings: Settings | None = None,
) -> bool:
    """Validate seed data completeness and correctness."""
    settings = settings or get_settings()
    client = client or AppwriteClient(settings)
    data = data or SEED_DATA
    database_id = settings.APPWRITE_DATABASE_ID
    success = True

    logger.info("=" * 80)
    logger.info("VALIDATING MENU SEED DATA")
    logger.info("=" * 80)

    categories = await _fetch_all(client, database_id, settings.APPWRITE_CATEGORIES_COLLECTION_ID)
    customizations = await _fetch_all(
        client, database_id, settings.APPWRITE_CUSTOMIZATIONS_COLLECTION_ID
    )
    menu = await _fetch_all(client, database_id, settings.APPWRITE_MENU_COLLECTION_ID)
    links = await _fetch_all(
        client, database_id, settings.APPWRITE_MENU_CUSTOMIZATIONS_COLLECTION_ID
    )

    # Document counts
    logger.info("\n[CHECK 1] Document counts")
    expected_counts = {
        "categories": (len(categories), len(data["categories"])),
        "customizations": (len(customizations), len(data["customizations"])),
        "menu": (len(menu), len(data["menu"])),
    }
    for name, (found, expected) in expected_counts.items():
        if found == expected:
            logger.info(f"✓ {name}: {found}")
        else:
            logger.error(f"✗ {name}: found {found}, expected {expected}")
            success = False

    # Category references
    logger.info("\n[CHECK 2] Menu category references")
    category_ids = {doc["$id"] for doc in categories}
    for doc in menu:
        if _reference_id(doc.get("categories")) not in category_ids:
            logger.error(f"✗ {doc.get('name')}: category reference does not resolve")
            success = False

    # Customization links
    logger.info("\n[CHECK 3] Menu customization links")
    links_per_menu = Counter(_reference_id(link.get("menu")) for link in links)
    expected_links = {item["name"]: len(item["customizations"]) for item in data["menu"]}
    for doc in menu:
        found = links_per_menu.get(doc["$id"], 0)
        expected = expected_links.get(doc.get("name"))
        if expected is None:
            logger.warning(f"⚠ {doc.get('name')}: not part of the fixture")
        elif found != expected:
            logger.error(f"✗ {doc.get('name')}: {found} links, expected {expected}")
            success = False
        else:
            logger.info(f"  • {doc.get('name')}: {found} links")

    logger.info("\n" + "=" * 80)
    if success:
        logger.info("✓ VALIDATION COMPLETE")
    else:
        logger.error("✗ VALIDATION FAILED")
    logger.info("=" * 80)
    return success


async def main() -> int:
    """Main entry point."""
    configure_logging()
    try:
        success = await validate_seed()
        return 0 if success else 1
    except Exception as e:
        logger.error(f"Validation failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
