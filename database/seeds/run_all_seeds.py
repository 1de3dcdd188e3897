"""
Food Ordering - Seed the Appwrite backend.

This script rebuilds the demo menu using the seeders architecture:
- data/: Contains all seed data definitions (constants)
- seeders/: Contains reusable seeding logic

Phases (strictly sequential):
1. Reset: clear categories, customizations, menu, menu_customizations, bucket
2. Categories
3. Customizations
4. Menu items (image rehosting + customization join records)

Nothing is transactional: a backend failure aborts the run and leaves the
backend partially seeded.

Run with: python -m database.seeds.run_all_seeds [--skip-images]
"""

import asyncio
import logging
import sys
from dataclasses import dataclass, field

from database.seeds.data import SEED_DATA, SeedData, find_unresolved_references
from database.seeds.seeders import (
    CategorySeeder,
    CustomizationSeeder,
    MenuSeeder,
    ResetSeeder,
)
from shared.appwrite_client import AppwriteClient
from shared.config import Settings, get_settings
from shared.errors import ConfigurationError, categorize_exception, get_error_logger
from shared.image_rehoster import ImageRehoster
from shared.logging_config import configure_logging

logger = logging.getLogger(__name__)


@dataclass
class SeedReport:
    """Summary of a completed seeding run."""
    deleted: dict[str, int] = field(default_factory=dict)
    category_ids: dict[str, str] = field(default_factory=dict)
    customization_ids: dict[str, str] = field(default_factory=dict)
    menu_ids: dict[str, str] = field(default_factory=dict)
    link_count: int = 0
    images_rehosted: int = 0
    images_fallback: int = 0
    unresolved_references: list[str] = field(default_factory=list)


async def seed(
    client: AppwriteClient | None = None,
    data: SeedData | None = None,
    *,
    settings: Settings | None = None,
    skip_images: bool = False,
    rehoster: ImageRehoster | None = None,
) -> SeedReport:
    """
    Run every seeding phase against the Appwrite backend.

    Args:
        client: Appwrite client, built from settings when omitted
        data: Fixture to load (defaults to the demo menu)
        settings: Settings holding the Appwrite IDs
        skip_images: Keep source image URLs instead of rehosting them
        rehoster: Image rehoster, built from the client when omitted

    Returns:
        SeedReport with the name -> ID maps and counters

    Raises:
        ConfigurationError: Required Appwrite settings are missing
        AppwriteAPIError: Any backend request failed (the run stops there)
    """
    settings = settings or get_settings()
    missing = settings.missing_appwrite_settings()
    if missing:
        raise ConfigurationError(missing)

    client = client or AppwriteClient(settings)
    data = data or SEED_DATA
    report = SeedReport()

    for problem in find_unresolved_references(data):
        logger.warning(f"Unresolved fixture reference: {problem}")

    logger.info("\n[STEP 1] Clearing collections and storage...")
    report.deleted = await ResetSeeder(client, settings).reset()

    logger.info("\n[STEP 2] Seeding categories...")
    report.category_ids = await CategorySeeder(client, settings).seed(data["categories"])

    logger.info("\n[STEP 3] Seeding customizations...")
    report.customization_ids = await CustomizationSeeder(client, settings).seed(
        data["customizations"]
    )

    logger.info("\n[STEP 4] Seeding menu items...")
    menu_seeder = MenuSeeder(client, settings, rehoster=rehoster, skip_images=skip_images)
    menu_result = await menu_seeder.seed(
        data["menu"],
        category_ids=report.category_ids,
        customization_ids=report.customization_ids,
    )
    report.menu_ids = menu_result.menu_ids
    report.link_count = menu_result.link_count
    report.images_rehosted = menu_result.images_rehosted
    report.images_fallback = menu_result.images_fallback
    report.unresolved_references = menu_result.unresolved_references

    logger.info("Seeding complete.")
    return report


async def run_all_seeds(skip_images: bool = False) -> bool:
    """
    Seed the backend and log the outcome.

    Returns:
        True if successful, False otherwise.
    """
    logger.info("=" * 70)
    logger.info("Food Ordering Appwrite Seeding")
    logger.info("=" * 70)

    try:
        report = await seed(skip_images=skip_images)
    except Exception as e:
        get_error_logger().log_error(
            error=e,
            category=categorize_exception(e),
            operation="seed",
            context={"skip_images": skip_images},
        )
        logger.error("\nSeeding failed. The backend may be partially seeded.")
        return False

    logger.info("\n" + "=" * 70)
    logger.info("SEEDING SUMMARY")
    logger.info("=" * 70)
    logger.info(f"  categories: {len(report.category_ids)}")
    logger.info(f"  customizations: {len(report.customization_ids)}")
    logger.info(f"  menu items: {len(report.menu_ids)}")
    logger.info(f"  menu customizations: {report.link_count}")
    logger.info(
        f"  images: {report.images_rehosted} rehosted, {report.images_fallback} kept original"
    )
    if report.unresolved_references:
        logger.warning(f"  unresolved references: {len(report.unresolved_references)}")
    return True


async def main() -> int:
    """Main entry point."""
    configure_logging()
    skip_images = "--skip-images" in sys.argv[1:]
    success = await run_all_seeds(skip_images=skip_images)
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
