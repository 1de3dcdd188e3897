#!/usr/bin/env python3
"""
Check the Appwrite configuration and connectivity before seeding.

Usage:
    python -m scripts.check_appwrite_connection
    python -m scripts.check_appwrite_connection --show-config

The script will:
1. Verify every required Appwrite setting is present
2. Optionally print the configuration (API key masked)
3. List the categories collection to prove the key and IDs work

Exit codes:
    0: Connection successful
    1: Configuration incomplete
    2: Error occurred
"""

import asyncio
import sys

from shared.appwrite_client import AppwriteClient
from shared.config import Settings, get_settings
from shared.logging_config import mask_secret


def print_config(settings: Settings) -> None:
    """Print the Appwrite configuration with secrets masked."""
    print("=== Appwrite configuration ===")
    print(f"ENDPOINT:     {settings.APPWRITE_ENDPOINT}")
    print(f"PROJECT_ID:   {settings.APPWRITE_PROJECT_ID or '(unset)'}")
    print(f"API_KEY:      {mask_secret(settings.APPWRITE_API_KEY)}")
    print(f"PLATFORM:     {settings.APPWRITE_PLATFORM or '(unset)'}")
    print(f"DATABASE_ID:  {settings.APPWRITE_DATABASE_ID or '(unset)'}")
    print(f"BUCKET_ID:    {settings.APPWRITE_BUCKET_ID or '(unset)'}")
    for key, collection_id in settings.collection_ids.items():
        print(f"{key + ':':<22}{collection_id or '(unset)'}")
    print("==============================")


async def check_connection(
    client: AppwriteClient | None = None,
    settings: Settings | None = None,
) -> int:
    """
    List the categories collection.

    Returns:
        Total number of category documents reported by Appwrite
    """
    settings = settings or get_settings()
    client = client or AppwriteClient(settings)
    result = await client.list_documents(
        settings.APPWRITE_DATABASE_ID,
        settings.APPWRITE_CATEGORIES_COLLECTION_ID,
        limit=1,
    )
    return int(result.get("total", 0))


async def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    argv = sys.argv[1:] if argv is None else argv
    settings = get_settings()

    print("=" * 60)
    print("Appwrite Connection Check")
    print("=" * 60)
    print()

    if "--show-config" in argv:
        print_config(settings)
        print()

    missing = settings.missing_appwrite_settings()
    if missing:
        print("❌ Configuration incomplete. Missing settings:")
        for name in missing:
            print(f"  - {name}")
        return 1

    try:
        total = await check_connection(settings=settings)
    except Exception as e:
        print(f"❌ Connection test failed: {type(e).__name__}: {e}")
        return 2

    print(f"✅ Connection successful! Categories collection accessible: {total}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
