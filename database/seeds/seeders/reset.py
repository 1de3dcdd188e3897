"""
Food Ordering Reset Seeder.

Empties the seeded collections and the image bucket before a run.
"""

import asyncio
import logging

from database.seeds.seeders.base import BaseSeeder

logger = logging.getLogger(__name__)


class ResetSeeder(BaseSeeder):
    """
    Seeder that deletes everything a previous run created.

    Collections are cleared one after another. Inside one listing page the
    deletes are issued concurrently and joined; the first failure aborts the
    reset. Listing repeats until a page comes back empty, so collections
    larger than one page are cleared completely.
    """

    async def reset(self) -> dict[str, int]:
        """
        Clear all seeded collections, then the bucket.

        Returns:
            Dict of collection key -> number of deleted documents,
            plus "files" for the bucket
        """
        deleted: dict[str, int] = {}
        for key, collection_id in self.settings.collection_ids.items():
            deleted[key] = await self.clear_collection(collection_id)
            logger.info(
                f"  - Cleared {key}: {deleted[key]} documents deleted",
                extra={"collection_id": collection_id},
            )

        deleted["files"] = await self.clear_bucket(self.settings.APPWRITE_BUCKET_ID)
        logger.info(f"  - Cleared bucket: {deleted['files']} files deleted")
        return deleted

    async def clear_collection(self, collection_id: str) -> int:
        """Delete every document in a collection. Returns the count deleted."""
        page_size = self.settings.APPWRITE_PAGE_SIZE
        total = 0
        while True:
            page = await self.client.list_documents(
                self.database_id, collection_id, limit=page_size
            )
            documents = page.get("documents", [])
            if not documents:
                break

            await asyncio.gather(*[
                self.client.delete_document(self.database_id, collection_id, doc["$id"])
                for doc in documents
            ])
            total += len(documents)

        self.log_deleted(total)
        return total

    async def clear_bucket(self, bucket_id: str) -> int:
        """Delete every file in a bucket. Returns the count deleted."""
        page_size = self.settings.APPWRITE_PAGE_SIZE
        total = 0
        while True:
            page = await self.client.list_files(bucket_id, limit=page_size)
            files = page.get("files", [])
            if not files:
                break

            await asyncio.gather(*[
                self.client.delete_file(bucket_id, file["$id"])
                for file in files
            ])
            total += len(files)

        self.log_deleted(total)
        return total
