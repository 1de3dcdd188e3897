"""
Pytest configuration and shared fixtures for all tests.

This file is automatically loaded by pytest and provides:
- Async test support
- Test settings with every Appwrite ID filled in
- An in-memory fake of the Appwrite backend
- Image host transports for the rehoster
"""

import inspect
import logging
from collections import defaultdict
from typing import Any

import httpx
import pytest

from shared.config import Settings
from shared.errors import AppwriteAPIError


# =============================================================================
# ASYNC TEST SUPPORT
# =============================================================================

def pytest_collection_modifyitems(items):
    """Mark all async tests with pytest.mark.asyncio."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

@pytest.fixture(scope="session", autouse=True)
def setup_logging():
    """Configure logging for tests."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Reduce noise from third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)


# =============================================================================
# SETTINGS
# =============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings with every Appwrite ID set, a small page size and no delay."""
    return Settings(
        _env_file=None,
        APPWRITE_ENDPOINT="https://appwrite.test/v1",
        APPWRITE_PROJECT_ID="test-project",
        APPWRITE_API_KEY="test-api-key-0123456789",
        APPWRITE_DATABASE_ID="db",
        APPWRITE_BUCKET_ID="images",
        APPWRITE_CATEGORIES_COLLECTION_ID="categories",
        APPWRITE_CUSTOMIZATIONS_COLLECTION_ID="customizations",
        APPWRITE_MENU_COLLECTION_ID="menu",
        APPWRITE_MENU_CUSTOMIZATIONS_COLLECTION_ID="menu_customizations",
        APPWRITE_PAGE_SIZE=10,
        SEED_ITEM_DELAY_SECONDS=0,
    )


# =============================================================================
# FAKE APPWRITE BACKEND
# =============================================================================

class FakeAppwrite:
    """
    In-memory stand-in for AppwriteClient.

    Exposes the same coroutine methods. Listings never return more than
    max_page_size entries, whatever limit is requested, like a server-side
    cap on page size.
    """

    def __init__(self, max_page_size: int = 25):
        self.max_page_size = max_page_size
        self.documents: dict[tuple[str, str], dict[str, dict[str, Any]]] = defaultdict(dict)
        self.files: dict[str, dict[str, dict[str, Any]]] = defaultdict(dict)
        self.fail_on: set[str] = set()
        self.calls: list[str] = []
        self._counter = 0

    def _new_id(self) -> str:
        self._counter += 1
        return f"id{self._counter:05d}"

    def _check(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.fail_on:
            raise AppwriteAPIError(500, f"{operation} failed", "general_unknown")

    def _page(self, entries: list[dict], limit: int | None, cursor_after: str | None) -> list[dict]:
        if cursor_after is not None:
            ids = [entry["$id"] for entry in entries]
            entries = entries[ids.index(cursor_after) + 1:]
        size = min(limit or 25, self.max_page_size)
        return entries[:size]

    def collection(self, collection_id: str, database_id: str = "db") -> list[dict[str, Any]]:
        return list(self.documents[(database_id, collection_id)].values())

    async def list_documents(self, database_id, collection_id, *, limit=None, cursor_after=None):
        self._check("list_documents")
        entries = list(self.documents[(database_id, collection_id)].values())
        return {"total": len(entries), "documents": self._page(entries, limit, cursor_after)}

    async def iter_documents(self, database_id, collection_id, page_size=None):
        page_size = page_size or self.max_page_size
        cursor = None
        while True:
            page = await self.list_documents(
                database_id, collection_id, limit=page_size, cursor_after=cursor
            )
            for document in page["documents"]:
                yield document
            if len(page["documents"]) < page_size:
                return
            cursor = page["documents"][-1]["$id"]

    async def create_document(self, database_id, collection_id, data, document_id=None):
        self._check("create_document")
        document_id = document_id or self._new_id()
        document = {"$id": document_id, "$collectionId": collection_id, **data}
        self.documents[(database_id, collection_id)][document_id] = document
        return document

    async def delete_document(self, database_id, collection_id, document_id):
        self._check("delete_document")
        if document_id not in self.documents[(database_id, collection_id)]:
            raise AppwriteAPIError(404, "Document not found", "document_not_found")
        del self.documents[(database_id, collection_id)][document_id]

    async def list_files(self, bucket_id, *, limit=None, cursor_after=None):
        self._check("list_files")
        entries = list(self.files[bucket_id].values())
        return {"total": len(entries), "files": self._page(entries, limit, cursor_after)}

    async def create_file(self, bucket_id, content, filename, mime_type, file_id=None):
        self._check("create_file")
        file_id = file_id or self._new_id()
        stored = {
            "$id": file_id,
            "name": filename,
            "mimeType": mime_type,
            "sizeOriginal": len(content),
        }
        self.files[bucket_id][file_id] = stored
        return stored

    async def delete_file(self, bucket_id, file_id):
        self._check("delete_file")
        if file_id not in self.files[bucket_id]:
            raise AppwriteAPIError(404, "File not found", "storage_file_not_found")
        del self.files[bucket_id][file_id]

    def get_file_view_url(self, bucket_id, file_id):
        return f"https://appwrite.test/v1/storage/buckets/{bucket_id}/files/{file_id}/view?project=test-project"


@pytest.fixture
def fake_appwrite() -> FakeAppwrite:
    """Provide an empty in-memory Appwrite backend."""
    return FakeAppwrite()


# =============================================================================
# IMAGE HOST FIXTURES
# =============================================================================

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


@pytest.fixture
def image_host_ok() -> httpx.MockTransport:
    """Image host that serves a PNG for every URL."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=PNG_BYTES, headers={"content-type": "image/png"})

    return httpx.MockTransport(handler)


@pytest.fixture
def image_host_forbidden() -> httpx.MockTransport:
    """Image host that blocks every request."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, text="Forbidden")

    return httpx.MockTransport(handler)


@pytest.fixture
def image_host_down() -> httpx.MockTransport:
    """Image host that cannot be reached."""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return httpx.MockTransport(handler)


# =============================================================================
# FIXTURE DATA
# =============================================================================

@pytest.fixture
def pizza_data() -> dict:
    """Two categories, one customization, one menu item."""
    return {
        "categories": [
            {"name": "Pizza", "description": "Oven-baked pizzas"},
            {"name": "Drinks", "description": "Cold drinks"},
        ],
        "customizations": [
            {"name": "Extra Cheese", "price": 1.5, "type": "topping"},
        ],
        "menu": [
            {
                "name": "Margherita",
                "description": "Tomato, mozzarella, basil",
                "image_url": "https://images.example.com/pizza/margherita.png?w=640",
                "price": 9.5,
                "rating": 4.6,
                "calories": 800,
                "protein": 30,
                "category_name": "Pizza",
                "customizations": ["Extra Cheese"],
            },
        ],
    }


# =============================================================================
# MARKERS
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
