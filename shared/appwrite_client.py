"""
Appwrite client for managing documents and storage files.

This module provides the AppwriteClient class, a thin async facade over the
Appwrite REST API covering what the seeder needs: listing, creating and
deleting documents in a collection, and listing, uploading and deleting files
in a storage bucket.
"""

import json
import logging
import secrets
from collections.abc import AsyncIterator
from datetime import datetime
from typing import Any, cast

import httpx

from shared.config import Settings, get_settings
from shared.errors import AppwriteAPIError
from shared.logging_config import truncate_message

logger = logging.getLogger(__name__)

# Appwrite rejects single upload requests larger than this
CHUNK_SIZE = 5 * 1024 * 1024


def unique_id(padding: int = 7) -> str:
    """
    Generate an Appwrite-compatible unique ID.

    Same scheme as the Appwrite SDKs' ID.unique(): hex seconds, hex
    microseconds, then random hex padding (20 chars with the default padding).
    """
    now = datetime.now()
    sec = int(now.timestamp())
    usec = now.microsecond
    return f"{sec:08x}{usec:05x}{secrets.token_hex(padding)[:padding]}"


class Query:
    """Builders for Appwrite JSON query strings (queries[] parameter)."""

    @staticmethod
    def limit(value: int) -> str:
        return json.dumps({"method": "limit", "values": [value]})

    @staticmethod
    def cursor_after(document_id: str) -> str:
        return json.dumps({"method": "cursorAfter", "values": [document_id]})


def _build_queries(limit: int | None, cursor_after: str | None) -> list[str]:
    queries = []
    if limit is not None:
        queries.append(Query.limit(limit))
    if cursor_after is not None:
        queries.append(Query.cursor_after(cursor_after))
    return queries


class AppwriteClient:
    """
    Client for interacting with the Appwrite API.

    Authenticates with a server API key. Every request opens its own
    httpx.AsyncClient, so concurrent calls on one instance are safe.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize Appwrite client with credentials from settings."""
        settings = settings or get_settings()
        self.endpoint = settings.APPWRITE_ENDPOINT.rstrip("/")
        self.project_id = settings.APPWRITE_PROJECT_ID
        self.api_key = settings.APPWRITE_API_KEY
        self.timeout = settings.APPWRITE_TIMEOUT_SECONDS
        self.page_size = settings.APPWRITE_PAGE_SIZE
        self._transport = transport

        self.headers = {
            "X-Appwrite-Project": self.project_id,
            "X-Appwrite-Key": self.api_key,
        }

        logger.info(f"AppwriteClient initialized: {self.endpoint}, project_id={self.project_id}")

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        Send a request and decode the JSON response.

        Raises:
            AppwriteAPIError: Appwrite answered with an error status
            httpx.HTTPError: Transport failure (connect error, timeout)
        """
        url = f"{self.endpoint}{path}"
        request_headers = {**self.headers, **(headers or {})}

        async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
            try:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    json=json_body,
                    data=data,
                    files=files,
                    headers=request_headers,
                )
            except httpx.HTTPError as e:
                logger.error(f"HTTP error calling Appwrite {method} {path}: {e}")
                raise

        if response.status_code >= 400:
            raise self._api_error(response, method, path)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def _api_error(self, response: httpx.Response, method: str, path: str) -> AppwriteAPIError:
        """Build an AppwriteAPIError from an error response."""
        message = response.text
        error_type = None
        try:
            body = response.json()
            message = body.get("message", message)
            error_type = body.get("type")
        except ValueError:
            pass

        logger.error(
            f"Appwrite error response: {method} {path} status={response.status_code} "
            f"body={truncate_message(response.text)}"
        )
        return AppwriteAPIError(
            response.status_code,
            message,
            error_type,
            method=method,
            path=path,
        )

    # =========================================================================
    # Documents
    # =========================================================================

    async def list_documents(
        self,
        database_id: str,
        collection_id: str,
        *,
        limit: int | None = None,
        cursor_after: str | None = None,
    ) -> dict[str, Any]:
        """
        List one page of documents in a collection.

        Args:
            database_id: Appwrite database ID
            collection_id: Appwrite collection ID
            limit: Page size (Appwrite defaults to 25 when omitted)
            cursor_after: Return documents after this document ID

        Returns:
            Dict with "total" and "documents"
        """
        queries = _build_queries(limit, cursor_after)
        result = await self._request(
            "GET",
            f"/databases/{database_id}/collections/{collection_id}/documents",
            params={"queries[]": queries} if queries else None,
        )
        return cast(dict[str, Any], result)

    async def iter_documents(
        self,
        database_id: str,
        collection_id: str,
        page_size: int | None = None,
    ) -> AsyncIterator[dict[str, Any]]:
        """Yield every document in a collection, following cursor pagination."""
        page_size = page_size or self.page_size
        cursor = None
        while True:
            page = await self.list_documents(
                database_id, collection_id, limit=page_size, cursor_after=cursor
            )
            documents = page.get("documents", [])
            for document in documents:
                yield document
            if len(documents) < page_size:
                return
            cursor = documents[-1]["$id"]

    async def create_document(
        self,
        database_id: str,
        collection_id: str,
        data: dict[str, Any],
        document_id: str | None = None,
    ) -> dict[str, Any]:
        """
        Create a document.

        Args:
            database_id: Appwrite database ID
            collection_id: Appwrite collection ID
            data: Document attributes
            document_id: Explicit ID, generated with unique_id() when omitted

        Returns:
            Created document dict (including "$id")
        """
        document = await self._request(
            "POST",
            f"/databases/{database_id}/collections/{collection_id}/documents",
            json_body={"documentId": document_id or unique_id(), "data": data},
        )
        logger.debug(
            f"Created document {document.get('$id')} in {collection_id}",
            extra={"collection_id": collection_id, "document_id": document.get("$id")},
        )
        return cast(dict[str, Any], document)

    async def delete_document(
        self,
        database_id: str,
        collection_id: str,
        document_id: str,
    ) -> None:
        """Delete a document. Raises AppwriteAPIError (404) if it does not exist."""
        await self._request(
            "DELETE",
            f"/databases/{database_id}/collections/{collection_id}/documents/{document_id}",
        )

    # =========================================================================
    # Storage
    # =========================================================================

    async def list_files(
        self,
        bucket_id: str,
        *,
        limit: int | None = None,
        cursor_after: str | None = None,
    ) -> dict[str, Any]:
        """
        List one page of files in a bucket.

        Returns:
            Dict with "total" and "files"
        """
        queries = _build_queries(limit, cursor_after)
        result = await self._request(
            "GET",
            f"/storage/buckets/{bucket_id}/files",
            params={"queries[]": queries} if queries else None,
        )
        return cast(dict[str, Any], result)

    async def create_file(
        self,
        bucket_id: str,
        content: bytes,
        filename: str,
        mime_type: str,
        file_id: str | None = None,
    ) -> dict[str, Any]:
        """
        Upload a file to a bucket.

        Payloads larger than CHUNK_SIZE are sent as sequential chunks with
        Content-Range headers, the way Appwrite expects large uploads.

        Args:
            bucket_id: Appwrite bucket ID
            content: File bytes
            filename: Name stored with the file
            mime_type: MIME type of the payload
            file_id: Explicit ID, generated with unique_id() when omitted

        Returns:
            Stored file dict (including "$id")
        """
        file_id = file_id or unique_id()
        path = f"/storage/buckets/{bucket_id}/files"
        size = len(content)

        if size <= CHUNK_SIZE:
            stored = await self._request(
                "POST",
                path,
                data={"fileId": file_id},
                files={"file": (filename, content, mime_type)},
            )
        else:
            stored = None
            headers: dict[str, str] = {}
            for start in range(0, size, CHUNK_SIZE):
                end = min(start + CHUNK_SIZE, size)
                headers["Content-Range"] = f"bytes {start}-{end - 1}/{size}"
                stored = await self._request(
                    "POST",
                    path,
                    data={"fileId": file_id},
                    files={"file": (filename, content[start:end], mime_type)},
                    headers=headers,
                )
                headers["X-Appwrite-ID"] = stored["$id"]
                logger.debug(f"Uploaded chunk {start}-{end - 1}/{size} of {filename}")

        logger.info(
            f"Stored file {stored['$id']} ({filename}, {size} bytes, {mime_type})",
            extra={"bucket_id": bucket_id, "file_id": stored["$id"]},
        )
        return cast(dict[str, Any], stored)

    async def delete_file(self, bucket_id: str, file_id: str) -> None:
        """Delete a file from a bucket."""
        await self._request("DELETE", f"/storage/buckets/{bucket_id}/files/{file_id}")

    def get_file_view_url(self, bucket_id: str, file_id: str) -> str:
        """Public view URL for a stored file."""
        return (
            f"{self.endpoint}/storage/buckets/{bucket_id}/files/{file_id}/view"
            f"?project={self.project_id}"
        )
