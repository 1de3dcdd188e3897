"""
Food Ordering - Image Rehosting Service.

Downloads menu images from their public source URLs and re-uploads them to
the Appwrite storage bucket so the app serves them from its own backend.
"""

import logging
import time
from urllib.parse import urlparse

import httpx
from pydantic import BaseModel

from shared.appwrite_client import AppwriteClient, unique_id
from shared.config import Settings, get_settings

logger = logging.getLogger(__name__)

# Some image hosts block requests that do not look like a browser
BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    ),
    "Accept": "image/webp,image/apng,image/*,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}

DEFAULT_MIME_TYPE = "image/png"


class RehostResult(BaseModel):
    """Outcome of rehosting one image.

    ``url`` is always usable: the stored file's view URL when ``rehosted``
    is True, otherwise the original ``source_url``.
    """
    url: str
    source_url: str
    rehosted: bool
    file_id: str | None = None
    reason: str | None = None


def filename_from_url(url: str) -> str:
    """
    Derive a file name from the last path segment of a URL.

    The query string is ignored. Falls back to ``image-<epoch ms>.png``
    when the path has no usable last segment.
    """
    name = urlparse(url).path.rsplit("/", 1)[-1]
    return name or f"image-{int(time.time() * 1000)}.png"


def mime_type_from_response(response: httpx.Response) -> str:
    """Content type of a response without parameters, or image/png."""
    content_type = response.headers.get("content-type", "").split(";")[0].strip()
    return content_type or DEFAULT_MIME_TYPE


class ImageRehoster:
    """
    Service for copying external images into the Appwrite bucket.

    rehost() never raises: every failure degrades to the original URL.
    """

    def __init__(
        self,
        client: AppwriteClient,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = settings or get_settings()
        self.client = client
        self.bucket_id = settings.APPWRITE_BUCKET_ID
        self.fetch_timeout = settings.IMAGE_FETCH_TIMEOUT_SECONDS
        self._transport = transport

    async def rehost(self, source_url: str) -> RehostResult:
        """
        Fetch an image and upload it to storage.

        Args:
            source_url: Public URL of the image

        Returns:
            RehostResult with the new view URL, or the source URL as fallback
        """
        logger.info(f"Uploading image: {source_url}", extra={"image_url": source_url})

        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self.fetch_timeout,
                follow_redirects=True,
            ) as http:
                response = await http.get(source_url, headers=BROWSER_HEADERS)

            if not response.is_success:
                logger.warning(
                    f"Failed to fetch image, status: {response.status_code}",
                    extra={"image_url": source_url},
                )
                return RehostResult(
                    url=source_url,
                    source_url=source_url,
                    rehosted=False,
                    reason=f"http_status_{response.status_code}",
                )

            content = response.content
            logger.info(f"Image fetched successfully, size: {len(content)}")

            filename = filename_from_url(source_url)
            mime_type = mime_type_from_response(response)

            stored = await self.client.create_file(
                self.bucket_id,
                content,
                filename,
                mime_type,
                file_id=unique_id(),
            )
            file_id = stored["$id"]
            view_url = self.client.get_file_view_url(self.bucket_id, file_id)

            logger.info(
                f"Image uploaded successfully: {file_id}",
                extra={"image_url": source_url, "file_id": file_id},
            )
            return RehostResult(
                url=view_url,
                source_url=source_url,
                rehosted=True,
                file_id=file_id,
            )

        except Exception as e:
            logger.warning(
                f"Error uploading image, using original URL as fallback: {e}",
                extra={"image_url": source_url},
                exc_info=True,
            )
            return RehostResult(
                url=source_url,
                source_url=source_url,
                rehosted=False,
                reason=f"{type(e).__name__}: {e}",
            )

    async def rehost_url(self, source_url: str) -> str:
        """Rehost an image and return only the URL to store."""
        result = await self.rehost(source_url)
        return result.url
