"""Unsplash search client for the Image Agent."""
import logging
from typing import Any, Dict, List, Optional

import httpx

from agents.common import ProxyError
from .config import settings
from .models import ImageRecord

logger = logging.getLogger(__name__)


class ImageClientError(ProxyError):
    """Exception raised by the Unsplash client."""
    pass


def clamp_count(count: int) -> int:
    return min(max(count, settings.MIN_IMAGES_PER_REQUEST), settings.MAX_IMAGES_PER_REQUEST)


def photo_to_record(photo: Dict[str, Any], position: int, query: str) -> ImageRecord:
    """Normalize one Unsplash photo into an :class:`ImageRecord`.

    Missing alt text and description fall back to the search query.
    """
    urls = photo.get("urls") or {}
    user = photo.get("user") or {}
    links = photo.get("links") or {}
    alt = photo.get("alt_description")
    return ImageRecord(
        id=position,
        unsplash_id=str(photo.get("id", "")),
        url=urls.get("regular", ""),
        full_url=urls.get("full", ""),
        thumb_url=urls.get("thumb", ""),
        width=photo.get("width") or 0,
        height=photo.get("height") or 0,
        alt_text=alt or query,
        photographer_name=user.get("name") or "Unknown",
        photographer_url=(user.get("links") or {}).get("html"),
        download_url=links.get("download"),
        description=photo.get("description") or alt or query,
        tags=[t["title"] for t in photo.get("tags") or [] if isinstance(t, dict) and t.get("title")],
    )


class SearchResult:
    def __init__(self, images: List[ImageRecord], total: int, total_pages: int):
        self.images = images
        self.total = total
        self.total_pages = total_pages


class UnsplashClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = settings.UNSPLASH_BASE_URL,
        timeout: int = settings.TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Client-ID {self.api_key}",
            "Accept-Version": settings.UNSPLASH_API_VERSION,
        }

    async def search(self, query: str, count: int, orientation: str) -> SearchResult:
        params = {
            "query": query,
            "per_page": clamp_count(count),
            "orientation": orientation,
            "order_by": settings.ORDER_BY,
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.get(f"{self.base_url}/search/photos", params=params, headers=self._headers())
        except httpx.TimeoutException:
            raise ImageClientError(f"Unsplash request timed out after {self.timeout} seconds")
        except httpx.HTTPError as e:
            logger.error(f"Unsplash network error: {e}")
            raise ImageClientError(f"Unsplash request failed: {e}") from e

        if resp.status_code >= 400:
            message = f"Unsplash API error: {resp.status_code} {resp.reason_phrase}"
            logger.error(message)
            raise ImageClientError(message)

        try:
            data = resp.json()
        except ValueError as e:
            raise ImageClientError(f"Unsplash returned invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ImageClientError("Unsplash returned an unexpected response")

        results = data.get("results") or []
        images = [photo_to_record(photo, i + 1, query) for i, photo in enumerate(results)]
        logger.info(f"Unsplash returned {len(images)} images for '{query}'")
        return SearchResult(
            images=images,
            total=data.get("total") or len(images),
            total_pages=data.get("total_pages") or 0,
        )
