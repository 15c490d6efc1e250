from __future__ import annotations
import asyncio
import logging
from urllib.parse import urljoin

import httpx

from cat_swipe.config import tweak

logger = logging.getLogger(__name__)


def normalize_image_url(url: str, width: int, height: int) -> str:
    """Ask the provider for a fixed render size, keeping any existing query."""
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}width={width}&height={height}"


class Image_Source:
    """Fetches batches of random cat image urls from cataas."""

    def __init__(self, client: httpx.AsyncClient, settings: dict = tweak):
        self.client = client
        self.settings = settings

    def url_from_payload(self, data: dict) -> str:
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {data!r}")
        base_url = self.settings["base_url"]
        url = data.get("url")
        if url:
            if not isinstance(url, str):
                raise ValueError(f"url is not a string: {url!r}")
            url = urljoin(base_url + "/", url)
        else:
            cat_id = data.get("id") or data.get("_id")
            if not cat_id or not isinstance(cat_id, str):
                raise ValueError(f"Response has neither url nor id: {data!r}")
            url = f"{base_url}/cat/{cat_id}"
        return normalize_image_url(url, self.settings["image_width"], self.settings["image_height"])

    async def fetch_one(self) -> str | None:
        try:
            response = await self.client.get(
                self.settings["api_url"],
                headers={"Cache-Control": "no-store"},
            )
            response.raise_for_status()
            return self.url_from_payload(response.json())
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Error fetching cat: %s", e)
            return None

    async def fetch_batch(self, count: int) -> list[str]:
        """Fetch `count` urls concurrently. Failed slots are dropped, order is kept."""
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")
        results = await asyncio.gather(*(self.fetch_one() for _ in range(count)))
        urls = [url for url in results if url is not None]
        if len(urls) < count:
            logger.info("Fetched %d of %d cats", len(urls), count)
        return urls
