from __future__ import annotations
import asyncio
import logging

import httpx

logger = logging.getLogger(__name__)


class Preloader:
    """Downloads image bytes ahead of time so the next card shows instantly."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client
        self.cache: dict[str, bytes] = {}
        self._pending: dict[str, asyncio.Task] = {}

    async def _download(self, url: str) -> bytes | None:
        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.debug("Preload failed for %s: %s", url, e)
            return None
        self.cache[url] = response.content
        return response.content

    def warm(self, urls: list[str]) -> None:
        """Start background downloads and return right away."""
        loop = asyncio.get_running_loop()
        for url in urls:
            if url in self.cache or url in self._pending:
                continue
            task = loop.create_task(self._download(url))
            self._pending[url] = task
            task.add_done_callback(lambda _, url=url: self._pending.pop(url, None))

    async def load(self, url: str) -> bytes | None:
        if url in self.cache:
            return self.cache[url]
        task = self._pending.get(url)
        if task is not None:
            data = await asyncio.shield(task)
            if data is not None:
                return data
        return await self._download(url)

    def clear(self) -> None:
        for task in self._pending.values():
            task.cancel()
        self._pending.clear()
        self.cache.clear()
