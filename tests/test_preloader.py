"""
Tests for Preloader
"""
import asyncio

import httpx
import pytest

from cat_swipe.preloader import Preloader


def make_preloader(handler) -> tuple[Preloader, list]:
    requests = []

    def record(request):
        requests.append(str(request.url))
        return handler(request)

    client = httpx.AsyncClient(transport=httpx.MockTransport(record))
    return Preloader(client), requests


@pytest.mark.asyncio
async def test_warm_returns_immediately():
    preloader, requests = make_preloader(lambda request: httpx.Response(200, content=b"img"))

    preloader.warm(["https://cataas.com/cat/a", "https://cataas.com/cat/b"])

    assert requests == []
    assert preloader.cache == {}
    preloader.clear()


@pytest.mark.asyncio
async def test_load_reuses_warmed_downloads():
    preloader, requests = make_preloader(lambda request: httpx.Response(200, content=request.url.path.encode()))
    urls = ["https://cataas.com/cat/a", "https://cataas.com/cat/b"]

    preloader.warm(urls)
    preloader.warm(urls)

    assert await preloader.load(urls[0]) == b"/cat/a"
    assert await preloader.load(urls[1]) == b"/cat/b"
    assert await preloader.load(urls[0]) == b"/cat/a"
    assert sorted(requests) == urls


@pytest.mark.asyncio
async def test_load_without_warm_downloads():
    preloader, requests = make_preloader(lambda request: httpx.Response(200, content=b"img"))

    assert await preloader.load("https://cataas.com/cat/a") == b"img"
    assert preloader.cache == {"https://cataas.com/cat/a": b"img"}


@pytest.mark.asyncio
async def test_failed_warm_is_silent_and_load_retries():
    preloader, requests = make_preloader(lambda request: httpx.Response(404))

    preloader.warm(["https://cataas.com/cat/missing"])
    await asyncio.sleep(0.01)

    assert await preloader.load("https://cataas.com/cat/missing") is None
    assert len(requests) == 2


@pytest.mark.asyncio
async def test_clear_forgets_everything():
    preloader, requests = make_preloader(lambda request: httpx.Response(200, content=b"img"))
    await preloader.load("https://cataas.com/cat/a")
    preloader.warm(["https://cataas.com/cat/b"])

    preloader.clear()
    await asyncio.sleep(0.01)

    assert preloader.cache == {}
    assert requests == ["https://cataas.com/cat/a"]
