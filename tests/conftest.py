"""
Shared fixtures
"""
import asyncio

import httpx
import pytest

from cat_swipe.config import tweak
from cat_swipe.preloader import Preloader
from cat_swipe.session import Session_Controller

from fakes import Fake_Image_Source, Fake_Surface, make_urls as _make_urls


async def _settle(controller: Session_Controller) -> None:
    """Wait until the controller has no background work left."""
    while controller._tasks:
        await asyncio.gather(*list(controller._tasks))


@pytest.fixture
def make_urls():
    return _make_urls


@pytest.fixture
def settle():
    return _settle


@pytest.fixture
def settings():
    return {**tweak, "animation_ms": 0}


@pytest.fixture
def surface():
    return Fake_Surface()


@pytest.fixture
def preloader():
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200, content=b"img")))
    return Preloader(client)


@pytest.fixture
def make_controller(surface, preloader, settings):
    def _make(*batches):
        return Session_Controller(Fake_Image_Source(*batches), preloader, surface, settings)
    return _make
