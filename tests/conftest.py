"""Root conftest: a fresh store, app and async HTTP client per test."""

import os

os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest
from httpx import ASGITransport, AsyncClient

from src.apps.posts.repositories.post_repository import PostRepository
from src.main import create_app


@pytest.fixture
def store():
    return PostRepository(lock_timeout=0.05)


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
