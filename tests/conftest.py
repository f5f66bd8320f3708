"""Shared pytest fixtures for engine, endpoint and client tests."""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest
import pytest_asyncio

from usersearch.api import create_app
from usersearch.services.records import RecordStore

DATA_DIR = Path(__file__).parent / "data"
BASE_URL = "http://testserver/"


@pytest.fixture
def dataset_path() -> Path:
    return DATA_DIR / "dataset.xml"


@pytest.fixture
def store(dataset_path):
    return RecordStore(dataset_path)


@pytest.fixture
def users(store):
    return list(store.all())


@pytest.fixture
def app(store):
    return create_app(store)


@pytest_asyncio.fixture
async def http_client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url=BASE_URL) as client:
        yield client
