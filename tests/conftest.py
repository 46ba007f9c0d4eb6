# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from palevel_api.app.main import create_app
from palevel_api.app.services.listing_store import ListingStore


@pytest.fixture
def store():
    return ListingStore()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
