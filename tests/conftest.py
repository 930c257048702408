"""
RecordShop Testing Configuration
Pytest fixtures and test setup
"""
import pytest
from fastapi.testclient import TestClient

from recordshop.core.config import RecordShopSettings
from recordshop.main import create_app
from recordshop.store import Album, AlbumStore


@pytest.fixture
def test_settings():
    """Settings isolated from the environment and any .env file"""
    return RecordShopSettings(
        _env_file=None,
        DEBUG=False,
        LOG_LEVEL="WARNING",
        LOG_FILE_PATH=None,
        SEED_ALBUMS=True,
    )


@pytest.fixture
def album_store():
    """Fresh seeded album store"""
    return AlbumStore.seeded()


@pytest.fixture
def app(test_settings, album_store):
    """Application bound to the per-test store"""
    return create_app(settings=test_settings, store=album_store)


@pytest.fixture
def client(app):
    """Test client with the application lifespan running"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def new_album_payload():
    """Album body for create requests"""
    return {"id": "4", "title": "T", "artist": "A", "price": 9.99}


@pytest.fixture
def sample_album():
    """Album not present in the seed data"""
    return Album(id="4", title="Kind of Blue", artist="Miles Davis", price=29.99)


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )
