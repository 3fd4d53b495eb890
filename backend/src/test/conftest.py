import pytest
from fastapi.testclient import TestClient

from feedstore.app import create_app
from feedstore.conf import Settings
from feedstore.storage import FeedStore


@pytest.fixture
def feeds_path(tmp_path):
    """Empty base directory for feeds."""
    path = tmp_path / "feeds"
    path.mkdir()
    return path


@pytest.fixture
def store(feeds_path):
    return FeedStore(feeds_path)


@pytest.fixture
def settings(feeds_path):
    return Settings(feeds_path=feeds_path, request_timeout=0)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
