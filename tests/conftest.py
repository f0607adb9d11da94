# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from blog_api.app.core.config import Settings
from blog_api.app.core.store import PostStore
from blog_api.app.main import create_app
from blog_api.app.models.post import Post


@pytest.fixture
def store():
    """A fresh, empty post store."""
    return PostStore()


@pytest.fixture
def test_settings(tmp_path):
    """Settings that never touch the real data file."""
    return Settings(load_data=False, data_file=str(tmp_path / "missing.json"))


@pytest.fixture
def client(store, test_settings):
    """TestClient around an app that serves the ``store`` fixture."""
    app = create_app(settings=test_settings, store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_post():
    return Post.create(1, "Hello", "First post", "Alice")
