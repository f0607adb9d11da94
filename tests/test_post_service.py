# tests/test_post_service.py
import pytest

from blog_api.app.core.exceptions import PostNotFoundError, PostValidationError
from blog_api.app.services.post_service import PostService


@pytest.fixture
def service(store):
    return PostService(store)


def test_create_and_get(service):
    created = service.create_post("Title", "Content", "Author")
    assert service.get_post_by_id(created.id) == created


def test_create_invalid(service):
    with pytest.raises(PostValidationError, match="content is required"):
        service.create_post("Title", " ", "Author")


def test_get_all_posts(service):
    service.create_post("A", "c", "a")
    service.create_post("B", "c", "a")
    assert [p.title for p in service.get_all_posts()] == ["A", "B"]


def test_update_post(service, store):
    created = service.create_post("Title", "Content", "Author")
    updated = service.update_post(created.id, "New", "Body", "Bob")
    assert updated.id == created.id
    assert store.get_by_id(created.id).to_dict() == {
        "id": created.id,
        "title": "New",
        "content": "Body",
        "author": "Bob",
    }


def test_update_invalid_leaves_store_unchanged(service, store):
    created = service.create_post("Title", "Content", "Author")
    with pytest.raises(PostValidationError, match="title must be less than 255 characters"):
        service.update_post(created.id, "x" * 256, "Body", "Bob")
    assert store.get_by_id(created.id) == created


def test_update_missing(service):
    with pytest.raises(PostNotFoundError):
        service.update_post(1, "New", "Body", "Bob")


def test_delete_post(service, store):
    created = service.create_post("Title", "Content", "Author")
    service.delete_post(created.id)
    assert not store.exists(created.id)
    with pytest.raises(PostNotFoundError):
        service.delete_post(created.id)


def test_service_logs_writes(service, caplog):
    caplog.set_level("INFO", logger="blog_api.app.services.post_service")
    service.create_post("Title", "Content", "Author")
    assert "Created post 1" in caplog.text
