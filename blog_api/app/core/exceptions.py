"""
Error types raised by the post entity, the store and the data loader.

The HTTP layer maps these to status codes in ``main.create_app``:
validation errors become 400 responses and missing posts become 404.
"""

from __future__ import annotations


class PostError(Exception):
    """Base class for all post related errors."""


class PostValidationError(PostError):
    """A post field is missing, blank or too long.

    ``str(exc)`` is the human readable message returned to clients.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class PostNotFoundError(PostError):
    """No post is stored under the requested ID."""

    def __init__(self, post_id: int) -> None:
        super().__init__(f"post {post_id} not found")
        self.post_id = post_id


class PostAlreadyExistsError(PostError):
    """An explicit‑ID insert targeted an ID that is already taken."""

    def __init__(self, post_id: int) -> None:
        super().__init__(f"post {post_id} already exists")
        self.post_id = post_id


class DataLoadError(Exception):
    """The startup data file could not be read, parsed or validated."""
