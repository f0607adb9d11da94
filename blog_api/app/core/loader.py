"""
Startup data loading.

``DataLoader`` reads a JSON document of the form::

    {"posts": [{"id": 1, "title": "...", "content": "...", "author": "..."}]}

and bulk‑loads it into a ``PostStore``.  Every record is validated
before anything is inserted; the first invalid record aborts the
whole load and the store is left untouched.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from ..models.post import Post
from .exceptions import DataLoadError, PostValidationError
from .store import PostStore

logger = logging.getLogger(__name__)


class DataLoader:
    """Populate a store from a JSON file."""

    def __init__(self, store: PostStore) -> None:
        self.store = store

    def load_from_file(self, filename: Union[str, Path]) -> int:
        """Load posts from ``filename`` and return how many were loaded.

        Raises
        ------
        DataLoadError
            If the file cannot be read or parsed, has the wrong shape,
            or contains an invalid post.
        """
        path = Path(filename)
        logger.info("Loading blog data from %s", path)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to read data file %s: %s", path, exc)
            raise DataLoadError(f"cannot read {path}: {exc}") from exc
        try:
            document = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.error("Failed to parse JSON data in %s: %s", path, exc)
            raise DataLoadError(f"invalid JSON in {path}: {exc}") from exc

        posts = self.build_posts(document)
        self.store.bulk_load(posts)
        logger.info("Successfully loaded %d blog posts", len(posts))
        return len(posts)

    @staticmethod
    def build_posts(document: Any) -> List[Post]:
        """Turn a parsed document into validated ``Post`` objects."""
        if not isinstance(document, dict):
            raise DataLoadError("data document must be a JSON object")
        records = document.get("posts", [])
        if not isinstance(records, list):
            raise DataLoadError("'posts' must be a list")

        posts: List[Post] = []
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise DataLoadError(f"post #{index} must be a JSON object")
            post_id = record.get("id")
            if not isinstance(post_id, int) or isinstance(post_id, bool) or post_id < 1:
                raise DataLoadError(f"post #{index} has an invalid id: {post_id!r}")
            title, content, author = (
                _text_field(record, index, name) for name in ("title", "content", "author")
            )
            try:
                post = Post.create(post_id, title, content, author)
            except PostValidationError as exc:
                logger.error("Failed to create post entity %s: %s", post_id, exc)
                raise DataLoadError(f"post {post_id}: {exc}") from exc
            posts.append(post)
        return posts


def _text_field(record: Dict[str, Any], index: int, name: str) -> str:
    """Return a string field; a missing or null field reads as blank."""
    value = record.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DataLoadError(f"post #{index}: {name} must be a string")
    return value
