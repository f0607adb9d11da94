"""
Service layer for blog posts.

``PostService`` sits between the HTTP handlers and the ``PostStore``.
It holds no state of its own: every call is a pass‑through to the
store plus the validation and update rules of the ``Post`` record.
Errors raised by the store or by validation propagate unchanged so the
API layer can map them to status codes.
"""

from __future__ import annotations

import logging
from typing import List

from blog_api.app.core.store import PostStore
from blog_api.app.models.post import Post

logger = logging.getLogger(__name__)


class PostService:
    """Service class for managing blog posts."""

    def __init__(self, store: PostStore) -> None:
        self.store = store

    def create_post(self, title: str, content: str, author: str) -> Post:
        """Create a post with a store‑assigned ID and return it."""
        logger.info("Creating new post title=%r author=%r", title, author)
        post = self.store.create_with_generated_id(title, content, author)
        logger.info("Created post %s", post.id)
        return post

    def get_post_by_id(self, post_id: int) -> Post:
        logger.debug("Retrieving post %s", post_id)
        return self.store.get_by_id(post_id)

    def get_all_posts(self) -> List[Post]:
        logger.debug("Retrieving all posts")
        posts = self.store.get_all()
        logger.debug("Retrieved %d posts", len(posts))
        return posts

    def update_post(self, post_id: int, title: str, content: str, author: str) -> Post:
        """Replace title, content and author of an existing post.

        The current post is fetched, updated in place (which validates
        the new values) and written back.  Raises
        ``PostNotFoundError`` for an unknown ID and
        ``PostValidationError`` for invalid fields; in both cases the
        stored post is unchanged.
        """
        logger.info("Updating post %s title=%r author=%r", post_id, title, author)
        post = self.store.get_by_id(post_id)
        post.update(title, content, author)
        self.store.update(post_id, post)
        logger.info("Updated post %s", post_id)
        return post

    def delete_post(self, post_id: int) -> None:
        logger.info("Deleting post %s", post_id)
        self.store.delete(post_id)
        logger.info("Deleted post %s", post_id)
