"""
Post domain record.

A ``Post`` is a plain value object.  Every copy handed out by the
store is independent, so callers are free to mutate what they
receive.  Validation rules are checked in a fixed order: blank
title, blank content, blank author, then title length.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict

from ..core.exceptions import PostValidationError

TITLE_MAX_LENGTH = 255


def _check_fields(title: str, content: str, author: str) -> None:
    if not title or not title.strip():
        raise PostValidationError("title is required")
    if not content or not content.strip():
        raise PostValidationError("content is required")
    if not author or not author.strip():
        raise PostValidationError("author is required")
    if len(title) > TITLE_MAX_LENGTH:
        raise PostValidationError(f"title must be less than {TITLE_MAX_LENGTH} characters")


@dataclass
class Post:
    """A blog post: identifier, title, content and author."""

    id: int
    title: str
    content: str
    author: str

    @classmethod
    def create(cls, id: int, title: str, content: str, author: str) -> "Post":
        """Build a validated post.

        Raises
        ------
        PostValidationError
            If any field breaks a validation rule.  Only the first
            violated rule is reported.
        """
        _check_fields(title, content, author)
        return cls(id=id, title=title, content=content, author=author)

    def validate(self) -> None:
        """Check the current fields without changing anything."""
        _check_fields(self.title, self.content, self.author)

    def update(self, title: str, content: str, author: str) -> None:
        """Replace title, content and author.

        The new values are validated first; on failure the post is left
        exactly as it was.
        """
        _check_fields(title, content, author)
        self.title = title
        self.content = content
        self.author = author

    def copy(self) -> "Post":
        return dataclasses.replace(self)

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)
