"""
Pydantic models for blog post payloads.

Request bodies require ``title``, ``content`` and ``author`` to be
non‑empty strings, with ``title`` at most 255 characters; breaking
those limits is reported as ``validation_error``.  Whitespace‑only
values pass the schema and are rejected by the ``Post`` record itself.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from blog_api.app.models.post import TITLE_MAX_LENGTH, Post


class PostBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH, examples=["Hello, world"])
    content: str = Field(..., min_length=1, examples=["First post on the new blog."])
    author: str = Field(..., min_length=1, examples=["Jane Doe"])


class PostCreate(PostBase):
    """Schema for creating a post."""
    pass


class PostUpdate(PostBase):
    """Schema for updating a post.

    All three fields are required; an update replaces the whole post
    apart from its ID.
    """
    pass


class PostRead(PostBase):
    """Schema for reading a post from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }

    @classmethod
    def from_post(cls, post: Post) -> "PostRead":
        return cls.model_validate(post)


class PostList(BaseModel):
    """List response with the total number of posts."""

    posts: List[PostRead]
    total: int

    @classmethod
    def from_posts(cls, posts: List[Post]) -> "PostList":
        return cls(posts=[PostRead.from_post(p) for p in posts], total=len(posts))


class ErrorResponse(BaseModel):
    """Body returned for every error response."""

    error: str = Field(..., examples=["not_found"])
    message: Optional[str] = Field(None, examples=["Post not found"])
