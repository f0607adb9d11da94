"""
Domain records.

Models here are plain value objects with their own validation rules.
They know nothing about HTTP or storage; schemas in ``schemas`` map
them to API payloads.
"""

from .post import Post, TITLE_MAX_LENGTH  # noqa: F401
