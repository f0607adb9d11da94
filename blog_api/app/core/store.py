"""
Thread‑safe in‑memory store for blog posts.

``PostStore`` is the only holder of authoritative post state.  It
keeps a mapping of ID to ``Post`` and a monotonically increasing
``next_id`` counter, both guarded by a single reader/writer lock:

* ``get_by_id``, ``get_all``, ``exists`` and ``len()`` take the lock
  in shared mode;
* every mutation takes it in exclusive mode.

Values are copied on the way in and on the way out.  Nothing a caller
does to a ``Post`` it passed in or received back can change what the
store holds.  The store does no logging and no I/O while holding the
lock; callers log around it.

An ID, once handed out or inserted, is never reused: ``next_id`` only
moves forward, even after deletions.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from ..models.post import Post
from .exceptions import PostAlreadyExistsError, PostNotFoundError
from .rwlock import ReadWriteLock


class PostStore:
    """In‑memory post collection keyed by integer ID."""

    def __init__(self) -> None:
        self._posts: Dict[int, Post] = {}
        self._next_id = 1
        self._lock = ReadWriteLock()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create_with_generated_id(self, title: str, content: str, author: str) -> Post:
        """Validate, assign the next ID and store a new post.

        Validation runs before an ID is allocated, so invalid input
        never leaves a gap in the sequence.  Allocation and insertion
        happen under one exclusive lock hold, so concurrent callers
        always receive distinct IDs.

        Raises
        ------
        PostValidationError
            If any field is invalid.
        """
        with self._lock.write_lock():
            post = Post.create(self._next_id, title, content, author)
            self._posts[post.id] = post.copy()
            self._next_id += 1
        return post

    def create_with_explicit_id(self, post: Post) -> None:
        """Insert ``post`` under its own ID.

        The post is expected to be validated already.  Fails instead of
        overwriting when the ID is taken.

        Raises
        ------
        PostAlreadyExistsError
            If a post with the same ID is already stored.
        """
        stored = post.copy()
        with self._lock.write_lock():
            if stored.id in self._posts:
                raise PostAlreadyExistsError(stored.id)
            self._posts[stored.id] = stored
            if stored.id >= self._next_id:
                self._next_id = stored.id + 1

    def update(self, post_id: int, post: Post) -> None:
        """Replace the stored post under ``post_id``.

        The ID carried by ``post`` is ignored; the stored copy always
        keeps ``post_id``.

        Raises
        ------
        PostNotFoundError
            If nothing is stored under ``post_id``.
        """
        stored = post.copy()
        stored.id = post_id
        with self._lock.write_lock():
            if post_id not in self._posts:
                raise PostNotFoundError(post_id)
            self._posts[post_id] = stored

    def delete(self, post_id: int) -> None:
        """Remove the post under ``post_id``.

        Raises
        ------
        PostNotFoundError
            If nothing is stored under ``post_id``.
        """
        with self._lock.write_lock():
            if post_id not in self._posts:
                raise PostNotFoundError(post_id)
            del self._posts[post_id]

    def bulk_load(self, posts: Iterable[Post]) -> None:
        """Insert a batch of posts, overwriting existing IDs.

        Used at startup.  The whole batch is applied under a single
        exclusive lock hold and ``next_id`` ends one past the highest
        ID seen.
        """
        copies = [post.copy() for post in posts]
        with self._lock.write_lock():
            for stored in copies:
                self._posts[stored.id] = stored
                if stored.id >= self._next_id:
                    self._next_id = stored.id + 1

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_by_id(self, post_id: int) -> Post:
        """Return a copy of the post under ``post_id``.

        Raises
        ------
        PostNotFoundError
            If nothing is stored under ``post_id``.
        """
        with self._lock.read_lock():
            post = self._posts.get(post_id)
            if post is None:
                raise PostNotFoundError(post_id)
            return post.copy()

    def get_all(self) -> List[Post]:
        """Return copies of all posts, ordered by ascending ID."""
        with self._lock.read_lock():
            posts = [post.copy() for post in self._posts.values()]
        posts.sort(key=lambda p: p.id)
        return posts

    def exists(self, post_id: int) -> bool:
        with self._lock.read_lock():
            return post_id in self._posts

    def __len__(self) -> int:
        with self._lock.read_lock():
            return len(self._posts)

    @property
    def next_id(self) -> int:
        """ID the next generated‑ID create will receive."""
        with self._lock.read_lock():
            return self._next_id
