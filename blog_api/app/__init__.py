"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The domain record lives in ``models``, the in‑memory
store and its lock in ``core``, business logic in ``services`` and
the HTTP surface in ``api/v1/endpoints``.  Versioning is handled by
grouping routers under the ``api/<version>/`` hierarchy.
"""

from .main import app, create_app  # noqa: F401
