"""
FastAPI dependencies shared by the endpoint modules.

The store and service are created once per application in
``create_app`` and kept on ``app.state``; handlers reach the service
through this dependency instead of importing a module‑level instance.
"""

from fastapi import Request

from blog_api.app.services.post_service import PostService


def get_post_service(request: Request) -> PostService:
    return request.app.state.post_service
