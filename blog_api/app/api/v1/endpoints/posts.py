"""
Post endpoints for API v1.

These routes provide CRUD operations for blog posts.  Handlers are
plain (synchronous) functions, so FastAPI runs them in its thread
pool and concurrent requests reach the store from several threads at
once; the store's lock keeps that safe.

Domain errors are translated here: an unknown ID becomes a 404 and a
validation failure becomes a 400 whose ``message`` is the validation
text.  The error body shape is produced by the HTTP exception handler
registered in ``main.create_app``.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, status

from blog_api.app.api.dependencies import get_post_service
from blog_api.app.core.exceptions import PostNotFoundError, PostValidationError
from blog_api.app.schemas.post import ErrorResponse, PostCreate, PostList, PostRead, PostUpdate
from blog_api.app.services.post_service import PostService

router = APIRouter()

# Largest ID accepted in a path; anything wider is a malformed ID.
POST_ID_MAX = 2**63 - 1

_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"error": "not_found", "message": "Post not found"},
    )


def _bad_request(error: str, exc: PostValidationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"error": error, "message": exc.message},
    )


@router.post("", response_model=PostRead, status_code=status.HTTP_201_CREATED, responses=_ERRORS)
@router.post("/", response_model=PostRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_post(
    post_in: PostCreate,
    service: PostService = Depends(get_post_service),
) -> PostRead:
    """Create a new post.

    The store assigns the ID.  Empty fields or a title longer than 255
    characters are rejected by the schema (``validation_error``);
    whitespace‑only fields yield a 400 ``creation_failed`` error.
    """
    try:
        post = service.create_post(post_in.title, post_in.content, post_in.author)
    except PostValidationError as exc:
        raise _bad_request("creation_failed", exc) from exc
    return PostRead.from_post(post)


@router.get("", response_model=PostList)
@router.get("/", response_model=PostList, include_in_schema=False)
def list_posts(service: PostService = Depends(get_post_service)) -> PostList:
    """Return every post, ordered by ascending ID, with the total count."""
    return PostList.from_posts(service.get_all_posts())


@router.get("/{post_id}", response_model=PostRead, responses=_ERRORS)
def get_post(
    post_id: int = Path(..., le=POST_ID_MAX),
    service: PostService = Depends(get_post_service),
) -> PostRead:
    """Retrieve a single post by ID.

    Returns HTTP 404 if the post does not exist and HTTP 400 if the ID
    is not an integer or does not fit in 64 bits.
    """
    try:
        post = service.get_post_by_id(post_id)
    except PostNotFoundError as exc:
        raise _not_found() from exc
    return PostRead.from_post(post)


@router.put("/{post_id}", response_model=PostRead, responses=_ERRORS)
def update_post(
    post_in: PostUpdate,
    post_id: int = Path(..., le=POST_ID_MAX),
    service: PostService = Depends(get_post_service),
) -> PostRead:
    """Replace title, content and author of an existing post.

    The ID never changes.  Whitespace‑only fields yield a 400
    ``update_failed`` error and leave the stored post untouched.
    """
    try:
        post = service.update_post(post_id, post_in.title, post_in.content, post_in.author)
    except PostNotFoundError as exc:
        raise _not_found() from exc
    except PostValidationError as exc:
        raise _bad_request("update_failed", exc) from exc
    return PostRead.from_post(post)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_ERRORS)
def delete_post(
    post_id: int = Path(..., le=POST_ID_MAX),
    service: PostService = Depends(get_post_service),
) -> None:
    """Delete a post.  Its ID is never handed out again."""
    try:
        service.delete_post(post_id)
    except PostNotFoundError as exc:
        raise _not_found() from exc
    return None
