"""
Post service: paginated listing and CRUD for blog-style posts.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from portfolio.core.exceptions import NotFoundError, ValidationError
from portfolio.core.logging import get_logger
from portfolio.core.text import has_text
from portfolio.db import repository
from portfolio.models import Post
from portfolio.schemas import PageResponse, PostRequest, PostResponse

logger = get_logger("portfolio.posts")

ALL_CATEGORIES = "all"


def normalize(value: Optional[str]) -> Optional[str]:
    """Trim; empty strings become None."""
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def validate_request(request: Optional[PostRequest]) -> None:
    if request is None:
        raise ValidationError("Request is required")
    if not has_text(request.title):
        raise ValidationError("Title is required")
    if not has_text(request.content):
        raise ValidationError("Content is required")


def get_posts(
    db: Session, category: Optional[str], page: int, size: int
) -> PageResponse[PostResponse]:
    """
    List posts newest first.

    `page` is 1-based; blank or "all" category means no filter.
    """
    if size < 1:
        raise ValidationError("size must be at least 1")

    query = db.query(Post)
    if has_text(category) and category.strip().lower() != ALL_CATEGORIES:
        query = query.filter(Post.category == category)
    query = query.order_by(Post.id.desc())

    result = repository.paginate(query, max(page - 1, 0), size)

    return PageResponse[PostResponse](
        items=[PostResponse.model_validate(p) for p in result.items],
        total_pages=result.total_pages,
        total_elements=result.total,
        page=page,
        size=size,
    )


def get_post(db: Session, post_id: int) -> Optional[PostResponse]:
    post = repository.find_by_id(db, Post, post_id)
    if post is None:
        return None
    return PostResponse.model_validate(post)


def create_post(db: Session, request: PostRequest) -> PostResponse:
    validate_request(request)

    post = Post(
        title=request.title.strip(),
        category=normalize(request.category),
        keywords=normalize(request.keywords),
        summary=normalize(request.summary),
        content=request.content,
    )
    repository.save(db, post)
    db.commit()
    db.refresh(post)
    logger.info(f"Created post {post.id}")

    return PostResponse.model_validate(post)


def update_post(db: Session, post_id: int, request: PostRequest) -> PostResponse:
    validate_request(request)

    post = repository.find_by_id(db, Post, post_id)
    if post is None:
        raise NotFoundError("Post not found")

    post.title = request.title.strip()
    post.category = normalize(request.category)
    post.keywords = normalize(request.keywords)
    post.summary = normalize(request.summary)
    post.content = request.content
    # Touch even when no column changed
    post.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(post)
    logger.info(f"Updated post {post_id}")

    return PostResponse.model_validate(post)


def delete_post(db: Session, post_id: int) -> None:
    post = repository.find_by_id(db, Post, post_id)
    if post is None:
        raise NotFoundError("Post not found")

    repository.delete(db, post)
    db.commit()
    logger.info(f"Deleted post {post_id}")
