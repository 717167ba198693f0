"""
Post API endpoints.

Paginated listing (1-based page) and CRUD for posts.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from portfolio.db.session import get_db
from portfolio.schemas import ApiResponse, PageResponse, PostRequest, PostResponse
from portfolio.services import post_service

router = APIRouter()


@router.get("", response_model=ApiResponse[PageResponse[PostResponse]])
def get_posts(
    category: Optional[str] = Query(default=None),
    page: int = Query(default=1),
    size: int = Query(default=10),
    db: Session = Depends(get_db),
):
    return ApiResponse.ok(post_service.get_posts(db, category, page, size))


@router.get("/{post_id}", response_model=ApiResponse[PostResponse])
def get_post(post_id: int, db: Session = Depends(get_db)):
    post = post_service.get_post(db, post_id)
    if post is None:
        return ApiResponse.fail("Post not found")
    return ApiResponse.ok(post)


@router.post("", response_model=ApiResponse[PostResponse])
def create_post(request: PostRequest, db: Session = Depends(get_db)):
    return ApiResponse.ok(post_service.create_post(db, request))


@router.put("/{post_id}", response_model=ApiResponse[PostResponse])
def update_post(post_id: int, request: PostRequest, db: Session = Depends(get_db)):
    return ApiResponse.ok(post_service.update_post(db, post_id, request))


@router.delete("/{post_id}", response_model=ApiResponse[str])
def delete_post(post_id: int, db: Session = Depends(get_db)):
    post_service.delete_post(db, post_id)
    return ApiResponse.ok("deleted")
