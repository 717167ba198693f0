"""
Authentication API endpoints.

Single-admin login (session token) and admin registration.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from portfolio.db.session import get_db
from portfolio.schemas import ApiResponse, LoginRequest
from portfolio.services import auth_service

router = APIRouter()


@router.post("/login", response_model=ApiResponse[str])
def login(
    request: Request,
    body: Optional[LoginRequest] = None,
    db: Session = Depends(get_db),
):
    """
    Login and get the session token.

    Send the returned token as the Authorization header on every
    non-GET request. Wrong credentials yield a failure envelope.
    """
    body = body or LoginRequest()
    token = auth_service.login(db, body.username, body.password, request.session)
    return ApiResponse.ok(token)


@router.get("/admin/join", response_model=ApiResponse[str])
def join(
    username: Optional[str] = Query(default=None),
    password: Optional[str] = Query(default=None),
    db: Session = Depends(get_db),
):
    """Register a new ADMIN account."""
    auth_service.join(db, username, password)
    return ApiResponse.ok("Admin account created")
