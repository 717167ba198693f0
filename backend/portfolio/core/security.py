"""
Security utilities for authentication.

Provides password hashing (bcrypt) and opaque session token generation.
"""

import secrets
import uuid
from typing import Optional

from passlib.context import CryptContext

# Session key under which the login token is stored
SESSION_TOKEN_KEY = "token"

# Password hashing context using bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: The plain text password to hash

    Returns:
        The hashed password string
    """
    return pwd_context.hash(password)


def issue_session_token() -> str:
    """Create a random opaque token to be bound to the caller's session."""
    return str(uuid.uuid4())


def tokens_match(session_token: Optional[str], header_token: Optional[str]) -> bool:
    """
    Compare the session-bound token with the one presented in a header.

    Both values must be present; comparison is exact and constant-time.
    """
    if not session_token or header_token is None:
        return False
    return secrets.compare_digest(session_token.encode(), header_token.encode())
