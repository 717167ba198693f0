"""
Authentication service.

Single-admin login/join. A successful login binds a fresh opaque token to
the caller's session; the token must then be echoed in the Authorization
header of every mutating request (see portfolio.core.middleware).
"""

from typing import Any, MutableMapping, Optional

from sqlalchemy.orm import Session

from portfolio.core.config import settings
from portfolio.core.exceptions import AuthenticationFailed, DuplicateUserError, ValidationError
from portfolio.core.logging import get_logger
from portfolio.core.security import (
    SESSION_TOKEN_KEY,
    get_password_hash,
    issue_session_token,
    verify_password,
)
from portfolio.db import repository
from portfolio.models import User

logger = get_logger("portfolio.auth")

ADMIN_ROLE = "ADMIN"
INVALID_CREDENTIALS = "Invalid username or password"


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    """Get a user by username."""
    return repository.find_one_by(db, User, username=username)


def bootstrap_admin(db: Session) -> Optional[User]:
    """
    Create the configured default admin while no user exists yet.

    Disabled unless BOOTSTRAP_ADMIN_ENABLED is set and a bootstrap password
    is configured. Returns the created user, or None when nothing was done.
    """
    if not settings.BOOTSTRAP_ADMIN_ENABLED or not settings.BOOTSTRAP_ADMIN_PASSWORD:
        return None
    if db.query(User).first() is not None:
        return None

    admin = User(
        username=settings.BOOTSTRAP_ADMIN_USERNAME,
        password=get_password_hash(settings.BOOTSTRAP_ADMIN_PASSWORD),
        role=ADMIN_ROLE,
        enabled=True,
    )
    repository.save(db, admin)
    db.commit()
    logger.warning(f"Bootstrapped default admin account '{admin.username}'")
    return admin


def login(
    db: Session,
    username: Optional[str],
    password: Optional[str],
    session: MutableMapping[str, Any],
) -> str:
    """
    Verify credentials and bind a new token to the session.

    Raises:
        ValidationError: username or password missing
        AuthenticationFailed: unknown user, disabled user or wrong password
    """
    if not username or not password:
        raise ValidationError("username and password are required")

    user = get_user_by_username(db, username)
    if user is None and bootstrap_admin(db) is not None:
        user = get_user_by_username(db, username)

    if user is None or not verify_password(password, user.password):
        logger.warning(f"Failed login attempt for '{username}'")
        raise AuthenticationFailed(INVALID_CREDENTIALS)

    if not user.enabled:
        logger.warning(f"Login attempt for disabled account '{username}'")
        raise AuthenticationFailed("Account is disabled")

    token = issue_session_token()
    session[SESSION_TOKEN_KEY] = token
    logger.info(f"User '{username}' logged in")
    return token


def join(db: Session, username: Optional[str], password: Optional[str]) -> User:
    """
    Register a new ADMIN user.

    Raises:
        ValidationError: username or password missing
        DuplicateUserError: username already taken
    """
    if not username or not username.strip() or not password:
        raise ValidationError("username and password are required")

    username = username.strip()
    if get_user_by_username(db, username) is not None:
        raise DuplicateUserError(username)

    user = User(
        username=username,
        password=get_password_hash(password),
        role=ADMIN_ROLE,
        enabled=True,
    )
    repository.save(db, user)
    db.commit()
    db.refresh(user)

    logger.info(f"Registered admin '{username}'")
    return user
