"""
Session token gate.

GET/OPTIONS requests and the login/join endpoints pass freely. Every other
request needs a token bound to its session (set at login) and an
Authorization header equal to that token.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from portfolio.core.logging import get_logger
from portfolio.core.security import SESSION_TOKEN_KEY, tokens_match

logger = get_logger("portfolio.gate")

OPEN_METHODS = {"GET", "HEAD", "OPTIONS"}
OPEN_PATHS = {"/api/auth/login", "/api/auth/admin/join"}


def _deny(status_code: int, detail: str, request: Request) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} denied ({status_code}): {detail}")
    return JSONResponse(status_code=status_code, content={"detail": detail})


class SessionTokenMiddleware(BaseHTTPMiddleware):
    """Must sit inside SessionMiddleware so request.session is populated."""

    async def dispatch(self, request: Request, call_next):
        if request.method in OPEN_METHODS or request.url.path in OPEN_PATHS:
            return await call_next(request)

        session = request.session if "session" in request.scope else {}
        session_token = session.get(SESSION_TOKEN_KEY)
        if not session_token:
            return _deny(status.HTTP_401_UNAUTHORIZED, "Login required", request)

        header_token = request.headers.get("Authorization")
        if header_token is None:
            return _deny(status.HTTP_400_BAD_REQUEST, "Authorization header missing", request)

        if not tokens_match(session_token, header_token):
            return _deny(status.HTTP_403_FORBIDDEN, "Token mismatch", request)

        return await call_next(request)
