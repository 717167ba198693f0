from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from portfolio.core.config import settings
from portfolio.core.exceptions import PortfolioError
from portfolio.core.logging import get_logger
from portfolio.core.middleware import SessionTokenMiddleware
from portfolio.db.base import Base
from portfolio.db.session import engine
from portfolio.schemas import ApiResponse

# Import all models so SQLAlchemy can discover them for table creation
from portfolio.models import User, Company, Experience, Resume, Post  # noqa: F401

# Import API router
from portfolio.api.api import api_router

logger = get_logger("portfolio")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create database tables on startup."""
    Base.metadata.create_all(bind=engine)
    logger.info(f"{settings.APP_NAME} started")
    yield


app = FastAPI(
    title=settings.APP_NAME,
    description="Personal portfolio backend: resume, experience and posts",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(PortfolioError)
async def portfolio_error_handler(request: Request, exc: PortfolioError):
    """Business failures become a failure envelope instead of an HTTP error."""
    logger.info(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=200,
        content=ApiResponse.fail(exc.message).model_dump(),
    )


# Middleware added last runs first: CORS -> session cookie -> token gate
app.add_middleware(SessionTokenMiddleware)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    session_cookie=settings.SESSION_COOKIE,
    max_age=settings.SESSION_MAX_AGE,
    same_site=settings.SESSION_SAME_SITE,
    https_only=settings.SESSION_HTTPS_ONLY,
)

# CORS Middleware - allowlist from env (comma-separated)
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in settings.BACKEND_CORS_ORIGINS.split(",")
    if origin.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
    max_age=3600,
)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint."""
    return {"message": f"Welcome to {settings.APP_NAME} API"}


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


app.include_router(api_router, prefix="/api")
