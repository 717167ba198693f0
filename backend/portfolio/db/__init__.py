"""Database package."""

from portfolio.db.base import Base
from portfolio.db.session import SessionLocal, engine, get_db

__all__ = ["Base", "SessionLocal", "engine", "get_db"]
