from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, Text

from portfolio.db.base import Base


class Post(Base):
    """Blog-style post. Timestamps are assigned by the server."""

    __tablename__ = "post"

    id = Column("post_id", Integer, primary_key=True)
    title = Column(String(200), nullable=False)
    category = Column(String(100), index=True)
    keywords = Column(String(500))
    summary = Column(Text)
    content = Column(Text, nullable=False)

    published_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(
        DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )
