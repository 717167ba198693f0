from datetime import datetime
from typing import Optional

from portfolio.schemas.common import CamelModel


class PostRequest(CamelModel):
    """Create/update payload. Timestamps are never accepted from clients."""

    title: Optional[str] = None
    category: Optional[str] = None
    keywords: Optional[str] = None
    summary: Optional[str] = None
    content: Optional[str] = None


class PostResponse(CamelModel):
    id: int
    title: str
    category: Optional[str] = None
    keywords: Optional[str] = None
    summary: Optional[str] = None
    content: str
    published_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
