from typing import Optional

from portfolio.schemas.common import CamelModel


class ResumeRequest(CamelModel):
    """Upsert payload for the resume, keyed by member_code."""

    member_code: Optional[str] = None
    name: Optional[str] = None
    gender: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    summary: Optional[str] = None
    skills: Optional[str] = None
    experiences: Optional[str] = None  # "company | period | department | position" per line
    activities: Optional[str] = None
    education: Optional[str] = None


class ResumeSectionMetadata(CamelModel):
    form: ResumeRequest
