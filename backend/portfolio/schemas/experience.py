from typing import Optional

from portfolio.schemas.common import CamelModel


class ExperienceRequest(CamelModel):
    """
    Upsert payload for one experience and its company.

    Also used as the form echo inside the rendered section metadata.
    """

    experience_code: Optional[str] = None
    name: Optional[str] = None
    company_code: Optional[str] = None
    company_name: Optional[str] = None
    company_address: Optional[str] = None
    company_phone: Optional[str] = None
    company_industry: Optional[str] = None
    company_department: Optional[str] = None
    company_position: Optional[str] = None
    company_salary: Optional[int] = None
    period: Optional[str] = None
    role: Optional[str] = None
    tech_stack: Optional[str] = None
    keywords: Optional[str] = None
    details: Optional[str] = None


class ExperienceDisplayItem(CamelModel):
    """Experience with its free-text fields split for display."""

    experience_code: str
    title: Optional[str] = None
    company_name: Optional[str] = None
    company_department: Optional[str] = None
    company_position: Optional[str] = None
    company_industry: Optional[str] = None
    period: Optional[str] = None
    role: Optional[str] = None
    tech_stacks: list[str] = []
    keywords: list[str] = []
    details: list[str] = []


class ExperienceSectionMetadata(CamelModel):
    experiences: list[ExperienceRequest]
    timeline: list[ExperienceDisplayItem]
