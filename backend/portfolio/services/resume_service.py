"""
Resume service. The site serves a single resume: the row with the lowest id.
"""

from typing import Optional

from sqlalchemy.orm import Session

from portfolio.core.exceptions import ValidationError
from portfolio.core.logging import get_logger
from portfolio.core.text import has_text
from portfolio.db import repository
from portfolio.models import Resume
from portfolio.schemas import ResumeRequest, SectionResponse
from portfolio.services.sections import render_resume

logger = get_logger("portfolio.resume")


def get_resume(db: Session) -> Optional[SectionResponse]:
    resume = db.query(Resume).order_by(Resume.id.asc()).first()
    if resume is None:
        return None
    return render_resume(resume)


def save_resume(db: Session, request: ResumeRequest) -> SectionResponse:
    """Create or replace the resume identified by member_code."""
    if not has_text(request.member_code):
        raise ValidationError("memberCode is required")
    if not has_text(request.name):
        raise ValidationError("name is required")

    resume = repository.find_one_by(db, Resume, member_code=request.member_code)
    if resume is None:
        resume = Resume(member_code=request.member_code)

    resume.name = request.name
    resume.gender = request.gender
    resume.email = request.email
    resume.phone = request.phone
    resume.address = request.address
    resume.summary = request.summary
    resume.skills = request.skills
    resume.experiences = request.experiences
    resume.activities = request.activities
    resume.education = request.education

    repository.save(db, resume)
    db.commit()
    db.refresh(resume)
    logger.info(f"Saved resume '{request.member_code}'")

    return render_resume(resume)


def delete_resume(db: Session, member_code: Optional[str]) -> None:
    """Delete by member code. Unknown codes are ignored."""
    if not has_text(member_code):
        raise ValidationError("memberCode is required")

    resume = repository.find_one_by(db, Resume, member_code=member_code)
    if resume is None:
        return

    repository.delete(db, resume)
    db.commit()
    logger.info(f"Deleted resume '{member_code}'")
