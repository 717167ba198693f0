"""
Experience service: upsert-by-code of experiences and their companies.
"""

from typing import Optional

from sqlalchemy.orm import Session, joinedload

from portfolio.core.exceptions import ValidationError
from portfolio.core.logging import get_logger
from portfolio.core.text import has_text
from portfolio.db import repository
from portfolio.models import Company, Experience
from portfolio.schemas import ExperienceRequest, SectionResponse
from portfolio.services.sections import render_experiences

logger = get_logger("portfolio.experience")

# Optional company columns copied from the request when present
_COMPANY_FIELDS = {
    "company_address": "address",
    "company_phone": "phone",
    "company_industry": "industry",
    "company_department": "department",
    "company_position": "position",
    "company_salary": "salary",
}


def list_experiences(db: Session, company_code: Optional[str] = None) -> list[Experience]:
    """Experiences ordered by id, optionally restricted to one company."""
    query = db.query(Experience).options(joinedload(Experience.company))
    if has_text(company_code):
        query = query.join(Experience.company).filter(Company.company_code == company_code)
    return query.order_by(Experience.id.asc()).all()


def get_experience(db: Session, company_code: Optional[str] = None) -> Optional[SectionResponse]:
    """Render the experience section, or None when there is nothing to show."""
    experiences = list_experiences(db, company_code)
    if not experiences:
        return None
    return render_experiences(experiences)


def upsert_company(db: Session, request: ExperienceRequest) -> Company:
    company = repository.find_one_by(db, Company, company_code=request.company_code)
    if company is None:
        if not has_text(request.company_name):
            raise ValidationError("companyName is required for new company")
        company = Company(company_code=request.company_code)

    if has_text(request.company_name):
        company.name = request.company_name
    for source, target in _COMPANY_FIELDS.items():
        value = getattr(request, source)
        if value is not None:
            setattr(company, target, value)

    return repository.save(db, company)


def save_experience(db: Session, request: ExperienceRequest) -> SectionResponse:
    """
    Upsert the company then the experience, both keyed by their codes.

    Returns the freshly rendered section for the experience's company.
    """
    if not has_text(request.experience_code):
        raise ValidationError("experienceCode is required")
    if not has_text(request.company_code):
        raise ValidationError("companyCode is required")
    if not has_text(request.name):
        raise ValidationError("name is required")

    company = upsert_company(db, request)

    experience = repository.find_one_by(
        db, Experience, experience_code=request.experience_code
    )
    if experience is None:
        experience = Experience(experience_code=request.experience_code)

    experience.company = company
    experience.name = request.name
    experience.period = request.period
    experience.role = request.role
    experience.tech_stack = request.tech_stack
    experience.keywords = request.keywords
    experience.details = request.details

    repository.save(db, experience)
    db.commit()
    logger.info(
        f"Saved experience '{request.experience_code}' at company '{company.company_code}'"
    )

    section = get_experience(db, company.company_code)
    if section is None:
        raise RuntimeError("Failed to load experience after save")
    return section


def delete_experience(db: Session, experience_code: Optional[str]) -> None:
    """Delete by code. Unknown codes are ignored."""
    if not has_text(experience_code):
        raise ValidationError("experienceCode is required")

    experience = repository.find_one_by(db, Experience, experience_code=experience_code)
    if experience is None:
        return

    repository.delete(db, experience)
    db.commit()
    logger.info(f"Deleted experience '{experience_code}'")
