"""
Experience API endpoints.

Rendered experience timeline, upsert by experienceCode, delete by code.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from portfolio.db.session import get_db
from portfolio.schemas import ApiResponse, ExperienceRequest, SectionResponse
from portfolio.services import experience_service

router = APIRouter()


@router.get("", response_model=ApiResponse[SectionResponse])
def get_experience(
    company: Optional[str] = Query(default=None),
    db: Session = Depends(get_db),
):
    """Experience section for one company (by companyCode), or for all."""
    section = experience_service.get_experience(db, company)
    if section is None:
        return ApiResponse.fail("Experience not found")
    return ApiResponse.ok(section)


@router.post("", response_model=ApiResponse[SectionResponse])
def save_experience(request: ExperienceRequest, db: Session = Depends(get_db)):
    return ApiResponse.ok(experience_service.save_experience(db, request))


@router.delete("", response_model=ApiResponse[str])
def delete_experience(
    experience_code: Optional[str] = Query(default=None, alias="experienceCode"),
    db: Session = Depends(get_db),
):
    experience_service.delete_experience(db, experience_code)
    return ApiResponse.ok("deleted")
