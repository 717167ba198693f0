"""
Resume API endpoints.

The single resume rendered as a section, upsert by memberCode, delete.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from portfolio.db.session import get_db
from portfolio.schemas import ApiResponse, ResumeRequest, SectionResponse
from portfolio.services import resume_service

router = APIRouter()


@router.get("", response_model=ApiResponse[SectionResponse])
def get_resume(db: Session = Depends(get_db)):
    section = resume_service.get_resume(db)
    if section is None:
        return ApiResponse.fail("Resume not found")
    return ApiResponse.ok(section)


@router.post("", response_model=ApiResponse[SectionResponse])
def save_resume(request: ResumeRequest, db: Session = Depends(get_db)):
    return ApiResponse.ok(resume_service.save_resume(db, request))


@router.delete("", response_model=ApiResponse[str])
def delete_resume(
    member_code: Optional[str] = Query(default=None, alias="memberCode"),
    db: Session = Depends(get_db),
):
    resume_service.delete_resume(db, member_code)
    return ApiResponse.ok("deleted")
