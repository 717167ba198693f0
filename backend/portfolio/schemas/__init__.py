from portfolio.schemas.common import ApiResponse, CamelModel, PageResponse, SectionResponse
from portfolio.schemas.auth import LoginRequest
from portfolio.schemas.experience import (
    ExperienceDisplayItem,
    ExperienceRequest,
    ExperienceSectionMetadata,
)
from portfolio.schemas.resume import ResumeRequest, ResumeSectionMetadata
from portfolio.schemas.post import PostRequest, PostResponse

__all__ = [
    "ApiResponse",
    "CamelModel",
    "PageResponse",
    "SectionResponse",
    "LoginRequest",
    "ExperienceDisplayItem",
    "ExperienceRequest",
    "ExperienceSectionMetadata",
    "ResumeRequest",
    "ResumeSectionMetadata",
    "PostRequest",
    "PostResponse",
]
