from portfolio.services import auth_service, experience_service, post_service, resume_service
from portfolio.services.sections import (
    render_experiences,
    render_resume,
    split_details,
    split_tags,
)

__all__ = [
    "auth_service",
    "experience_service",
    "post_service",
    "resume_service",
    "render_experiences",
    "render_resume",
    "split_details",
    "split_tags",
]
