from portfolio.models.user import User
from portfolio.models.company import Company
from portfolio.models.experience import Experience
from portfolio.models.resume import Resume
from portfolio.models.post import Post

__all__ = ["User", "Company", "Experience", "Resume", "Post"]
