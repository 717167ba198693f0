"""
Shared response shapes: the uniform envelope, rendered sections and pages.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON while using snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(BaseModel, Generic[T]):
    """Uniform {success, message, data} envelope returned by every endpoint."""

    success: bool
    message: str
    data: Optional[T] = None

    @classmethod
    def ok(cls, data: Any = None) -> "ApiResponse":
        return cls(success=True, message="success", data=data)

    @classmethod
    def fail(cls, message: str) -> "ApiResponse":
        return cls(success=False, message=message, data=None)


class SectionResponse(BaseModel):
    """A rendered page region plus the structured data it was built from."""

    header: str = ""
    content: str = ""
    footer: str = ""
    metadata: Optional[Any] = None


class PageResponse(CamelModel, Generic[T]):
    items: list[T]
    total_pages: int
    total_elements: int
    page: int  # 1-based, as requested
    size: int
