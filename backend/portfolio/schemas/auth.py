from typing import Optional

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Schema for the login body. Missing fields are reported in the envelope."""

    username: Optional[str] = None
    password: Optional[str] = None
