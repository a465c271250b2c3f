from datetime import datetime

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Schema for starting an admin session with a storefront bearer token"""

    token: str = Field(min_length=1)


class Token(BaseModel):
    """Schema for the signed session token response"""

    access_token: str
    token_type: str = "bearer"  # noqa: S105 - not a password, standard OAuth terminology


class SessionInfo(BaseModel):
    """Schema for the current admin session"""

    session_id: str
    created_at: datetime
    expires_at: datetime
    categories_loaded: int
