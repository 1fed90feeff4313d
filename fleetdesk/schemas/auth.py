"""Authentication request/response schemas."""
from typing import Optional
from uuid import UUID

from pydantic import Field

from fleetdesk.models.enums import UserRole
from .base import BaseSchema


class CurrentUser(BaseSchema):
    """Authenticated user as exposed to clients."""

    id: UUID
    email: str
    role: UserRole
    driver_id: Optional[UUID] = None
    fleet_company_id: Optional[UUID] = None
    is_active: bool = True


class Token(BaseSchema):
    """JWT token response."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type (always 'bearer')")
    user: CurrentUser


class TokenData(BaseSchema):
    """Decoded JWT token data."""

    user_id: str | None = None
    role: UserRole | None = None


class UserLogin(BaseSchema):
    """Login credentials."""

    email: str = Field(..., min_length=3, max_length=100)
    password: str = Field(..., min_length=1)
