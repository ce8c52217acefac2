"""Pydantic models for API request/response."""

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, Field

from domain.model.user import User, UserStatus


class UserResponse(BaseModel):
    """Response model for a user account."""
    id: str = Field(..., description="User ID")
    username: str
    name: str
    token: str = Field(..., description="Session token issued at registration")
    status: UserStatus = Field(..., description="Presence status: ONLINE or OFFLINE")
    creation_date: datetime
    birth_date: Optional[date] = None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            name=user.name,
            token=user.token,
            status=user.status,
            creation_date=user.creation_date,
            birth_date=user.birth_date,
        )


class RegisterRequest(BaseModel):
    """Request model for user registration."""
    username: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=100)


class LoginRequest(BaseModel):
    """Request model for user login."""
    username: str
    name: str


class LogoutRequest(BaseModel):
    """Request model for user logout."""
    id: str = Field(..., description="ID of the user to log out")


class ProfileChangesRequest(BaseModel):
    """Request model for a partial profile update. Omitted fields stay unchanged."""
    username: Optional[str] = Field(None, min_length=1, max_length=100)
    birth_date: Optional[str] = Field(None, description="Birth date as DD-MM-YYYY")
