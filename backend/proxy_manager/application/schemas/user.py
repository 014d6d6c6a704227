"""Pydantic DTOs for operator accounts."""

from datetime import datetime

from pydantic import BaseModel, Field

from proxy_manager.domain.entities import AccessLevel
from proxy_manager.domain.validation import MIN_PASSWORD_LENGTH, MIN_USERNAME_LENGTH


class UserCreate(BaseModel):
    username: str = Field(..., min_length=MIN_USERNAME_LENGTH, examples=["operator"])
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)
    access_level: AccessLevel = AccessLevel.USER


class UserUpdate(BaseModel):
    """Schema for updating an existing user: all fields optional."""

    username: str | None = Field(None, min_length=MIN_USERNAME_LENGTH)
    password: str | None = Field(None, min_length=MIN_PASSWORD_LENGTH)
    access_level: AccessLevel | None = None


class UserResponse(BaseModel):
    """Schema returned to the client: the password hash stays server-side."""

    id: int
    username: str
    access_level: AccessLevel
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class UserDeleteResponse(BaseModel):
    success: bool
    message: str

    model_config = {"from_attributes": True}
