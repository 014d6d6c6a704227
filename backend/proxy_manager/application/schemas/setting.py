"""Pydantic DTOs for global settings."""

from datetime import datetime

from pydantic import BaseModel, Field


class SettingPut(BaseModel):
    """Upsert payload keyed on ``key``; an omitted description clears it."""

    key: str = Field(..., min_length=1, examples=["default_port"])
    value: str = Field(..., examples=["8080"])
    description: str | None = None


class SettingResponse(BaseModel):
    id: int
    key: str
    value: str
    description: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
