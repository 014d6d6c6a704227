"""Pydantic DTOs for proxy usage sessions."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from proxy_manager.domain.validation import require_ip_address


class ProxySessionCreate(BaseModel):
    """Schema for recording a client session against a proxy."""

    proxy_id: int
    client_address: str = Field(..., examples=["203.0.113.7"])
    login_time: datetime
    logout_time: datetime | None = None
    bytes_transferred: int = Field(0, ge=0)

    @field_validator("client_address")
    @classmethod
    def _check_client_address(cls, value: str) -> str:
        return require_ip_address("client_address", value)


class ProxySessionResponse(BaseModel):
    id: int
    proxy_id: int
    client_address: str
    login_time: datetime
    logout_time: datetime | None
    bytes_transferred: int
    created_at: datetime

    model_config = {"from_attributes": True}
