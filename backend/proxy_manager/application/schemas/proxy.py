"""Pydantic DTOs (Data Transfer Objects) for the Proxy feature."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from proxy_manager.domain.entities import ProxyStatus
from proxy_manager.domain.validation import MAX_PORT, MIN_PORT, require_ip_address


class ProxyCreate(BaseModel):
    """Schema for registering a new proxy device.

    Status and public address are not accepted: new devices always start
    offline with no address assigned.
    """

    device_name: str = Field(..., min_length=1, examples=["Gate-1"])
    internal_address: str = Field(..., examples=["10.0.0.5"])
    port: int = Field(..., ge=MIN_PORT, le=MAX_PORT, examples=[8080])
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("internal_address")
    @classmethod
    def _check_internal_address(cls, value: str) -> str:
        return require_ip_address("internal_address", value)


class ProxyStatusUpdate(BaseModel):
    """Partial update: only fields present in the payload are applied.

    An explicit ``"public_address": null`` clears the address.
    """

    status: ProxyStatus | None = None
    public_address: str | None = None

    @field_validator("public_address")
    @classmethod
    def _check_public_address(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return require_ip_address("public_address", value)


class AddressResetRequest(BaseModel):
    """Omit ``proxy_id`` to reset every online proxy."""

    proxy_id: int | None = None


class AddressResetResponse(BaseModel):
    success: bool
    message: str
    affected_count: int

    model_config = {"from_attributes": True}


class ProxyResponse(BaseModel):
    """Schema returned to the client: never carries the internal address."""

    id: int
    device_name: str
    public_address: str
    port: int
    username: str
    password: str
    status: ProxyStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @field_validator("public_address", mode="before")
    @classmethod
    def _absent_address_as_empty(cls, value: str | None) -> str:
        return value or ""


class ProxyDetailsResponse(BaseModel):
    public_address: str
    port: int
    username: str
    password: str

    model_config = {"from_attributes": True}
