"""Proxy registry endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from proxy_manager.application.schemas import (
    AddressResetRequest,
    AddressResetResponse,
    ProxyCreate,
    ProxyDetailsResponse,
    ProxyResponse,
    ProxyStatusUpdate,
)
from proxy_manager.application.services import ProxyService
from proxy_manager.domain.exceptions import DomainValidationError, EntityNotFoundError
from proxy_manager.infrastructure.dependencies import get_proxy_service

router = APIRouter(prefix="/proxies", tags=["Proxies"])


@router.get("", response_model=list[ProxyResponse])
async def list_proxies(
    service: ProxyService = Depends(get_proxy_service),
) -> list[ProxyResponse]:
    """Retrieve the whole fleet."""
    proxies = await service.list_proxies()
    return [ProxyResponse.model_validate(p, from_attributes=True) for p in proxies]


@router.post("", response_model=ProxyResponse, status_code=status.HTTP_201_CREATED)
async def create_proxy(
    data: ProxyCreate,
    service: ProxyService = Depends(get_proxy_service),
) -> ProxyResponse:
    """Register a new proxy device; it starts offline with no public address."""
    try:
        proxy = await service.create_proxy(data)
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ProxyResponse.model_validate(proxy, from_attributes=True)


@router.patch("/{proxy_id}/status", response_model=ProxyResponse)
async def update_proxy_status(
    proxy_id: int,
    data: ProxyStatusUpdate,
    service: ProxyService = Depends(get_proxy_service),
) -> ProxyResponse:
    """Change status and/or public address; omitted fields keep their value."""
    try:
        proxy = await service.update_status(proxy_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ProxyResponse.model_validate(proxy, from_attributes=True)


@router.post("/reset-address", response_model=AddressResetResponse)
async def reset_proxy_address(
    data: AddressResetRequest,
    service: ProxyService = Depends(get_proxy_service),
) -> AddressResetResponse:
    """Reset one proxy, or every online proxy when no id is given."""
    try:
        result = await service.reset_address(data.proxy_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return AddressResetResponse.model_validate(result, from_attributes=True)


@router.get("/{proxy_id}/details", response_model=ProxyDetailsResponse | None)
async def get_proxy_details(
    proxy_id: int,
    service: ProxyService = Depends(get_proxy_service),
) -> ProxyDetailsResponse | None:
    """Connection details for copying, or null when there is no address to share."""
    details = await service.get_connection_details(proxy_id)
    if details is None:
        return None
    return ProxyDetailsResponse.model_validate(details, from_attributes=True)
