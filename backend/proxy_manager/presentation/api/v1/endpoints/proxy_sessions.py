"""Session ledger endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from proxy_manager.application.schemas import ProxySessionCreate, ProxySessionResponse
from proxy_manager.application.services import ProxySessionService
from proxy_manager.domain.exceptions import DomainValidationError, ReferentialIntegrityError
from proxy_manager.infrastructure.dependencies import get_proxy_session_service

router = APIRouter(prefix="/proxy-sessions", tags=["Proxy Sessions"])


@router.get("", response_model=list[ProxySessionResponse])
async def list_proxy_sessions(
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    service: ProxySessionService = Depends(get_proxy_session_service),
) -> list[ProxySessionResponse]:
    """Most recent sessions first; ``limit`` defaults to the configured page size."""
    sessions = await service.list_sessions(limit=limit, offset=offset)
    return [ProxySessionResponse.model_validate(s, from_attributes=True) for s in sessions]


@router.post("", response_model=ProxySessionResponse, status_code=status.HTTP_201_CREATED)
async def open_proxy_session(
    data: ProxySessionCreate,
    service: ProxySessionService = Depends(get_proxy_session_service),
) -> ProxySessionResponse:
    """Record a client session against an existing proxy."""
    try:
        proxy_session = await service.open_session(data)
    except (ReferentialIntegrityError, DomainValidationError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ProxySessionResponse.model_validate(proxy_session, from_attributes=True)
