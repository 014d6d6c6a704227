"""Global settings endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from proxy_manager.application.schemas import SettingPut, SettingResponse
from proxy_manager.application.services import SettingsService
from proxy_manager.domain.exceptions import DuplicateEntityError
from proxy_manager.infrastructure.dependencies import get_settings_service

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("", response_model=list[SettingResponse])
async def list_settings(
    service: SettingsService = Depends(get_settings_service),
) -> list[SettingResponse]:
    settings = await service.list_settings()
    return [SettingResponse.model_validate(s, from_attributes=True) for s in settings]


@router.put("", response_model=SettingResponse)
async def put_setting(
    data: SettingPut,
    service: SettingsService = Depends(get_settings_service),
) -> SettingResponse:
    """Insert or update the setting identified by ``key``."""
    try:
        setting = await service.put_setting(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return SettingResponse.model_validate(setting, from_attributes=True)
