from .proxy import (
    AddressResetRequest,
    AddressResetResponse,
    ProxyCreate,
    ProxyDetailsResponse,
    ProxyResponse,
    ProxyStatusUpdate,
)
from .proxy_session import ProxySessionCreate, ProxySessionResponse
from .user import UserCreate, UserDeleteResponse, UserResponse, UserUpdate
from .setting import SettingPut, SettingResponse
from .dashboard import DashboardStatsResponse

__all__ = [
    "AddressResetRequest",
    "AddressResetResponse",
    "ProxyCreate",
    "ProxyDetailsResponse",
    "ProxyResponse",
    "ProxyStatusUpdate",
    "ProxySessionCreate",
    "ProxySessionResponse",
    "UserCreate",
    "UserDeleteResponse",
    "UserResponse",
    "UserUpdate",
    "SettingPut",
    "SettingResponse",
    "DashboardStatsResponse",
]
