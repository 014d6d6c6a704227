from .proxy_service import ProxyService
from .proxy_session_service import ProxySessionService
from .dashboard_service import DashboardService
from .user_service import UserService
from .settings_service import SettingsService

__all__ = [
    "ProxyService",
    "ProxySessionService",
    "DashboardService",
    "UserService",
    "SettingsService",
]
