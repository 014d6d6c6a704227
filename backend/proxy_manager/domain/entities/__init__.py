from .proxy import AddressResetResult, Proxy, ProxyDetails, ProxyStatus
from .proxy_session import ProxySession
from .user import AccessLevel, DeleteOutcome, DeleteResult, User
from .setting import Setting
from .dashboard import DashboardStats

__all__ = [
    "AddressResetResult",
    "Proxy",
    "ProxyDetails",
    "ProxyStatus",
    "ProxySession",
    "AccessLevel",
    "DeleteOutcome",
    "DeleteResult",
    "User",
    "Setting",
    "DashboardStats",
]
