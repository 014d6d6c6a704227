from .proxy_repository import ProxyRepository
from .proxy_session_repository import ProxySessionRepository
from .user_repository import UserRepository
from .setting_repository import SettingRepository
from .password_hasher import PasswordHasher

__all__ = [
    "ProxyRepository",
    "ProxySessionRepository",
    "UserRepository",
    "SettingRepository",
    "PasswordHasher",
]
