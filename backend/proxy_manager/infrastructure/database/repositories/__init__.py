from .proxy_repository import SQLAlchemyProxyRepository
from .proxy_session_repository import SQLAlchemyProxySessionRepository
from .user_repository import SQLAlchemyUserRepository
from .setting_repository import SQLAlchemySettingRepository

__all__ = [
    "SQLAlchemyProxyRepository",
    "SQLAlchemyProxySessionRepository",
    "SQLAlchemyUserRepository",
    "SQLAlchemySettingRepository",
]
