"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from proxy_manager.config import get_settings
from proxy_manager.application.services import (
    DashboardService,
    ProxyService,
    ProxySessionService,
    SettingsService,
    UserService,
)
from proxy_manager.infrastructure.database.session import get_db_session
from proxy_manager.infrastructure.database.repositories import (
    SQLAlchemyProxyRepository,
    SQLAlchemyProxySessionRepository,
    SQLAlchemySettingRepository,
    SQLAlchemyUserRepository,
)
from proxy_manager.infrastructure.security.password_hasher import Sha256PasswordHasher


async def get_proxy_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ProxyService, None]:
    """Provides a ProxyService instance with its repository wired up."""
    yield ProxyService(SQLAlchemyProxyRepository(session))


async def get_proxy_session_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ProxySessionService, None]:
    """Provides the session ledger; proxies are looked up in the same transaction."""
    yield ProxySessionService(
        session_repository=SQLAlchemyProxySessionRepository(session),
        proxy_repository=SQLAlchemyProxyRepository(session),
        default_page_size=get_settings().default_page_size,
    )


async def get_dashboard_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[DashboardService, None]:
    yield DashboardService(
        proxy_repository=SQLAlchemyProxyRepository(session),
        session_repository=SQLAlchemyProxySessionRepository(session),
        user_repository=SQLAlchemyUserRepository(session),
    )


async def get_user_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[UserService, None]:
    """Provides a UserService with the default password hasher."""
    yield UserService(SQLAlchemyUserRepository(session), Sha256PasswordHasher())


async def get_settings_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[SettingsService, None]:
    yield SettingsService(SQLAlchemySettingRepository(session))
