"""Application service for the session ledger."""

import logging

from proxy_manager.application.interfaces import ProxyRepository, ProxySessionRepository
from proxy_manager.application.schemas import ProxySessionCreate
from proxy_manager.domain.entities import ProxySession
from proxy_manager.domain.exceptions import DomainValidationError, ReferentialIntegrityError

DEFAULT_PAGE_SIZE = 50

logger = logging.getLogger(__name__)


class ProxySessionService:
    """Records client sessions against proxies that exist at write time."""

    def __init__(
        self,
        session_repository: ProxySessionRepository,
        proxy_repository: ProxyRepository,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self._sessions = session_repository
        self._proxies = proxy_repository
        self._default_page_size = default_page_size

    async def open_session(self, data: ProxySessionCreate) -> ProxySession:
        proxy_session = ProxySession(
            proxy_id=data.proxy_id,
            client_address=data.client_address,
            login_time=data.login_time,
            logout_time=data.logout_time,
            bytes_transferred=data.bytes_transferred,
        )

        if await self._proxies.get_by_id(data.proxy_id) is None:
            logger.warning(
                "Rejected session from %s: proxy %s does not exist",
                data.client_address,
                data.proxy_id,
            )
            raise ReferentialIntegrityError("Proxy", data.proxy_id, referenced_by="ProxySession")

        created = await self._sessions.create(proxy_session)
        logger.info(
            "Opened session %s on proxy %s for %s",
            created.id,
            created.proxy_id,
            created.client_address,
        )
        return created

    async def list_sessions(self, limit: int | None = None, offset: int = 0) -> list[ProxySession]:
        """Newest first. Without ``limit`` the configured page size applies."""
        if limit is None:
            limit = self._default_page_size
        if limit < 1:
            raise DomainValidationError("limit", "must be at least 1")
        if offset < 0:
            raise DomainValidationError("offset", "must not be negative")
        return await self._sessions.get_recent(limit=limit, offset=offset)
