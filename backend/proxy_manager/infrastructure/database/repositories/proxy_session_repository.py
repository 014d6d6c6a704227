"""Concrete repository implementation for proxy sessions backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from proxy_manager.application.interfaces import ProxySessionRepository
from proxy_manager.domain.entities import ProxySession
from proxy_manager.domain.entities.timestamps import as_utc
from proxy_manager.infrastructure.database.models import ProxyModel, ProxySessionModel


class SQLAlchemyProxySessionRepository(ProxySessionRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ProxySessionModel) -> ProxySession:
        return ProxySession(
            id=model.id,
            proxy_id=model.proxy_id,
            client_address=model.client_address,
            login_time=as_utc(model.login_time),
            logout_time=as_utc(model.logout_time) if model.logout_time else None,
            bytes_transferred=model.bytes_transferred,
            created_at=as_utc(model.created_at),
        )

    async def create(self, proxy_session: ProxySession) -> ProxySession:
        model = ProxySessionModel(
            proxy_id=proxy_session.proxy_id,
            client_address=proxy_session.client_address,
            login_time=proxy_session.login_time,
            logout_time=proxy_session.logout_time,
            bytes_transferred=proxy_session.bytes_transferred,
            created_at=proxy_session.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def get_recent(self, limit: int = 50, offset: int = 0) -> list[ProxySession]:
        # Inner join drops sessions whose proxy row is gone.
        stmt = (
            select(ProxySessionModel)
            .join(ProxyModel, ProxySessionModel.proxy_id == ProxyModel.id)
            .order_by(ProxySessionModel.created_at.desc(), ProxySessionModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]
