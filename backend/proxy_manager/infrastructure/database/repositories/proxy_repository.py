"""Concrete repository implementation for proxies backed by SQLAlchemy."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from proxy_manager.application.interfaces import ProxyRepository
from proxy_manager.domain.entities import Proxy, ProxyStatus
from proxy_manager.domain.entities.timestamps import as_utc
from proxy_manager.infrastructure.database.models import ProxyModel


class SQLAlchemyProxyRepository(ProxyRepository):
    """Implements the ProxyRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ProxyModel) -> Proxy:
        """Map ORM model → domain entity."""
        return Proxy(
            id=model.id,
            device_name=model.device_name,
            internal_address=model.internal_address,
            public_address=model.public_address,
            port=model.port,
            username=model.username,
            password=model.password,
            status=ProxyStatus(model.status),
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _to_model(self, entity: Proxy) -> ProxyModel:
        """Map domain entity → ORM model (for creation)."""
        return ProxyModel(
            device_name=entity.device_name,
            internal_address=entity.internal_address,
            public_address=entity.public_address,
            port=entity.port,
            username=entity.username,
            password=entity.password,
            status=entity.status.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, proxy_id: int) -> Proxy | None:
        result = await self._session.get(ProxyModel, proxy_id)
        return self._to_entity(result) if result else None

    async def get_all(self, *, status: ProxyStatus | None = None) -> list[Proxy]:
        stmt = select(ProxyModel)
        if status is not None:
            stmt = stmt.where(ProxyModel.status == status.value)
        stmt = stmt.order_by(ProxyModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count_by_status(self) -> dict[ProxyStatus, int]:
        stmt = select(ProxyModel.status, func.count()).group_by(ProxyModel.status)
        result = await self._session.execute(stmt)
        counts = {status: 0 for status in ProxyStatus}
        for status, count in result.all():
            counts[ProxyStatus(status)] = count
        return counts

    async def create(self, proxy: Proxy) -> Proxy:
        model = self._to_model(proxy)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, proxy: Proxy) -> Proxy:
        model = await self._session.get(ProxyModel, proxy.id)
        if model is None:
            raise ValueError(f"Proxy {proxy.id} not found in database")
        model.status = proxy.status.value
        model.public_address = proxy.public_address
        model.updated_at = proxy.updated_at
        await self._session.flush()
        return self._to_entity(model)
