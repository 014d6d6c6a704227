"""Concrete repository implementation for settings backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from proxy_manager.application.interfaces import SettingRepository
from proxy_manager.domain.entities import Setting
from proxy_manager.domain.entities.timestamps import as_utc
from proxy_manager.domain.exceptions import DuplicateEntityError
from proxy_manager.infrastructure.database.models import SettingModel


class SQLAlchemySettingRepository(SettingRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _to_entity(model: SettingModel) -> Setting:
        return Setting(
            id=model.id,
            key=model.key,
            value=model.value,
            description=model.description,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    async def get_by_key(self, key: str) -> Setting | None:
        result = await self._session.execute(
            select(SettingModel).where(SettingModel.key == key)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Setting]:
        result = await self._session.execute(select(SettingModel).order_by(SettingModel.id))
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, setting: Setting) -> Setting:
        model = SettingModel(
            key=setting.key,
            value=setting.value,
            description=setting.description,
            created_at=setting.created_at,
            updated_at=setting.updated_at,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise DuplicateEntityError("Setting", "key", setting.key) from exc
        return self._to_entity(model)

    async def update(self, setting: Setting) -> Setting:
        model = await self._session.get(SettingModel, setting.id)
        if model is None:
            raise ValueError(f"Setting {setting.id} not found in database")
        model.value = setting.value
        model.description = setting.description
        model.updated_at = setting.updated_at
        await self._session.flush()
        return self._to_entity(model)
