"""Application service for global key/value settings."""

import logging

from proxy_manager.application.interfaces import SettingRepository
from proxy_manager.application.schemas import SettingPut
from proxy_manager.domain.entities import Setting

logger = logging.getLogger(__name__)


class SettingsService:

    def __init__(self, repository: SettingRepository):
        self._repository = repository

    async def list_settings(self) -> list[Setting]:
        return await self._repository.get_all()

    async def put_setting(self, data: SettingPut) -> Setting:
        """Update the row for ``data.key`` if it exists, otherwise insert it.

        ``id`` and ``created_at`` survive an update. Two racing inserts of
        the same key end in DuplicateEntityError from the unique index,
        never in a second row.
        """
        existing = await self._repository.get_by_key(data.key)
        if existing is not None:
            existing.overwrite(value=data.value, description=data.description)
            updated = await self._repository.update(existing)
            logger.info("Updated setting %s", updated.key)
            return updated

        created = await self._repository.create(
            Setting(key=data.key, value=data.value, description=data.description)
        )
        logger.info("Created setting %s", created.key)
        return created
