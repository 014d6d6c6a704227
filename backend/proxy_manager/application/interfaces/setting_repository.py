"""Abstract repository interface (port) for global settings."""

from abc import ABC, abstractmethod

from proxy_manager.domain.entities import Setting


class SettingRepository(ABC):
    """Port for settings persistence; ``key`` is unique in the store."""

    @abstractmethod
    async def get_by_key(self, key: str) -> Setting | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Setting]:
        ...

    @abstractmethod
    async def create(self, setting: Setting) -> Setting:
        """Insert a new row; raises DuplicateEntityError on a key collision."""
        ...

    @abstractmethod
    async def update(self, setting: Setting) -> Setting:
        ...
