"""Abstract repository interface (port) for ProxySession persistence."""

from abc import ABC, abstractmethod

from proxy_manager.domain.entities import ProxySession


class ProxySessionRepository(ABC):
    """Port for usage-session persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def create(self, proxy_session: ProxySession) -> ProxySession:
        """Persist a new session and return it with the generated ID."""
        ...

    @abstractmethod
    async def get_recent(self, limit: int = 50, offset: int = 0) -> list[ProxySession]:
        """Most recently created first, only sessions whose proxy still exists."""
        ...
