"""Abstract repository interface (port) for Proxy persistence."""

from abc import ABC, abstractmethod

from proxy_manager.domain.entities import Proxy, ProxyStatus


class ProxyRepository(ABC):
    """Port for proxy persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, proxy_id: int) -> Proxy | None:
        """Retrieve a single proxy by its ID."""
        ...

    @abstractmethod
    async def get_all(self, *, status: ProxyStatus | None = None) -> list[Proxy]:
        """Retrieve all proxies, optionally filtered by status."""
        ...

    @abstractmethod
    async def count_by_status(self) -> dict[ProxyStatus, int]:
        """Count the whole fleet per status in a single pass."""
        ...

    @abstractmethod
    async def create(self, proxy: Proxy) -> Proxy:
        """Persist a new proxy and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, proxy: Proxy) -> Proxy:
        """Write status, public address and updated_at of an existing proxy."""
        ...
