"""Application service (use case) for the proxy registry.

Owns the proxy lifecycle: registration, status changes, public-address
resets and the connection details handed to clients.
"""

import logging

from proxy_manager.application.interfaces import ProxyRepository
from proxy_manager.application.schemas import ProxyCreate, ProxyStatusUpdate
from proxy_manager.domain.entities import (
    AddressResetResult,
    Proxy,
    ProxyDetails,
    ProxyStatus,
)
from proxy_manager.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ProxyService:
    """Orchestrates proxy business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ProxyRepository):
        self._repository = repository

    async def get_proxy(self, proxy_id: int) -> Proxy:
        proxy = await self._repository.get_by_id(proxy_id)
        if proxy is None:
            raise EntityNotFoundError("Proxy", proxy_id)
        return proxy

    async def list_proxies(self) -> list[Proxy]:
        return await self._repository.get_all()

    async def create_proxy(self, data: ProxyCreate) -> Proxy:
        proxy = Proxy(
            device_name=data.device_name,
            internal_address=data.internal_address,
            port=data.port,
            username=data.username,
            password=data.password,
        )
        created = await self._repository.create(proxy)
        logger.info("Registered proxy %s (id=%s)", created.device_name, created.id)
        return created

    async def update_status(self, proxy_id: int, data: ProxyStatusUpdate) -> Proxy:
        """Apply only the fields present in ``data``.

        Status and public address are not kept consistent with each other
        here; an online proxy may have no address and vice versa.
        """
        proxy = await self.get_proxy(proxy_id)
        if "public_address" in data.model_fields_set:
            proxy.update_status(status=data.status, public_address=data.public_address)
        else:
            proxy.update_status(status=data.status)
        updated = await self._repository.update(proxy)
        logger.info(
            "Proxy %s status=%s public_address=%s",
            updated.id,
            updated.status.value,
            updated.public_address,
        )
        return updated

    async def reset_address(self, proxy_id: int | None = None) -> AddressResetResult:
        """Force proxies offline with no public address.

        With ``proxy_id`` only that proxy is reset. Without it every proxy
        that is online right now is reset; the count comes from the same
        read, so concurrent status changes can make it approximate.
        """
        if proxy_id is not None:
            proxy = await self.get_proxy(proxy_id)
            proxy.reset()
            await self._repository.update(proxy)
            logger.info("Address reset for proxy %s (id=%s)", proxy.device_name, proxy.id)
            return AddressResetResult(
                success=True,
                message=f"Address reset initiated for proxy {proxy.device_name}",
                affected_count=1,
            )

        online = await self._repository.get_all(status=ProxyStatus.ONLINE)
        if not online:
            logger.info("Fleet-wide address reset: no online proxies")
            return AddressResetResult(
                success=True,
                message="No online proxies found to reset",
                affected_count=0,
            )

        for proxy in online:
            proxy.reset()
            await self._repository.update(proxy)
        logger.info("Fleet-wide address reset: %d proxies reset", len(online))
        return AddressResetResult(
            success=True,
            message="Address reset initiated for all online proxies",
            affected_count=len(online),
        )

    async def get_connection_details(self, proxy_id: int) -> ProxyDetails | None:
        """Connection details, or None when the proxy is unknown or has no public address."""
        proxy = await self._repository.get_by_id(proxy_id)
        if proxy is None or not proxy.public_address:
            return None
        return ProxyDetails(
            public_address=proxy.public_address,
            port=proxy.port,
            username=proxy.username,
            password=proxy.password,
        )
