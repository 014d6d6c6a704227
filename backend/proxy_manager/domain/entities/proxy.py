"""Domain entities for managed proxy devices."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from proxy_manager.domain.validation import (
    require_ip_address,
    require_non_empty,
    require_port,
)

from .timestamps import advance, utc_now


class ProxyStatus(str, Enum):
    """Connectivity state of a proxy device."""

    ONLINE = "online"
    OFFLINE = "offline"


@dataclass
class Proxy:
    """A remote device exposing a forward-proxy service to clients.

    ``internal_address`` is for management only and never leaves the service.
    ``public_address`` is ``None`` when no address is assigned; status and
    address are set independently, only a reset touches both together.
    """

    device_name: str
    internal_address: str
    port: int
    username: str
    password: str
    status: ProxyStatus = ProxyStatus.OFFLINE
    public_address: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        require_non_empty("device_name", self.device_name)
        require_ip_address("internal_address", self.internal_address)
        require_port("port", self.port)
        if self.public_address is not None:
            require_ip_address("public_address", self.public_address)

    @property
    def is_online(self) -> bool:
        return self.status == ProxyStatus.ONLINE

    def update_status(
        self,
        status: ProxyStatus | None = None,
        public_address: str | None = ...,  # type: ignore[assignment]
    ) -> None:
        """Apply a partial update; ``updated_at`` always advances."""
        if public_address is not ... and public_address is not None:
            require_ip_address("public_address", public_address)
        if status is not None:
            self.status = status
        if public_address is not ...:
            self.public_address = public_address
        self.updated_at = advance(self.updated_at)

    def reset(self) -> None:
        """Force the clean offline, unassigned state used before re-provisioning."""
        self.public_address = None
        self.status = ProxyStatus.OFFLINE
        self.updated_at = advance(self.updated_at)


@dataclass(frozen=True)
class ProxyDetails:
    """What a client needs to connect through a proxy."""

    public_address: str
    port: int
    username: str
    password: str


@dataclass(frozen=True)
class AddressResetResult:
    success: bool
    message: str
    affected_count: int
