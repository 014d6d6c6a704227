"""Domain entity for a client's usage session against one proxy."""

from dataclasses import dataclass, field
from datetime import datetime

from proxy_manager.domain.validation import require_ip_address, require_non_negative

from .timestamps import as_utc, utc_now


@dataclass
class ProxySession:
    """A recorded client connection window with byte accounting.

    ``logout_time`` stays ``None`` while the session is still open.
    """

    proxy_id: int
    client_address: str
    login_time: datetime
    logout_time: datetime | None = None
    bytes_transferred: int = 0
    id: int | None = None
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        require_ip_address("client_address", self.client_address)
        require_non_negative("bytes_transferred", self.bytes_transferred)
        # stored in UTC; some backends drop the offset
        self.login_time = as_utc(self.login_time)
        if self.logout_time is not None:
            self.logout_time = as_utc(self.logout_time)
        self.created_at = as_utc(self.created_at)

    @property
    def is_open(self) -> bool:
        return self.logout_time is None
