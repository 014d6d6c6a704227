"""Read-only fleet statistics derived on every request."""

from dataclasses import dataclass, field

from .proxy_session import ProxySession


@dataclass(frozen=True)
class DashboardStats:
    total_proxies: int
    online_proxies: int
    offline_proxies: int
    total_users: int
    recent_sessions: list[ProxySession] = field(default_factory=list)

    @property
    def active_proxies(self) -> int:
        """Same count as ``online_proxies``, exposed separately for the dashboard view."""
        return self.online_proxies
