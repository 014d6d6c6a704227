"""Application service that derives fleet-wide dashboard statistics."""

from proxy_manager.application.interfaces import (
    ProxyRepository,
    ProxySessionRepository,
    UserRepository,
)
from proxy_manager.domain.entities import DashboardStats, ProxyStatus

# size of the dashboard feed; not configurable
RECENT_SESSIONS_LIMIT = 10


class DashboardService:
    """Read-only aggregation over proxies, sessions and users.

    Recomputed on every call; nothing is cached between requests.
    """

    def __init__(
        self,
        proxy_repository: ProxyRepository,
        session_repository: ProxySessionRepository,
        user_repository: UserRepository,
    ):
        self._proxies = proxy_repository
        self._sessions = session_repository
        self._users = user_repository

    async def snapshot(self) -> DashboardStats:
        counts = await self._proxies.count_by_status()
        online = counts.get(ProxyStatus.ONLINE, 0)
        offline = counts.get(ProxyStatus.OFFLINE, 0)

        return DashboardStats(
            total_proxies=online + offline,
            online_proxies=online,
            offline_proxies=offline,
            total_users=await self._users.count(),
            recent_sessions=await self._sessions.get_recent(limit=RECENT_SESSIONS_LIMIT),
        )
