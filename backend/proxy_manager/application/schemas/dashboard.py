"""Pydantic DTOs for the dashboard view."""

from pydantic import BaseModel

from .proxy_session import ProxySessionResponse


class DashboardStatsResponse(BaseModel):
    total_proxies: int
    online_proxies: int
    offline_proxies: int
    active_proxies: int
    total_users: int
    recent_sessions: list[ProxySessionResponse]

    model_config = {"from_attributes": True}
