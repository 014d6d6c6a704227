"""Unit tests for the DashboardService aggregation."""

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from proxy_manager.application.services import DashboardService
from proxy_manager.domain.entities import Proxy, ProxySession, ProxyStatus, User

LOGIN = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def service(proxy_repo, session_repo, user_repo) -> DashboardService:
    return DashboardService(
        proxy_repository=proxy_repo,
        session_repository=session_repo,
        user_repository=user_repo,
    )


async def _fleet(proxy_repo, online: int, offline: int) -> list[Proxy]:
    proxies = []
    for i in range(online + offline):
        status = ProxyStatus.ONLINE if i < online else ProxyStatus.OFFLINE
        proxies.append(
            await proxy_repo.create(
                Proxy(
                    device_name=f"Gate-{i}",
                    internal_address="10.0.0.5",
                    port=8080,
                    username="u",
                    password="p",
                    status=status,
                )
            )
        )
    return proxies


@pytest.mark.asyncio
async def test_snapshot_of_empty_system(service: DashboardService):
    stats = await service.snapshot()
    assert stats.total_proxies == 0
    assert stats.online_proxies == 0
    assert stats.offline_proxies == 0
    assert stats.active_proxies == 0
    assert stats.total_users == 0
    assert stats.recent_sessions == []


@pytest.mark.asyncio
@pytest.mark.parametrize("online,offline", [(0, 3), (2, 0), (3, 4)])
async def test_snapshot_counts_add_up(service: DashboardService, proxy_repo, user_repo, online, offline):
    await _fleet(proxy_repo, online, offline)
    await user_repo.create(User(username="operator", password_hash="x"))

    stats = await service.snapshot()

    assert stats.online_proxies == online
    assert stats.offline_proxies == offline
    assert stats.online_proxies + stats.offline_proxies == stats.total_proxies
    assert stats.active_proxies == stats.online_proxies
    assert stats.total_users == 1


@pytest.mark.asyncio
async def test_recent_sessions_capped_at_ten_newest_first(service: DashboardService, proxy_repo, session_repo):
    [proxy] = await _fleet(proxy_repo, 1, 0)
    for i in range(12):
        await session_repo.create(
            ProxySession(proxy_id=proxy.id, client_address=f"203.0.113.{i + 1}", login_time=LOGIN)
        )

    stats = await service.snapshot()

    assert len(stats.recent_sessions) == 10
    created = [s.created_at for s in stats.recent_sessions]
    assert created == sorted(created, reverse=True)
    assert stats.recent_sessions[0].client_address == "203.0.113.12"


@pytest.mark.asyncio
async def test_recent_sessions_ties_fall_back_to_insertion_order(service: DashboardService, proxy_repo, session_repo):
    [proxy] = await _fleet(proxy_repo, 1, 0)
    template = ProxySession(proxy_id=proxy.id, client_address="203.0.113.1", login_time=LOGIN, created_at=LOGIN)
    for address in ("203.0.113.1", "203.0.113.2", "203.0.113.3"):
        await session_repo.create(replace(template, client_address=address))

    stats = await service.snapshot()

    assert [s.client_address for s in stats.recent_sessions] == [
        "203.0.113.3",
        "203.0.113.2",
        "203.0.113.1",
    ]


@pytest.mark.asyncio
async def test_snapshot_is_recomputed_on_every_call(service: DashboardService, proxy_repo):
    before = await service.snapshot()
    await _fleet(proxy_repo, 1, 0)
    after = await service.snapshot()
    assert before.total_proxies == 0
    assert after.total_proxies == 1
