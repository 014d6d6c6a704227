"""In-memory fake repositories shared by the service unit tests."""

from dataclasses import replace

import pytest

from proxy_manager.application.interfaces import (
    PasswordHasher,
    ProxyRepository,
    ProxySessionRepository,
    SettingRepository,
    UserRepository,
)
from proxy_manager.domain.entities import Proxy, ProxySession, ProxyStatus, Setting, User
from proxy_manager.domain.exceptions import DuplicateEntityError
from proxy_manager.infrastructure.security.password_hasher import Sha256PasswordHasher


class FakeProxyRepository(ProxyRepository):
    """Stores copies so services only see their writes after update()."""

    def __init__(self):
        self._proxies: dict[int, Proxy] = {}
        self._next_id = 1

    async def get_by_id(self, proxy_id: int) -> Proxy | None:
        proxy = self._proxies.get(proxy_id)
        return replace(proxy) if proxy else None

    async def get_all(self, *, status: ProxyStatus | None = None) -> list[Proxy]:
        return [
            replace(p)
            for p in self._proxies.values()
            if status is None or p.status == status
        ]

    async def count_by_status(self) -> dict[ProxyStatus, int]:
        counts = {status: 0 for status in ProxyStatus}
        for proxy in self._proxies.values():
            counts[proxy.status] += 1
        return counts

    async def create(self, proxy: Proxy) -> Proxy:
        proxy.id = self._next_id
        self._next_id += 1
        self._proxies[proxy.id] = replace(proxy)
        return proxy

    async def update(self, proxy: Proxy) -> Proxy:
        if proxy.id not in self._proxies:
            raise ValueError(f"Proxy {proxy.id} not found")
        self._proxies[proxy.id] = replace(proxy)
        return replace(proxy)

    def forget(self, proxy_id: int) -> None:
        """Drop a row behind the services' back (no delete operation exists)."""
        del self._proxies[proxy_id]


class FakeProxySessionRepository(ProxySessionRepository):

    def __init__(self, proxies: FakeProxyRepository):
        self._proxies = proxies
        self._sessions: list[ProxySession] = []
        self._next_id = 1

    async def create(self, proxy_session: ProxySession) -> ProxySession:
        proxy_session.id = self._next_id
        self._next_id += 1
        self._sessions.append(replace(proxy_session))
        return proxy_session

    async def get_recent(self, limit: int = 50, offset: int = 0) -> list[ProxySession]:
        visible = [
            s for s in self._sessions
            if await self._proxies.get_by_id(s.proxy_id) is not None
        ]
        visible.sort(key=lambda s: (s.created_at, s.id), reverse=True)
        return visible[offset : offset + limit]

    @property
    def rows(self) -> list[ProxySession]:
        return list(self._sessions)


class FakeUserRepository(UserRepository):
    """Enforces username uniqueness the way the database constraint does."""

    def __init__(self):
        self._users: dict[int, User] = {}
        self._next_id = 1

    async def get_by_id(self, user_id: int) -> User | None:
        user = self._users.get(user_id)
        return replace(user) if user else None

    async def get_by_username(self, username: str) -> User | None:
        for user in self._users.values():
            if user.username == username:
                return replace(user)
        return None

    async def get_all(self) -> list[User]:
        return [replace(u) for u in self._users.values()]

    async def count(self) -> int:
        return len(self._users)

    async def create(self, user: User) -> User:
        self._check_unique(user)
        user.id = self._next_id
        self._next_id += 1
        self._users[user.id] = replace(user)
        return user

    async def update(self, user: User) -> User:
        if user.id not in self._users:
            raise ValueError(f"User {user.id} not found")
        self._check_unique(user)
        self._users[user.id] = replace(user)
        return replace(user)

    async def delete(self, user_id: int) -> bool:
        return self._users.pop(user_id, None) is not None

    def _check_unique(self, user: User) -> None:
        for other in self._users.values():
            if other.username == user.username and other.id != user.id:
                raise DuplicateEntityError("User", "username", user.username)


class FakeSettingRepository(SettingRepository):

    def __init__(self):
        self._settings: dict[int, Setting] = {}
        self._next_id = 1

    async def get_by_key(self, key: str) -> Setting | None:
        for setting in self._settings.values():
            if setting.key == key:
                return replace(setting)
        return None

    async def get_all(self) -> list[Setting]:
        return [replace(s) for s in self._settings.values()]

    async def create(self, setting: Setting) -> Setting:
        if any(s.key == setting.key for s in self._settings.values()):
            raise DuplicateEntityError("Setting", "key", setting.key)
        setting.id = self._next_id
        self._next_id += 1
        self._settings[setting.id] = replace(setting)
        return setting

    async def update(self, setting: Setting) -> Setting:
        self._settings[setting.id] = replace(setting)
        return replace(setting)


@pytest.fixture
def proxy_repo() -> FakeProxyRepository:
    return FakeProxyRepository()


@pytest.fixture
def session_repo(proxy_repo: FakeProxyRepository) -> FakeProxySessionRepository:
    return FakeProxySessionRepository(proxy_repo)


@pytest.fixture
def user_repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def setting_repo() -> FakeSettingRepository:
    return FakeSettingRepository()


@pytest.fixture
def hasher() -> PasswordHasher:
    return Sha256PasswordHasher()
