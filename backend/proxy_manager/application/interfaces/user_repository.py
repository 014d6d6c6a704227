"""Abstract repository interface (port) for operator accounts."""

from abc import ABC, abstractmethod

from proxy_manager.domain.entities import User


class UserRepository(ABC):
    """Port for user persistence.

    ``create`` and ``update`` raise DuplicateEntityError when the store's
    unique constraint on ``username`` rejects the write.
    """

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        ...

    @abstractmethod
    async def get_by_username(self, username: str) -> User | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[User]:
        ...

    @abstractmethod
    async def count(self) -> int:
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        ...

    @abstractmethod
    async def update(self, user: User) -> User:
        ...

    @abstractmethod
    async def delete(self, user_id: int) -> bool:
        """Delete a user. Returns True if deleted, False if not found."""
        ...
