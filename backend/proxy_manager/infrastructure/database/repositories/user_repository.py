"""Concrete repository implementation for operator accounts backed by SQLAlchemy."""

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from proxy_manager.application.interfaces import UserRepository
from proxy_manager.domain.entities import AccessLevel, User
from proxy_manager.domain.entities.timestamps import as_utc
from proxy_manager.domain.exceptions import DuplicateEntityError
from proxy_manager.infrastructure.database.models import UserModel


class SQLAlchemyUserRepository(UserRepository):
    """Implements the UserRepository port; the unique index on username is authoritative."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        """Map ORM model → domain entity."""
        return User(
            id=model.id,
            username=model.username,
            password_hash=model.password,
            access_level=AccessLevel(model.access_level),
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    async def get_by_id(self, user_id: int) -> User | None:
        result = await self._session.get(UserModel, user_id)
        return self._to_entity(result) if result else None

    async def get_by_username(self, username: str) -> User | None:
        result = await self._session.execute(
            select(UserModel).where(UserModel.username == username)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[User]:
        result = await self._session.execute(select(UserModel).order_by(UserModel.id))
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(UserModel))
        return result.scalar_one()

    async def create(self, user: User) -> User:
        model = UserModel(
            username=user.username,
            password=user.password_hash,
            access_level=user.access_level.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self._session.add(model)
        await self._flush(user.username)
        return self._to_entity(model)

    async def update(self, user: User) -> User:
        model = await self._session.get(UserModel, user.id)
        if model is None:
            raise ValueError(f"User {user.id} not found in database")
        model.username = user.username
        model.password = user.password_hash
        model.access_level = user.access_level.value
        model.updated_at = user.updated_at
        await self._flush(user.username)
        return self._to_entity(model)

    async def delete(self, user_id: int) -> bool:
        model = await self._session.get(UserModel, user_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _flush(self, username: str) -> None:
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise DuplicateEntityError("User", "username", username) from exc
