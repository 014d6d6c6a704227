"""Application service for operator accounts (the access directory)."""

import logging

from proxy_manager.application.interfaces import PasswordHasher, UserRepository
from proxy_manager.application.schemas import UserCreate, UserUpdate
from proxy_manager.domain.entities import DeleteOutcome, DeleteResult, User
from proxy_manager.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from proxy_manager.domain.validation import MIN_PASSWORD_LENGTH, require_min_length

logger = logging.getLogger(__name__)


class UserService:
    """Orchestrates user CRUD logic with an injected password hasher.

    Username pre-checks only produce a nicer early failure; the store's
    unique constraint decides, and the repository maps it to the same
    DuplicateEntityError.
    """

    def __init__(self, repository: UserRepository, hasher: PasswordHasher):
        self._repository = repository
        self._hasher = hasher

    async def get_user(self, user_id: int) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def list_users(self) -> list[User]:
        return await self._repository.get_all()

    async def create_user(self, data: UserCreate) -> User:
        require_min_length("password", data.password, MIN_PASSWORD_LENGTH)
        user = User(
            username=data.username,
            password_hash=self._hasher.hash(data.password),
            access_level=data.access_level,
        )
        if await self._repository.get_by_username(data.username) is not None:
            logger.warning("Rejected duplicate username %r", data.username)
            raise DuplicateEntityError("User", "username", data.username)

        created = await self._repository.create(user)
        logger.info("Created user %s (id=%s, access=%s)", created.username, created.id, created.access_level.value)
        return created

    async def update_user(self, user_id: int, data: UserUpdate) -> User:
        """Partial update. With nothing to change the stored record is returned as-is."""
        user = await self.get_user(user_id)

        if data.username is not None and data.username != user.username:
            other = await self._repository.get_by_username(data.username)
            if other is not None and other.id != user.id:
                logger.warning("Rejected rename of user %s to taken username %r", user_id, data.username)
                raise DuplicateEntityError("User", "username", data.username)

        password_hash = None
        if data.password is not None:
            require_min_length("password", data.password, MIN_PASSWORD_LENGTH)
            password_hash = self._hasher.hash(data.password)

        changed = user.update(
            username=data.username,
            password_hash=password_hash,
            access_level=data.access_level,
        )
        if not changed:
            return user

        updated = await self._repository.update(user)
        logger.info("Updated user %s", updated.id)
        return updated

    async def delete_user(self, user_id: int) -> DeleteResult:
        if await self._repository.delete(user_id):
            logger.info("Deleted user %s", user_id)
            return DeleteResult(DeleteOutcome.DELETED)
        return DeleteResult(DeleteOutcome.NOT_FOUND)
