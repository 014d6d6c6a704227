"""Domain entities for operator accounts."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from proxy_manager.domain.validation import MIN_USERNAME_LENGTH, require_min_length

from .timestamps import advance, utc_now


class AccessLevel(str, Enum):
    ADMIN = "admin"
    USER = "user"


class DeleteOutcome(str, Enum):
    DELETED = "deleted"
    NOT_FOUND = "not_found"


@dataclass
class User:
    """Operator account. ``password_hash`` is never the plaintext."""

    username: str
    password_hash: str
    access_level: AccessLevel = AccessLevel.USER
    id: int | None = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        require_min_length("username", self.username, MIN_USERNAME_LENGTH)

    def update(
        self,
        username: str | None = None,
        password_hash: str | None = None,
        access_level: AccessLevel | None = None,
    ) -> bool:
        """Apply supplied fields. Returns False (and leaves updated_at) when nothing was supplied."""
        if username is None and password_hash is None and access_level is None:
            return False
        if username is not None:
            self.username = require_min_length("username", username, MIN_USERNAME_LENGTH)
        if password_hash is not None:
            self.password_hash = password_hash
        if access_level is not None:
            self.access_level = access_level
        self.updated_at = advance(self.updated_at)
        return True


@dataclass(frozen=True)
class DeleteResult:
    """Outcome of deleting a user by id; an unknown id is a normal outcome."""

    outcome: DeleteOutcome

    @property
    def success(self) -> bool:
        return self.outcome == DeleteOutcome.DELETED

    @property
    def message(self) -> str:
        if self.success:
            return "User deleted successfully"
        return "User not found"
