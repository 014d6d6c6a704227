"""Domain entity for a global key/value configuration entry."""

from dataclasses import dataclass, field
from datetime import datetime

from proxy_manager.domain.validation import require_non_empty

from .timestamps import advance, utc_now


@dataclass
class Setting:
    key: str
    value: str
    description: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        require_non_empty("key", self.key)

    def overwrite(self, value: str, description: str | None = None) -> None:
        """Replace value and description; an omitted description is cleared."""
        self.value = value
        self.description = description
        self.updated_at = advance(self.updated_at)
