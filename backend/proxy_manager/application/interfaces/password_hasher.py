"""Port for the one-way digest applied to operator passwords."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a deterministic one-way digest of ``password``."""
        ...
