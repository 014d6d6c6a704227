"""Default password digest for operator accounts.

Unsalted SHA-256 is fast and deterministic, which makes stored hashes
cheap to brute-force and identical for identical passwords. It is kept
because existing account rows were written with it; swapping in a
stronger hasher only needs another PasswordHasher implementation.
"""

import hashlib

from proxy_manager.application.interfaces import PasswordHasher


class Sha256PasswordHasher(PasswordHasher):
    """Hex-encoded SHA-256 of the UTF-8 password."""

    def hash(self, password: str) -> str:
        return hashlib.sha256(password.encode("utf-8")).hexdigest()
