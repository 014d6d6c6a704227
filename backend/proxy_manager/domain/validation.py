"""Input rules shared by the entities and the request schemas.

Every helper raises DomainValidationError, which is a ValueError, so the
same checks surface as 422s when pydantic runs them on request bodies.
"""

import ipaddress

from proxy_manager.domain.exceptions import DomainValidationError

MIN_PORT = 1
MAX_PORT = 65535
MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


def require_non_empty(field: str, value: str) -> str:
    if not value or not value.strip():
        raise DomainValidationError(field, "must not be empty")
    return value


def require_ip_address(field: str, value: str) -> str:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        raise DomainValidationError(field, f"'{value}' is not a valid IP address") from None
    return value


def require_port(field: str, value: int) -> int:
    if not MIN_PORT <= value <= MAX_PORT:
        raise DomainValidationError(field, f"must be between {MIN_PORT} and {MAX_PORT}")
    return value


def require_non_negative(field: str, value: int) -> int:
    if value < 0:
        raise DomainValidationError(field, "must not be negative")
    return value


def require_min_length(field: str, value: str, minimum: int) -> str:
    if len(value) < minimum:
        raise DomainValidationError(field, f"must be at least {minimum} characters")
    return value
