"""Domain-specific exceptions: framework-independent."""


class DomainValidationError(ValueError):
    """Raised when input is malformed, before anything is persisted."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a write references a related entity that does not exist.

    Subclasses EntityNotFoundError so callers that only care about the
    missing entity can treat both the same way.
    """

    def __init__(self, entity_type: str, entity_id: int | str, referenced_by: str):
        self.referenced_by = referenced_by
        super().__init__(entity_type, entity_id)
        self.args = (
            f"{referenced_by} references {entity_type} with id '{entity_id}', which does not exist",
        )


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")
