"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: str, message: str | None = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message or f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"A {entity_type.lower()} with this {field} already exists.")


class DomainValidationError(Exception):
    """Raised when input passes schema validation but violates a business rule."""


class AuthenticationError(Exception):
    """Raised when credentials are rejected.

    ``forbidden`` distinguishes "who you are is fine, but not here" (wrong role)
    from plain bad credentials.
    """

    def __init__(self, message: str = "Invalid credentials", forbidden: bool = False):
        self.forbidden = forbidden
        super().__init__(message)


class StorageError(Exception):
    """Raised when the record store is unavailable or holds an undecodable payload.

    Propagated unchanged through the entity layer and never retried.
    """

    def __init__(self, message: str, entity_type: str | None = None, entity_id: str | None = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message)
