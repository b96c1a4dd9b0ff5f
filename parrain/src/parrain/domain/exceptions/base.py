"""
Base domain exceptions.
"""


class ParrainException(Exception):
    """Base exception for all Parrain domain errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(ParrainException):
    """Raised when entity is not found in the registry."""

    def __init__(self, entity_type: str, entity_id: str):
        message = f"{entity_type} {entity_id} not found"
        super().__init__(message, code="ENTITY_NOT_FOUND")


class DuplicateEntityError(ParrainException):
    """Raised when attempting to create duplicate entity."""

    def __init__(self, entity_type: str, identifier: str):
        message = f"{entity_type} with {identifier} already exists"
        super().__init__(message, code="DUPLICATE_ENTITY")


class ConflictError(ParrainException):
    """Raised when a unique identifier already belongs to another user."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message, code="CONFLICT")


class ValidationError(ParrainException):
    """Raised when request or entity validation fails."""

    def __init__(self, field: str, reason: str):
        message = f"Validation failed for {field}: {reason}"
        super().__init__(message, code="VALIDATION_ERROR")
