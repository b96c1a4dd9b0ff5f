"""
Registry and storage exceptions.
"""

from parrain.domain.exceptions.base import ParrainException


class IdentifierGenerationError(ParrainException):
    """Raised when no free identifier was found within the retry bound."""

    def __init__(self, identifier_type: str, attempts: int):
        self.identifier_type = identifier_type
        self.attempts = attempts
        message = (
            f"Could not generate a unique {identifier_type} "
            f"after {attempts} attempts"
        )
        super().__init__(message, code="IDENTIFIER_EXHAUSTED")


class StoreError(ParrainException):
    """Raised when the backing store cannot be read or written."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        message = f"Store {operation} failed: {reason}"
        super().__init__(message, code="STORE_ERROR")
