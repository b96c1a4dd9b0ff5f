"""
Domain exceptions package.
"""

# Base exceptions
from parrain.domain.exceptions.base import (
    ConflictError,
    DuplicateEntityError,
    EntityNotFoundError,
    ParrainException,
    ValidationError,
)

# Registry exceptions
from parrain.domain.exceptions.registry import (
    IdentifierGenerationError,
    StoreError,
)

__all__ = [
    # Base
    "ParrainException",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "ConflictError",
    "ValidationError",
    # Registry
    "IdentifierGenerationError",
    "StoreError",
]
