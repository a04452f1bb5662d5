"""
Domain common module.

Base classes shared by the vocabulary and learning contexts.
"""

from .entity import Entity, EntityId
from .exceptions import (
    AuthorizationError,
    DomainError,
    EntityNotFoundError,
    ValidationError,
)
from .value_object import ValueObject

__all__ = [
    "AuthorizationError",
    "DomainError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "ValidationError",
    "ValueObject",
]
