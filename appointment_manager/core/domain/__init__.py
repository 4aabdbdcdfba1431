"""
Shared domain building blocks.

Entity and aggregate bases with id equality and clock-driven timestamps,
value object and status enum bases, and the DomainException hierarchy whose
``code`` values travel into failure Results.
"""

from appointment_manager.core.domain.entities import (
    AggregateRoot,
    Entity,
)
from appointment_manager.core.domain.exceptions import (
    DomainException,
    EntityNotFoundException,
    InvalidOperationException,
    ValidationException,
)
from appointment_manager.core.domain.value_objects import (
    StatusEnum,
    ValueObject,
)

__all__ = [
    # Entities
    "Entity",
    "AggregateRoot",
    # Value Objects
    "ValueObject",
    "StatusEnum",
    # Exceptions
    "DomainException",
    "ValidationException",
    "EntityNotFoundException",
    "InvalidOperationException",
]
