"""
Entity and aggregate root bases.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Generic, TypeVar

from appointment_manager.core.shared.clock import IDateTimeProvider, system_clock

TId = TypeVar("TId")


@dataclass(eq=False, kw_only=True)
class Entity(Generic[TId]):
    """
    Domain object with identity.

    Two entities are the same when they share a non-null id, whatever their
    other attributes hold. ``updated_at`` stays ``None`` until the first
    successful mutation calls ``touch``.
    """

    id: TId | None = None
    created_at: datetime = field(default_factory=system_clock.utc_now)
    updated_at: datetime | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity) or self.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)

    def touch(self, clock: IDateTimeProvider | None = None) -> datetime:
        """Stamp ``updated_at`` and return the stamp."""
        self.updated_at = (clock or system_clock).utc_now()
        return self.updated_at


@dataclass(eq=False, kw_only=True)
class AggregateRoot(Entity[TId]):
    """Consistency boundary; every change to the aggregate goes through it."""
