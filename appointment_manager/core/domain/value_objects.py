"""
Value object and status enum bases.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Self


@dataclass(frozen=True)
class ValueObject:
    """
    Immutable, equality-by-value domain primitive.

    Subclasses are frozen dataclasses and put their invariants in
    ``_validate``, which runs right after construction.
    """

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        return None


class StatusEnum(str, Enum):
    """String-valued status that serializes as its value."""

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Case-insensitive lookup by value."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown {cls.__name__}: {value!r}") from None

    def __str__(self) -> str:
        return self.value
