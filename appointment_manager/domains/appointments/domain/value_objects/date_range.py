"""
DateRange value object.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from appointment_manager.core.domain import ValidationException, ValueObject
from appointment_manager.core.shared.clock import as_utc


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Ordered (start, end) pair of instants.

    A range is valid only when ``start < end``. The plain constructor does not
    validate so that stored rows can be rehydrated as-is; ``create`` is the
    validated factory. Behavior (duration, contains, overlaps) refuses to run
    against an invalid range.

    Example:
        ```python
        morning = DateRange.create(datetime(2025, 1, 15, 9, tzinfo=UTC), datetime(2025, 1, 15, 10, tzinfo=UTC))
        morning.overlaps(DateRange.create(datetime(2025, 1, 15, 10), datetime(2025, 1, 15, 11)))  # False, naive is UTC
        ```
    """

    start: datetime
    end: datetime

    @classmethod
    def create(cls, start: datetime, end: datetime) -> "DateRange":
        """Build a validated range; start must precede end. Naive values are read as UTC."""
        start, end = as_utc(start), as_utc(end)
        if start >= end:
            raise ValidationException("Start date must be before end date", field="date_range")
        return cls(start=start, end=end)

    @property
    def is_valid(self) -> bool:
        return self.start < self.end

    def ensure_valid(self) -> "DateRange":
        """Re-validate a range built through the plain constructor."""
        if not self.is_valid:
            raise ValidationException("Date range is invalid", field="date_range")
        return self

    def duration(self) -> timedelta:
        self.ensure_valid()
        return self.end - self.start

    def contains(self, instant: datetime) -> bool:
        """Inclusive on both ends."""
        self.ensure_valid()
        return self.start <= instant <= self.end

    def overlaps(self, other: "DateRange") -> bool:
        """Ranges that only share a boundary do not overlap."""
        self.ensure_valid()
        other.ensure_valid()
        return self.start < other.end and self.end > other.start

    def __str__(self) -> str:
        return f"{self.start.isoformat()} - {self.end.isoformat()}"
