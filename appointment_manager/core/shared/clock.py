"""
Clock provider.

Single source of "now" for the domain and its collaborators.
"""

from datetime import UTC, date, datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class IDateTimeProvider(Protocol):
    """Clock interface injected into aggregates and use cases."""

    def utc_now(self) -> datetime:
        """Current instant, timezone-aware UTC."""
        ...

    def now(self) -> datetime:
        """Current local time."""
        ...

    def today(self) -> date:
        """Current local date."""
        ...


class SystemDateTimeProvider:
    """Clock backed by the system time."""

    def utc_now(self) -> datetime:
        return datetime.now(UTC)

    def now(self) -> datetime:
        return datetime.now().astimezone()

    def today(self) -> date:
        return date.today()


system_clock = SystemDateTimeProvider()


def as_utc(value: datetime) -> datetime:
    """Read a naive datetime as UTC; convert an aware one to UTC."""
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
