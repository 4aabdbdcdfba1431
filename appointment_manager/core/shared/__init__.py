"""
Shared runtime utilities: clock and cooperative cancellation.
"""

from appointment_manager.core.shared.cancellation import CancellationToken
from appointment_manager.core.shared.clock import IDateTimeProvider, SystemDateTimeProvider, as_utc, system_clock

__all__ = [
    "CancellationToken",
    "IDateTimeProvider",
    "SystemDateTimeProvider",
    "as_utc",
    "system_clock",
]
