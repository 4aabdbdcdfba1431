"""
Appointment status value object.
"""

from appointment_manager.core.domain import StatusEnum


class AppointmentStatus(StatusEnum):
    """
    Appointment lifecycle states.

    Valid transitions:
    - SCHEDULED -> CONFIRMED, CANCELLED
    - CONFIRMED -> IN_PROGRESS, CANCELLED, NO_SHOW
    - IN_PROGRESS -> COMPLETED, CANCELLED
    - COMPLETED, CANCELLED, NO_SHOW -> (terminal)
    """

    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"

    def can_transition_to(self, new_status: "AppointmentStatus") -> bool:
        """Check if transition to new status is valid."""
        return new_status in _TRANSITIONS[self]

    def is_terminal(self) -> bool:
        return not _TRANSITIONS[self]

    def is_active(self) -> bool:
        """Scheduled, confirmed or in progress."""
        return self in (
            AppointmentStatus.SCHEDULED,
            AppointmentStatus.CONFIRMED,
            AppointmentStatus.IN_PROGRESS,
        )

    def allows_detail_update(self) -> bool:
        return self.is_active()


_TRANSITIONS: dict[AppointmentStatus, frozenset[AppointmentStatus]] = {
    AppointmentStatus.SCHEDULED: frozenset({AppointmentStatus.CONFIRMED, AppointmentStatus.CANCELLED}),
    AppointmentStatus.CONFIRMED: frozenset(
        {AppointmentStatus.IN_PROGRESS, AppointmentStatus.CANCELLED, AppointmentStatus.NO_SHOW}
    ),
    AppointmentStatus.IN_PROGRESS: frozenset({AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED}),
    AppointmentStatus.COMPLETED: frozenset(),
    AppointmentStatus.CANCELLED: frozenset(),
    AppointmentStatus.NO_SHOW: frozenset(),
}
