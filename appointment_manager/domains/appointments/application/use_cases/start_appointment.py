"""
Start Appointment Use Case

Moves a confirmed appointment into progress.
"""

from dataclasses import dataclass

from appointment_manager.domains.appointments.application.use_cases.base import (
    AppointmentCommand,
    AppointmentTransitionUseCase,
)
from appointment_manager.domains.appointments.domain.entities.appointment import Appointment


@dataclass(frozen=True)
class StartAppointmentCommand(AppointmentCommand):
    pass


class StartAppointmentUseCase(AppointmentTransitionUseCase):
    """Check-in: the patient arrived and the consultation begins."""

    action = "starting the appointment"
    past_tense = "started"

    def apply(self, appointment: Appointment) -> None:
        appointment.mark_in_progress(clock=self.clock)
