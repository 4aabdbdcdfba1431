"""
Cancel Appointment Use Case

Cancels a scheduled, confirmed or in-progress appointment.
"""

from dataclasses import dataclass

from appointment_manager.domains.appointments.application.use_cases.base import (
    AppointmentCommand,
    AppointmentTransitionUseCase,
)
from appointment_manager.domains.appointments.domain.entities.appointment import Appointment


@dataclass(frozen=True)
class CancelAppointmentCommand(AppointmentCommand):
    """Cancellation request. Terminal appointments cannot be cancelled."""


class CancelAppointmentUseCase(AppointmentTransitionUseCase):
    action = "cancelling the appointment"
    past_tense = "cancelled"

    def apply(self, appointment: Appointment) -> None:
        appointment.cancel(clock=self.clock)
