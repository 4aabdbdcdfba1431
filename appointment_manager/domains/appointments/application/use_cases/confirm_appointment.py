"""
Confirm Appointment Use Case

Confirms a scheduled appointment.
"""

from dataclasses import dataclass

from appointment_manager.domains.appointments.application.use_cases.base import (
    AppointmentCommand,
    AppointmentTransitionUseCase,
)
from appointment_manager.domains.appointments.domain.entities.appointment import Appointment


@dataclass(frozen=True)
class ConfirmAppointmentCommand(AppointmentCommand):
    pass


class ConfirmAppointmentUseCase(AppointmentTransitionUseCase):
    action = "confirming the appointment"
    past_tense = "confirmed"

    def apply(self, appointment: Appointment) -> None:
        appointment.confirm(clock=self.clock)
