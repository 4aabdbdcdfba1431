"""
Complete Appointment Use Case

Completes an appointment that is in progress.
"""

from dataclasses import dataclass

from appointment_manager.domains.appointments.application.use_cases.base import (
    AppointmentCommand,
    AppointmentTransitionUseCase,
)
from appointment_manager.domains.appointments.domain.entities.appointment import Appointment


@dataclass(frozen=True)
class CompleteAppointmentCommand(AppointmentCommand):
    pass


class CompleteAppointmentUseCase(AppointmentTransitionUseCase):
    action = "completing the appointment"
    past_tense = "completed"

    def apply(self, appointment: Appointment) -> None:
        appointment.complete(clock=self.clock)
