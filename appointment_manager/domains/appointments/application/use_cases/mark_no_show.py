"""
Mark No-Show Use Case

Records that the patient did not attend a confirmed appointment.
"""

from dataclasses import dataclass

from appointment_manager.domains.appointments.application.use_cases.base import (
    AppointmentCommand,
    AppointmentTransitionUseCase,
)
from appointment_manager.domains.appointments.domain.entities.appointment import Appointment


@dataclass(frozen=True)
class MarkNoShowCommand(AppointmentCommand):
    pass


class MarkNoShowUseCase(AppointmentTransitionUseCase):
    action = "marking appointment as no-show"
    past_tense = "marked as no-show"

    def apply(self, appointment: Appointment) -> None:
        appointment.mark_no_show(clock=self.clock)
