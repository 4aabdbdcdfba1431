"""
Appointments Domain Layer

Core business logic for the appointments bounded context.

Components:
- Entities: Appointment (aggregate root owning the lifecycle state machine)
- Value Objects: AppointmentId, DateRange, AppointmentStatus
"""

from appointment_manager.domains.appointments.domain.entities import Appointment
from appointment_manager.domains.appointments.domain.value_objects import (
    AppointmentId,
    AppointmentStatus,
    DateRange,
)

__all__ = [
    # Entities
    "Appointment",
    # Value Objects
    "AppointmentId",
    "AppointmentStatus",
    "DateRange",
]
