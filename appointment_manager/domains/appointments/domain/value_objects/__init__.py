"""
Appointments Domain Value Objects

Immutable value objects for the appointments domain.
"""

from appointment_manager.domains.appointments.domain.value_objects.appointment_id import AppointmentId
from appointment_manager.domains.appointments.domain.value_objects.appointment_status import AppointmentStatus
from appointment_manager.domains.appointments.domain.value_objects.date_range import DateRange

__all__ = [
    "AppointmentId",
    "AppointmentStatus",
    "DateRange",
]
