"""
Appointments Domain Entities
"""

from appointment_manager.domains.appointments.domain.entities.appointment import Appointment

__all__ = [
    "Appointment",
]
