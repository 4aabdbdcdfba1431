"""
Appointments Application DTOs
"""

from appointment_manager.domains.appointments.application.dto.appointment_dto import AppointmentDTO, to_dto

__all__ = [
    "AppointmentDTO",
    "to_dto",
]
