"""
Appointments Domain Ports

Interfaces (ports) for the appointments domain following Clean Architecture.
"""

from appointment_manager.core.application.unit_of_work import IUnitOfWork
from appointment_manager.domains.appointments.application.ports.appointment_repository import (
    IAppointmentRepository,
)

__all__ = [
    "IAppointmentRepository",
    "IUnitOfWork",
]
