"""
Appointments Repository Implementations
"""

from appointment_manager.domains.appointments.infrastructure.repositories.appointment_repository import (
    SQLAlchemyAppointmentRepository,
)
from appointment_manager.domains.appointments.infrastructure.repositories.unit_of_work import (
    SQLAlchemyUnitOfWork,
)

__all__ = [
    "SQLAlchemyAppointmentRepository",
    "SQLAlchemyUnitOfWork",
]
