"""
Appointments SQLAlchemy Persistence
"""

from appointment_manager.domains.appointments.infrastructure.persistence.sqlalchemy.models import AppointmentModel

__all__ = ["AppointmentModel"]
