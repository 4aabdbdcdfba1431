"""
Appointments SQLAlchemy Models

Database models for appointment persistence.
"""

from sqlalchemy import Column, DateTime, Enum as SQLEnum, Index, String
from sqlalchemy.dialects.postgresql import UUID as PGUUID

from appointment_manager.database.base import Base
from appointment_manager.domains.appointments.domain.value_objects import AppointmentStatus


class AppointmentModel(Base):
    """SQLAlchemy model for Appointment entity."""

    __tablename__ = "appointments"

    id = Column(PGUUID(as_uuid=True), primary_key=True)

    # Details
    title = Column(String(200), nullable=False)
    description = Column(String(1000), nullable=True)
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)

    # Participants
    patient_name = Column(String(100), nullable=False)
    patient_email = Column(String(100), nullable=True)
    patient_phone = Column(String(20), nullable=True)
    doctor_name = Column(String(100), nullable=False)

    # Status
    status = Column(
        SQLEnum(
            AppointmentStatus,
            name="appointment_status",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        default=AppointmentStatus.SCHEDULED,
        nullable=False,
    )

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (Index("ix_appointments_start_date", "start_date"),)

    def __repr__(self) -> str:
        return f"<AppointmentModel(id={self.id}, title='{self.title}', status={self.status})>"
