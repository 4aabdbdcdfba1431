"""
Appointment DTO

Read-only projection of the Appointment aggregate returned by queries.
"""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from appointment_manager.domains.appointments.domain.entities.appointment import Appointment
from appointment_manager.domains.appointments.domain.value_objects import AppointmentStatus


@dataclass(frozen=True)
class AppointmentDTO:
    """Appointment data transfer object"""

    id: UUID
    title: str
    description: str | None
    start_date: datetime
    end_date: datetime
    patient_name: str
    patient_email: str | None
    patient_phone: str | None
    doctor_name: str
    status: AppointmentStatus
    created_at: datetime
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, appointment: Appointment) -> "AppointmentDTO":
        return cls(
            id=appointment.appointment_id.to_uuid(),
            title=appointment.title,
            description=appointment.description,
            start_date=appointment.date_range.start,
            end_date=appointment.date_range.end,
            patient_name=appointment.patient_name,
            patient_email=appointment.patient_email,
            patient_phone=appointment.patient_phone,
            doctor_name=appointment.doctor_name,
            status=appointment.status,
            created_at=appointment.created_at,
            updated_at=appointment.updated_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def to_dto(appointment: Appointment) -> AppointmentDTO:
    """Map an aggregate to its DTO projection."""
    return AppointmentDTO.from_entity(appointment)
