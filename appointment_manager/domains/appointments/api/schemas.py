"""
Appointments API Schemas

Pydantic schemas for API request/response validation.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from appointment_manager.core.application import PagedList
from appointment_manager.core.shared.clock import as_utc
from appointment_manager.domains.appointments.application.dto import AppointmentDTO


class _TimeSlotRequest(BaseModel):
    """Naive start/end values are read as UTC."""

    @field_validator("start_date", "end_date", check_fields=False)
    @classmethod
    def normalize_to_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class CreateAppointmentRequest(_TimeSlotRequest):
    """Appointment creation request schema."""

    title: str = Field(..., max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    start_date: datetime
    end_date: datetime
    patient_name: str = Field(..., max_length=100)
    patient_email: str | None = Field(default=None, max_length=100)
    patient_phone: str | None = Field(default=None, max_length=20)
    doctor_name: str = Field(..., max_length=100)


class UpdateAppointmentRequest(_TimeSlotRequest):
    """Appointment details update schema."""

    title: str = Field(..., max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    start_date: datetime
    end_date: datetime


class AppointmentCreatedResponse(BaseModel):
    id: UUID


class AppointmentResponse(BaseModel):
    """Appointment response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str | None = None
    start_date: datetime
    end_date: datetime
    patient_name: str
    patient_email: str | None = None
    patient_phone: str | None = None
    doctor_name: str
    status: str
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_dto(cls, dto: AppointmentDTO) -> "AppointmentResponse":
        return cls(
            id=dto.id,
            title=dto.title,
            description=dto.description,
            start_date=dto.start_date,
            end_date=dto.end_date,
            patient_name=dto.patient_name,
            patient_email=dto.patient_email,
            patient_phone=dto.patient_phone,
            doctor_name=dto.doctor_name,
            status=dto.status.value,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class AppointmentPageResponse(BaseModel):
    """One page of appointments."""

    items: list[AppointmentResponse]
    page: int
    page_size: int
    total_count: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def from_paged_list(cls, paged: PagedList[AppointmentDTO]) -> "AppointmentPageResponse":
        return cls(
            items=[AppointmentResponse.from_dto(dto) for dto in paged.items],
            page=paged.page,
            page_size=paged.page_size,
            total_count=paged.total_count,
            has_next_page=paged.has_next_page,
            has_previous_page=paged.has_previous_page,
        )
