"""
End-to-end lifecycle scenarios through the use cases against in-memory
persistence.
"""

from dataclasses import fields
from datetime import timedelta

import pytest

from appointment_manager.domains.appointments.application.dto import AppointmentDTO, to_dto
from appointment_manager.domains.appointments.application.use_cases import (
    CancelAppointmentCommand,
    CancelAppointmentUseCase,
    CompleteAppointmentCommand,
    CompleteAppointmentUseCase,
    ConfirmAppointmentCommand,
    ConfirmAppointmentUseCase,
    CreateAppointmentCommand,
    CreateAppointmentUseCase,
    GetAppointmentByIdQuery,
    GetAppointmentByIdUseCase,
    StartAppointmentCommand,
    StartAppointmentUseCase,
    UpdateAppointmentCommand,
    UpdateAppointmentUseCase,
)
from appointment_manager.domains.appointments.domain import AppointmentId, AppointmentStatus


async def _create(repository, unit_of_work, clock, base_time) -> AppointmentId:
    start = base_time + timedelta(days=1)
    result = await CreateAppointmentUseCase(repository, unit_of_work, clock).execute(
        CreateAppointmentCommand(
            title="Medical Consultation",
            description="Annual checkup",
            start_date=start,
            end_date=start + timedelta(hours=1),
            patient_name="John Doe",
            patient_email="john.doe@email.com",
            patient_phone="+1234567890",
            doctor_name="Dr. Smith",
        )
    )
    assert result.is_success
    return AppointmentId.from_uuid(result.value)


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_schedule_confirm_start_complete(in_memory_repository, fake_unit_of_work, clock, base_time):
    """Test the happy path lifecycle stamps three increasing updates."""
    appointment_id = await _create(in_memory_repository, fake_unit_of_work, clock, base_time)

    stamps = []
    steps = [
        (ConfirmAppointmentUseCase, ConfirmAppointmentCommand),
        (StartAppointmentUseCase, StartAppointmentCommand),
        (CompleteAppointmentUseCase, CompleteAppointmentCommand),
    ]
    for use_case_cls, command_cls in steps:
        result = await use_case_cls(in_memory_repository, fake_unit_of_work, clock).execute(
            command_cls(appointment_id=appointment_id)
        )
        assert result.is_success
        stamps.append(in_memory_repository.items[appointment_id].updated_at)

    stored = in_memory_repository.items[appointment_id]
    assert stored.status == AppointmentStatus.COMPLETED
    assert len(stamps) == 3
    assert all(later >= earlier for earlier, later in zip(stamps, stamps[1:]))
    assert stamps[0] > stored.created_at
    assert fake_unit_of_work.commits == 4


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_cancelled_appointment_rejects_update(in_memory_repository, fake_unit_of_work, clock, base_time):
    """Test create, cancel, then update fails."""
    appointment_id = await _create(in_memory_repository, fake_unit_of_work, clock, base_time)

    cancelled = await CancelAppointmentUseCase(in_memory_repository, fake_unit_of_work, clock).execute(
        CancelAppointmentCommand(appointment_id=appointment_id)
    )
    assert cancelled.is_success

    start = base_time + timedelta(days=3)
    result = await UpdateAppointmentUseCase(in_memory_repository, fake_unit_of_work, clock).execute(
        UpdateAppointmentCommand(
            appointment_id=appointment_id,
            title="Rescheduled",
            start_date=start,
            end_date=start + timedelta(hours=1),
        )
    )

    assert result.is_failure
    assert result.error == "Cannot update a cancelled or completed appointment"
    assert in_memory_repository.items[appointment_id].title == "Medical Consultation"
    assert fake_unit_of_work.commits == 2


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_rejected_transition_leaves_store_unchanged(
    in_memory_repository, fake_unit_of_work, clock, base_time
):
    """Test a second confirm fails and persists nothing."""
    appointment_id = await _create(in_memory_repository, fake_unit_of_work, clock, base_time)
    use_case = ConfirmAppointmentUseCase(in_memory_repository, fake_unit_of_work, clock)

    first = await use_case.execute(ConfirmAppointmentCommand(appointment_id=appointment_id))
    stamp = in_memory_repository.items[appointment_id].updated_at
    second = await use_case.execute(ConfirmAppointmentCommand(appointment_id=appointment_id))

    assert first.is_success
    assert second.is_failure
    assert second.error == "Can only confirm scheduled appointments"
    assert in_memory_repository.items[appointment_id].updated_at == stamp
    assert fake_unit_of_work.commits == 2


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_dto_reproduces_every_field(in_memory_repository, fake_unit_of_work, clock, base_time):
    """Test the DTO projection of a created appointment matches the aggregate."""
    appointment_id = await _create(in_memory_repository, fake_unit_of_work, clock, base_time)
    stored = in_memory_repository.items[appointment_id]

    result = await GetAppointmentByIdUseCase(in_memory_repository).execute(
        GetAppointmentByIdQuery(appointment_id=appointment_id)
    )

    dto = result.value
    assert dto == to_dto(stored)
    assert dto.id == appointment_id.to_uuid()
    assert dto.title == stored.title
    assert dto.description == stored.description
    assert dto.start_date == stored.date_range.start
    assert dto.end_date == stored.date_range.end
    assert dto.patient_name == stored.patient_name
    assert dto.patient_email == stored.patient_email
    assert dto.patient_phone == stored.patient_phone
    assert dto.doctor_name == stored.doctor_name
    assert dto.status == stored.status
    assert dto.created_at == stored.created_at
    assert dto.updated_at is None
    assert set(dto.to_dict()) == {f.name for f in fields(AppointmentDTO)}
