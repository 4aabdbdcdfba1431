"""
Appointments API Dependencies

FastAPI dependencies wiring use cases to the request-scoped database session.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from appointment_manager.core.application import IUnitOfWork
from appointment_manager.core.shared.cancellation import CancellationToken
from appointment_manager.core.shared.clock import IDateTimeProvider, system_clock
from appointment_manager.database.async_db import get_async_db
from appointment_manager.domains.appointments.application.ports import IAppointmentRepository
from appointment_manager.domains.appointments.application.use_cases import (
    CancelAppointmentUseCase,
    CompleteAppointmentUseCase,
    ConfirmAppointmentUseCase,
    CreateAppointmentUseCase,
    GetAppointmentByIdUseCase,
    ListAppointmentsUseCase,
    MarkNoShowUseCase,
    StartAppointmentUseCase,
    UpdateAppointmentUseCase,
)
from appointment_manager.domains.appointments.infrastructure.repositories import (
    SQLAlchemyAppointmentRepository,
    SQLAlchemyUnitOfWork,
)

# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_async_db)]


def get_clock() -> IDateTimeProvider:
    return system_clock


def get_cancellation_token() -> CancellationToken:
    """One token per request."""
    return CancellationToken()


def get_appointment_repository(db: DbSession) -> IAppointmentRepository:
    return SQLAlchemyAppointmentRepository(db)


def get_unit_of_work(db: DbSession) -> IUnitOfWork:
    return SQLAlchemyUnitOfWork(db)


RepositoryDep = Annotated[IAppointmentRepository, Depends(get_appointment_repository)]
UnitOfWorkDep = Annotated[IUnitOfWork, Depends(get_unit_of_work)]
ClockDep = Annotated[IDateTimeProvider, Depends(get_clock)]


def get_create_appointment_use_case(
    repository: RepositoryDep, unit_of_work: UnitOfWorkDep, clock: ClockDep
) -> CreateAppointmentUseCase:
    return CreateAppointmentUseCase(repository, unit_of_work, clock)


def get_update_appointment_use_case(
    repository: RepositoryDep, unit_of_work: UnitOfWorkDep, clock: ClockDep
) -> UpdateAppointmentUseCase:
    return UpdateAppointmentUseCase(repository, unit_of_work, clock)


def get_confirm_appointment_use_case(
    repository: RepositoryDep, unit_of_work: UnitOfWorkDep, clock: ClockDep
) -> ConfirmAppointmentUseCase:
    return ConfirmAppointmentUseCase(repository, unit_of_work, clock)


def get_start_appointment_use_case(
    repository: RepositoryDep, unit_of_work: UnitOfWorkDep, clock: ClockDep
) -> StartAppointmentUseCase:
    return StartAppointmentUseCase(repository, unit_of_work, clock)


def get_complete_appointment_use_case(
    repository: RepositoryDep, unit_of_work: UnitOfWorkDep, clock: ClockDep
) -> CompleteAppointmentUseCase:
    return CompleteAppointmentUseCase(repository, unit_of_work, clock)


def get_cancel_appointment_use_case(
    repository: RepositoryDep, unit_of_work: UnitOfWorkDep, clock: ClockDep
) -> CancelAppointmentUseCase:
    return CancelAppointmentUseCase(repository, unit_of_work, clock)


def get_mark_no_show_use_case(
    repository: RepositoryDep, unit_of_work: UnitOfWorkDep, clock: ClockDep
) -> MarkNoShowUseCase:
    return MarkNoShowUseCase(repository, unit_of_work, clock)


def get_appointment_by_id_use_case(repository: RepositoryDep) -> GetAppointmentByIdUseCase:
    return GetAppointmentByIdUseCase(repository)


def get_list_appointments_use_case(repository: RepositoryDep) -> ListAppointmentsUseCase:
    return ListAppointmentsUseCase(repository)


__all__ = [
    "get_appointment_by_id_use_case",
    "get_appointment_repository",
    "get_cancel_appointment_use_case",
    "get_cancellation_token",
    "get_clock",
    "get_complete_appointment_use_case",
    "get_confirm_appointment_use_case",
    "get_create_appointment_use_case",
    "get_list_appointments_use_case",
    "get_mark_no_show_use_case",
    "get_start_appointment_use_case",
    "get_unit_of_work",
    "get_update_appointment_use_case",
]
