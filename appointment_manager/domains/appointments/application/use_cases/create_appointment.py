"""
Create Appointment Use Case

Schedules a new appointment.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from appointment_manager.core.application import IUnitOfWork, Result
from appointment_manager.core.domain import DomainException
from appointment_manager.core.shared.cancellation import CancellationToken
from appointment_manager.core.shared.clock import IDateTimeProvider, system_clock
from appointment_manager.domains.appointments.application.ports.appointment_repository import (
    IAppointmentRepository,
)
from appointment_manager.domains.appointments.application.use_cases.base import UNEXPECTED_ERROR_CODE
from appointment_manager.domains.appointments.domain.entities.appointment import Appointment
from appointment_manager.domains.appointments.domain.value_objects import DateRange

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateAppointmentCommand:
    """Input for scheduling an appointment."""

    title: str
    start_date: datetime
    end_date: datetime
    patient_name: str
    doctor_name: str
    description: str | None = None
    patient_email: str | None = None
    patient_phone: str | None = None


class CreateAppointmentUseCase:
    """
    Use case for creating appointments.

    Single Responsibility: Only handles appointment creation
    Dependency Inversion: Depends on interfaces, not implementations
    """

    def __init__(
        self,
        repository: IAppointmentRepository,
        unit_of_work: IUnitOfWork,
        clock: IDateTimeProvider | None = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            repository: Repository for appointment data access
            unit_of_work: Commit boundary
            clock: Time source for the created_at stamp
        """
        self.repository = repository
        self.unit_of_work = unit_of_work
        self.clock = clock or system_clock

    async def execute(
        self,
        command: CreateAppointmentCommand,
        cancellation: CancellationToken | None = None,
    ) -> Result[UUID]:
        """
        Execute appointment creation.

        Returns:
            Result carrying the new appointment id
        """
        try:
            CancellationToken.check(cancellation)

            date_range = DateRange.create(command.start_date, command.end_date)
            appointment = Appointment.create(
                title=command.title,
                description=command.description,
                date_range=date_range,
                patient_name=command.patient_name,
                patient_email=command.patient_email,
                patient_phone=command.patient_phone,
                doctor_name=command.doctor_name,
                clock=self.clock,
            )

            await self.repository.add(appointment, cancellation)
            CancellationToken.check(cancellation)
            await self.unit_of_work.save_changes(cancellation)

            logger.info(
                f"Appointment created: {appointment.appointment_id} for patient {appointment.patient_name} "
                f"with {appointment.doctor_name} at {date_range.start.isoformat()}"
            )
            return Result.success(appointment.appointment_id.to_uuid())

        except DomainException as e:
            logger.warning(f"Appointment creation rejected: {e.message}")
            return Result.failure(e.message, code=e.code)
        except Exception as e:
            logger.error(f"Error creating appointment: {e}", exc_info=True)
            return Result.failure(
                f"An error occurred while creating the appointment: {e}",
                code=UNEXPECTED_ERROR_CODE,
            )
