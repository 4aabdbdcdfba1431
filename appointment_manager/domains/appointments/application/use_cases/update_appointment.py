"""
Update Appointment Use Case

Replaces the title, description and time slot of an existing appointment.
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from appointment_manager.core.application import IUnitOfWork, Result
from appointment_manager.core.domain import DomainException
from appointment_manager.core.shared.cancellation import CancellationToken
from appointment_manager.core.shared.clock import IDateTimeProvider, system_clock
from appointment_manager.domains.appointments.application.ports.appointment_repository import (
    IAppointmentRepository,
)
from appointment_manager.domains.appointments.application.use_cases.base import (
    NOT_FOUND_CODE,
    NOT_FOUND_MESSAGE,
    UNEXPECTED_ERROR_CODE,
)
from appointment_manager.domains.appointments.domain.value_objects import AppointmentId, DateRange

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateAppointmentCommand:
    """Input for updating appointment details."""

    appointment_id: AppointmentId
    title: str
    start_date: datetime
    end_date: datetime
    description: str | None = None


class UpdateAppointmentUseCase:
    """Use case for updating appointment details."""

    def __init__(
        self,
        repository: IAppointmentRepository,
        unit_of_work: IUnitOfWork,
        clock: IDateTimeProvider | None = None,
    ):
        self.repository = repository
        self.unit_of_work = unit_of_work
        self.clock = clock or system_clock

    async def execute(
        self,
        command: UpdateAppointmentCommand,
        cancellation: CancellationToken | None = None,
    ) -> Result[None]:
        try:
            CancellationToken.check(cancellation)

            appointment = await self.repository.get_by_id(command.appointment_id, cancellation)
            if appointment is None:
                logger.warning(f"Appointment not found: {command.appointment_id}")
                return Result.failure(NOT_FOUND_MESSAGE, code=NOT_FOUND_CODE)

            CancellationToken.check(cancellation)

            date_range = DateRange.create(command.start_date, command.end_date)
            appointment.update_details(
                title=command.title,
                description=command.description,
                date_range=date_range,
                clock=self.clock,
            )

            await self.repository.update(appointment, cancellation)
            CancellationToken.check(cancellation)
            await self.unit_of_work.save_changes(cancellation)

            logger.info(f"Appointment updated: {command.appointment_id}")
            return Result.success()

        except DomainException as e:
            logger.warning(f"Appointment update rejected: {e.message}")
            return Result.failure(e.message, code=e.code)
        except Exception as e:
            logger.error(f"Error updating appointment: {e}", exc_info=True)
            return Result.failure(
                f"An error occurred while updating the appointment: {e}",
                code=UNEXPECTED_ERROR_CODE,
            )
