"""
Get Appointment By Id Use Case

Read-only lookup of a single appointment.
"""

import logging
from dataclasses import dataclass

from appointment_manager.core.application import Result
from appointment_manager.core.shared.cancellation import CancellationToken
from appointment_manager.domains.appointments.application.dto import AppointmentDTO, to_dto
from appointment_manager.domains.appointments.application.ports.appointment_repository import (
    IAppointmentRepository,
)
from appointment_manager.domains.appointments.application.use_cases.base import (
    NOT_FOUND_CODE,
    NOT_FOUND_MESSAGE,
    UNEXPECTED_ERROR_CODE,
)
from appointment_manager.domains.appointments.domain.value_objects import AppointmentId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GetAppointmentByIdQuery:
    appointment_id: AppointmentId


class GetAppointmentByIdUseCase:
    """
    Use case for retrieving one appointment.

    Never writes: no unit of work is involved.
    """

    def __init__(self, repository: IAppointmentRepository):
        self.repository = repository

    async def execute(
        self,
        query: GetAppointmentByIdQuery,
        cancellation: CancellationToken | None = None,
    ) -> Result[AppointmentDTO]:
        try:
            CancellationToken.check(cancellation)

            appointment = await self.repository.get_by_id(query.appointment_id, cancellation)
            CancellationToken.check(cancellation)

            if appointment is None:
                logger.warning(f"Appointment not found: {query.appointment_id}")
                return Result.failure(NOT_FOUND_MESSAGE, code=NOT_FOUND_CODE)

            return Result.success(to_dto(appointment))

        except Exception as e:
            logger.error(f"Error retrieving appointment {query.appointment_id}: {e}", exc_info=True)
            return Result.failure(
                f"An error occurred while retrieving the appointment: {e}",
                code=UNEXPECTED_ERROR_CODE,
            )
