"""
List Appointments Use Case

Returns one page of appointments, optionally narrowed by in-memory filters.

The repository page is fetched first and the filters are applied to that
page only, so ``total_count`` is the number of matching items within the
fetched page rather than across all stored appointments.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from appointment_manager.core.application import PagedList, Result
from appointment_manager.core.shared.cancellation import CancellationToken
from appointment_manager.core.shared.clock import as_utc
from appointment_manager.domains.appointments.application.dto import AppointmentDTO, to_dto
from appointment_manager.domains.appointments.application.ports.appointment_repository import (
    IAppointmentRepository,
)
from appointment_manager.domains.appointments.application.use_cases.base import UNEXPECTED_ERROR_CODE
from appointment_manager.domains.appointments.domain.entities.appointment import Appointment
from appointment_manager.domains.appointments.domain.value_objects import AppointmentStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListAppointmentsQuery:
    """Paging plus optional filters. Unset filters match everything."""

    page: int = 1
    page_size: int = 10
    doctor_name: str | None = None
    patient_name: str | None = None
    status: AppointmentStatus | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None

    def __post_init__(self) -> None:
        # Stored ranges are UTC; naive bounds are read as UTC too
        for name in ("start_date", "end_date"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, as_utc(value))


class ListAppointmentsUseCase:
    """Use case for listing appointments."""

    def __init__(self, repository: IAppointmentRepository):
        self.repository = repository

    async def execute(
        self,
        query: ListAppointmentsQuery,
        cancellation: CancellationToken | None = None,
    ) -> Result[PagedList[AppointmentDTO]]:
        try:
            CancellationToken.check(cancellation)

            appointments = await self.repository.get_paged(query.page, query.page_size, cancellation)
            CancellationToken.check(cancellation)

            filtered = [to_dto(a) for a in _apply_filters(appointments, query)]

            logger.debug(
                f"Listed {len(filtered)} of {len(appointments)} appointments on page {query.page}"
            )
            return Result.success(
                PagedList.create(
                    items=filtered,
                    page=query.page,
                    page_size=query.page_size,
                    total_count=len(filtered),
                )
            )

        except Exception as e:
            logger.error(f"Error retrieving appointments: {e}", exc_info=True)
            return Result.failure(
                f"An error occurred while retrieving appointments: {e}",
                code=UNEXPECTED_ERROR_CODE,
            )


def _apply_filters(appointments: Iterable[Appointment], query: ListAppointmentsQuery) -> list[Appointment]:
    result = list(appointments)

    if query.doctor_name and query.doctor_name.strip():
        needle = query.doctor_name.casefold()
        result = [a for a in result if needle in a.doctor_name.casefold()]

    if query.patient_name and query.patient_name.strip():
        needle = query.patient_name.casefold()
        result = [a for a in result if needle in a.patient_name.casefold()]

    if query.status is not None:
        result = [a for a in result if a.status == query.status]

    if query.start_date is not None:
        result = [a for a in result if a.date_range.start >= query.start_date]

    if query.end_date is not None:
        result = [a for a in result if a.date_range.end <= query.end_date]

    return result
