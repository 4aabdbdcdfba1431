"""
Shared plumbing for appointment use cases.

Status transitions (confirm, start, complete, cancel, no-show) share one flow:
load, apply a single aggregate method, update, commit. Subclasses supply the
command type, the aggregate method and the verb used in error messages.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from appointment_manager.core.application import IUnitOfWork, Result
from appointment_manager.core.domain import DomainException
from appointment_manager.core.shared.cancellation import CancellationToken
from appointment_manager.core.shared.clock import IDateTimeProvider, system_clock
from appointment_manager.domains.appointments.application.ports.appointment_repository import (
    IAppointmentRepository,
)
from appointment_manager.domains.appointments.domain.entities.appointment import Appointment
from appointment_manager.domains.appointments.domain.value_objects import AppointmentId

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Appointment not found"
NOT_FOUND_CODE = "ENTITY_NOT_FOUND"
UNEXPECTED_ERROR_CODE = "UNEXPECTED_ERROR"


@dataclass(frozen=True)
class AppointmentCommand:
    """Command targeting a single existing appointment."""

    appointment_id: AppointmentId


class AppointmentTransitionUseCase(ABC):
    """
    Base use case for single-step status transitions.

    Attributes:
        action: Gerund used in the unexpected-error prefix,
            e.g. "confirming the appointment"
        past_tense: Verb used in the success log line
    """

    action: str = ""
    past_tense: str = ""

    def __init__(
        self,
        repository: IAppointmentRepository,
        unit_of_work: IUnitOfWork,
        clock: IDateTimeProvider | None = None,
    ):
        self.repository = repository
        self.unit_of_work = unit_of_work
        self.clock = clock or system_clock

    @abstractmethod
    def apply(self, appointment: Appointment) -> None:
        """Invoke exactly one aggregate method."""

    async def execute(
        self,
        command: AppointmentCommand,
        cancellation: CancellationToken | None = None,
    ) -> Result[None]:
        try:
            CancellationToken.check(cancellation)

            appointment = await self.repository.get_by_id(command.appointment_id, cancellation)
            if appointment is None:
                logger.warning(f"Appointment not found: {command.appointment_id}")
                return Result.failure(NOT_FOUND_MESSAGE, code=NOT_FOUND_CODE)

            CancellationToken.check(cancellation)

            self.apply(appointment)

            await self.repository.update(appointment, cancellation)
            CancellationToken.check(cancellation)
            await self.unit_of_work.save_changes(cancellation)

            logger.info(f"Appointment {self.past_tense}: {command.appointment_id}")
            return Result.success()

        except DomainException as e:
            logger.warning(f"Appointment {command.appointment_id} rejected: {e.message}")
            return Result.failure(e.message, code=e.code)
        except Exception as e:
            logger.error(f"Error {self.action}: {e}", exc_info=True)
            return Result.failure(
                f"An error occurred while {self.action}: {e}",
                code=UNEXPECTED_ERROR_CODE,
            )
