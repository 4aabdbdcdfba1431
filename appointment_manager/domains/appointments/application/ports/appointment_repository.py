"""
Appointment Repository Port

Interface for appointment data access following Clean Architecture.
Implemented by the persistence layer; every call may fail on storage faults.
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol, runtime_checkable

from appointment_manager.core.shared.cancellation import CancellationToken
from appointment_manager.domains.appointments.domain.entities.appointment import Appointment
from appointment_manager.domains.appointments.domain.value_objects import AppointmentId


@runtime_checkable
class IAppointmentRepository(Protocol):
    """
    Appointment repository interface.

    All listings are ordered by range start ascending.

    Example:
        ```python
        class SQLAlchemyAppointmentRepository(IAppointmentRepository):
            async def get_by_id(self, appointment_id, cancellation=None) -> Appointment | None:
                ...
        ```
    """

    async def get_by_id(
        self,
        appointment_id: AppointmentId,
        cancellation: CancellationToken | None = None,
    ) -> Appointment | None:
        """
        Find appointment by ID.

        Returns:
            Appointment if found, None otherwise
        """
        ...

    async def get_all(self, cancellation: CancellationToken | None = None) -> Sequence[Appointment]:
        """Get every appointment."""
        ...

    async def get_paged(
        self,
        page: int,
        page_size: int,
        cancellation: CancellationToken | None = None,
    ) -> Sequence[Appointment]:
        """
        Get one page of appointments.

        Args:
            page: 1-based page number
            page_size: Page size
        """
        ...

    async def get_by_doctor(
        self,
        doctor_name: str,
        cancellation: CancellationToken | None = None,
    ) -> Sequence[Appointment]:
        """Appointments whose doctor name contains ``doctor_name``."""
        ...

    async def get_by_patient(
        self,
        patient_name: str,
        cancellation: CancellationToken | None = None,
    ) -> Sequence[Appointment]:
        """Appointments whose patient name contains ``patient_name``."""
        ...

    async def get_by_date_range(
        self,
        start: datetime,
        end: datetime,
        cancellation: CancellationToken | None = None,
    ) -> Sequence[Appointment]:
        """Appointments starting at or after ``start`` and ending at or before ``end``."""
        ...

    async def add(self, appointment: Appointment, cancellation: CancellationToken | None = None) -> None:
        """Stage a new appointment for the next commit."""
        ...

    async def update(self, appointment: Appointment, cancellation: CancellationToken | None = None) -> None:
        """Stage changes of an existing appointment for the next commit."""
        ...

    async def remove(self, appointment: Appointment, cancellation: CancellationToken | None = None) -> None:
        """Stage removal of an appointment for the next commit."""
        ...
