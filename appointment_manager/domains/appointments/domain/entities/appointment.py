"""
Appointment Entity for Appointments Domain

Represents a medical appointment with its lifecycle state machine.
"""

from dataclasses import dataclass
from datetime import datetime

from appointment_manager.core.domain import (
    AggregateRoot,
    InvalidOperationException,
    ValidationException,
)
from appointment_manager.core.shared.clock import IDateTimeProvider, system_clock

from ..value_objects.appointment_id import AppointmentId
from ..value_objects.appointment_status import AppointmentStatus
from ..value_objects.date_range import DateRange


@dataclass(eq=False, kw_only=True)
class Appointment(AggregateRoot[AppointmentId]):
    """
    Appointment aggregate root.

    Built through ``create`` (validated) or ``reconstruct`` (storage only),
    and mutated only through its own methods. Every successful mutation
    stamps ``updated_at``; a rejected one leaves the aggregate untouched.

    Example:
        ```python
        appointment = Appointment.create(
            title="Annual checkup",
            description=None,
            date_range=DateRange.create(start, end),
            patient_name="John Doe",
            patient_email="john.doe@email.com",
            patient_phone="+1234567890",
            doctor_name="Dr. Smith",
        )
        appointment.confirm()
        appointment.mark_in_progress()
        appointment.complete()
        ```
    """

    title: str
    description: str | None = None
    date_range: DateRange

    # Participants
    patient_name: str
    patient_email: str | None = None
    patient_phone: str | None = None
    doctor_name: str

    status: AppointmentStatus = AppointmentStatus.SCHEDULED

    @property
    def appointment_id(self) -> AppointmentId:
        return self.id or AppointmentId.empty()

    # Construction

    @classmethod
    def create(
        cls,
        title: str,
        description: str | None,
        date_range: DateRange,
        patient_name: str,
        patient_email: str | None,
        patient_phone: str | None,
        doctor_name: str,
        clock: IDateTimeProvider | None = None,
    ) -> "Appointment":
        """Validated factory. Checks title, patient, doctor, then date range."""
        _require_text(title, "Title cannot be empty", "title")
        _require_text(patient_name, "Patient name cannot be empty", "patient_name")
        _require_text(doctor_name, "Doctor name cannot be empty", "doctor_name")
        if not date_range.is_valid:
            raise ValidationException("Date range is invalid", field="date_range")

        return cls(
            id=AppointmentId.new(),
            created_at=(clock or system_clock).utc_now(),
            title=title,
            description=description,
            date_range=date_range,
            patient_name=patient_name,
            patient_email=patient_email,
            patient_phone=patient_phone,
            doctor_name=doctor_name,
            status=AppointmentStatus.SCHEDULED,
        )

    @classmethod
    def reconstruct(
        cls,
        id: AppointmentId,
        title: str,
        description: str | None,
        date_range: DateRange,
        patient_name: str,
        patient_email: str | None,
        patient_phone: str | None,
        doctor_name: str,
        status: AppointmentStatus,
        created_at: datetime,
        updated_at: datetime | None,
    ) -> "Appointment":
        """Rehydrate from storage without validation. Persistence mapping only."""
        return cls(
            id=id,
            created_at=created_at,
            updated_at=updated_at,
            title=title,
            description=description,
            date_range=date_range,
            patient_name=patient_name,
            patient_email=patient_email,
            patient_phone=patient_phone,
            doctor_name=doctor_name,
            status=status,
        )

    # Details

    def update_details(
        self,
        title: str,
        description: str | None,
        date_range: DateRange,
        clock: IDateTimeProvider | None = None,
    ) -> None:
        """Replace title, description and date range as one unit."""
        if self.status in (AppointmentStatus.CANCELLED, AppointmentStatus.COMPLETED):
            raise InvalidOperationException(
                operation="update_details",
                current_state=self.status.value,
                message="Cannot update a cancelled or completed appointment",
            )
        if not self.status.allows_detail_update():
            raise InvalidOperationException(
                operation="update_details",
                current_state=self.status.value,
                message="Cannot update a no-show appointment",
            )

        _require_text(title, "Title cannot be empty", "title")
        if not date_range.is_valid:
            raise ValidationException("Date range is invalid", field="date_range")

        self.title = title
        self.description = description
        self.date_range = date_range
        self.touch(clock)

    # Status Transitions

    def confirm(self, clock: IDateTimeProvider | None = None) -> None:
        self._transition(
            AppointmentStatus.CONFIRMED,
            operation="confirm",
            message="Can only confirm scheduled appointments",
            clock=clock,
        )

    def cancel(self, clock: IDateTimeProvider | None = None) -> None:
        self._transition(
            AppointmentStatus.CANCELLED,
            operation="cancel",
            message="Can only cancel scheduled, confirmed or in-progress appointments",
            clock=clock,
        )

    def mark_in_progress(self, clock: IDateTimeProvider | None = None) -> None:
        self._transition(
            AppointmentStatus.IN_PROGRESS,
            operation="mark_in_progress",
            message="Can only start confirmed appointments",
            clock=clock,
        )

    def complete(self, clock: IDateTimeProvider | None = None) -> None:
        self._transition(
            AppointmentStatus.COMPLETED,
            operation="complete",
            message="Can only complete appointments that are in progress",
            clock=clock,
        )

    def mark_no_show(self, clock: IDateTimeProvider | None = None) -> None:
        self._transition(
            AppointmentStatus.NO_SHOW,
            operation="mark_no_show",
            message="Can only mark confirmed appointments as no-show",
            clock=clock,
        )

    def _transition(
        self,
        target: AppointmentStatus,
        operation: str,
        message: str,
        clock: IDateTimeProvider | None,
    ) -> None:
        if not self.status.can_transition_to(target):
            raise InvalidOperationException(
                operation=operation,
                current_state=self.status.value,
                message=message,
            )
        self.status = target
        self.touch(clock)

    # Helpers

    def can_be_modified(self) -> bool:
        return self.status.allows_detail_update()

    def overlaps_with(self, other: "Appointment") -> bool:
        """Time overlap with another appointment."""
        return self.date_range.overlaps(other.date_range)


def _require_text(value: str | None, message: str, field: str) -> None:
    if value is None or not value.strip():
        raise ValidationException(message, field=field)
