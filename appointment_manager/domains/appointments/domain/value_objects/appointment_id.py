"""
AppointmentId value object.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4

from appointment_manager.core.domain import ValidationException, ValueObject

_EMPTY_UUID = UUID(int=0)


@dataclass(frozen=True)
class AppointmentId(ValueObject):
    """
    Opaque, immutable appointment identifier wrapping a UUID.

    Conversions to and from raw values are explicit; a raw UUID or string
    is never accepted where an AppointmentId is expected.
    """

    value: UUID

    def _validate(self) -> None:
        if not isinstance(self.value, UUID):
            raise ValidationException("Appointment id must wrap a UUID", field="id")

    @classmethod
    def new(cls) -> "AppointmentId":
        """Mint a fresh identity."""
        return cls(uuid4())

    @classmethod
    def empty(cls) -> "AppointmentId":
        """Sentinel meaning "no identity assigned"."""
        return cls(_EMPTY_UUID)

    @classmethod
    def from_uuid(cls, value: UUID) -> "AppointmentId":
        return cls(value)

    @classmethod
    def from_string(cls, value: str) -> "AppointmentId":
        try:
            return cls(UUID(value))
        except (TypeError, ValueError, AttributeError) as e:
            raise ValidationException(f"Invalid appointment id: {value}", field="id") from e

    @property
    def is_empty(self) -> bool:
        return self.value == _EMPTY_UUID

    def to_uuid(self) -> UUID:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
