"""
Shared pytest fixtures for all tests.

Provides a deterministic clock, in-memory persistence doubles, AsyncMock
ports and appointment builders.
"""

import copy
import os
from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from appointment_manager.core.shared.cancellation import CancellationToken
from appointment_manager.domains.appointments.domain import (
    Appointment,
    AppointmentId,
    AppointmentStatus,
    DateRange,
)

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"


# ============================================================================
# CLOCK
# ============================================================================


class TickingClock:
    """Clock that advances by ``step`` every time ``utc_now`` is read."""

    def __init__(self, start: datetime, step: timedelta = timedelta(minutes=1)):
        self._current = start
        self._step = step
        self.issued: list[datetime] = []

    def utc_now(self) -> datetime:
        value = self._current
        self._current += self._step
        self.issued.append(value)
        return value

    def now(self) -> datetime:
        return self._current

    def today(self) -> date:
        return self._current.date()


BASE_TIME = datetime(2030, 1, 14, 8, 0, tzinfo=UTC)


@pytest.fixture
def base_time() -> datetime:
    return BASE_TIME


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock(BASE_TIME)


# ============================================================================
# IN-MEMORY PERSISTENCE
# ============================================================================


class InMemoryAppointmentRepository:
    """Dict-backed repository. Stores and returns copies, like a real store."""

    def __init__(self) -> None:
        self.items: dict[AppointmentId, Appointment] = {}

    def _sorted(self) -> list[Appointment]:
        return sorted(self.items.values(), key=lambda a: a.date_range.start)

    async def get_by_id(self, appointment_id, cancellation=None):
        CancellationToken.check(cancellation)
        stored = self.items.get(appointment_id)
        return copy.deepcopy(stored) if stored else None

    async def get_all(self, cancellation=None):
        return [copy.deepcopy(a) for a in self._sorted()]

    async def get_paged(self, page, page_size, cancellation=None):
        CancellationToken.check(cancellation)
        start = (page - 1) * page_size
        return [copy.deepcopy(a) for a in self._sorted()[start : start + page_size]]

    async def get_by_doctor(self, doctor_name, cancellation=None):
        return [copy.deepcopy(a) for a in self._sorted() if doctor_name in a.doctor_name]

    async def get_by_patient(self, patient_name, cancellation=None):
        return [copy.deepcopy(a) for a in self._sorted() if patient_name in a.patient_name]

    async def get_by_date_range(self, start, end, cancellation=None):
        return [
            copy.deepcopy(a) for a in self._sorted() if a.date_range.start >= start and a.date_range.end <= end
        ]

    async def add(self, appointment, cancellation=None):
        self.items[appointment.appointment_id] = copy.deepcopy(appointment)

    async def update(self, appointment, cancellation=None):
        self.items[appointment.appointment_id] = copy.deepcopy(appointment)

    async def remove(self, appointment, cancellation=None):
        self.items.pop(appointment.appointment_id, None)


class FakeUnitOfWork:
    def __init__(self) -> None:
        self.commits = 0

    async def save_changes(self, cancellation=None) -> int:
        CancellationToken.check(cancellation)
        self.commits += 1
        return 1


@pytest.fixture
def in_memory_repository() -> InMemoryAppointmentRepository:
    return InMemoryAppointmentRepository()


@pytest.fixture
def fake_unit_of_work() -> FakeUnitOfWork:
    return FakeUnitOfWork()


# ============================================================================
# MOCK PORTS
# ============================================================================


@pytest.fixture
def mock_appointment_repository():
    """Create a mock appointment repository."""
    repo = AsyncMock()
    return repo


@pytest.fixture
def mock_unit_of_work():
    """Create a mock unit of work that reports one affected record."""
    uow = AsyncMock()
    uow.save_changes.return_value = 1
    return uow


# ============================================================================
# APPOINTMENT BUILDERS
# ============================================================================


@pytest.fixture
def slot() -> DateRange:
    """Tomorrow 09:00-10:00 relative to the test clock."""
    start = BASE_TIME + timedelta(days=1, hours=1)
    return DateRange.create(start, start + timedelta(hours=1))


@pytest.fixture
def make_appointment(slot) -> Callable[..., Appointment]:
    """Build a stored appointment in any status without walking the state machine."""

    def _make(
        status: AppointmentStatus = AppointmentStatus.SCHEDULED,
        title: str = "Medical Consultation",
        doctor_name: str = "Dr. Smith",
        patient_name: str = "John Doe",
        date_range: DateRange | None = None,
    ) -> Appointment:
        return Appointment.reconstruct(
            id=AppointmentId.new(),
            title=title,
            description="Annual checkup",
            date_range=date_range or slot,
            patient_name=patient_name,
            patient_email="john.doe@email.com",
            patient_phone="+1234567890",
            doctor_name=doctor_name,
            status=status,
            created_at=BASE_TIME,
            updated_at=None,
        )

    return _make


@pytest.fixture
def scheduled_appointment(make_appointment) -> Appointment:
    return make_appointment()
