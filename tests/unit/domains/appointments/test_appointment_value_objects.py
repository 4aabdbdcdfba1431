"""
Unit tests for Appointments Domain Value Objects.

Tests:
- AppointmentId
- DateRange
- AppointmentStatus
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from appointment_manager.core.domain import ValidationException
from appointment_manager.domains.appointments.domain.value_objects import (
    AppointmentId,
    AppointmentStatus,
    DateRange,
)

NINE = datetime(2030, 1, 15, 9, 0, tzinfo=UTC)
TEN = datetime(2030, 1, 15, 10, 0, tzinfo=UTC)
ELEVEN = datetime(2030, 1, 15, 11, 0, tzinfo=UTC)


# ============================================================================
# AppointmentId Tests
# ============================================================================


@pytest.mark.unit
class TestAppointmentId:
    def test_new_ids_are_unique_and_not_empty(self):
        first = AppointmentId.new()
        second = AppointmentId.new()

        assert first != second
        assert not first.is_empty
        assert isinstance(first.to_uuid(), UUID)

    def test_empty_id(self):
        assert AppointmentId.empty().is_empty
        assert AppointmentId.empty() == AppointmentId.empty()

    def test_equality_by_value(self):
        raw = uuid4()

        assert AppointmentId.from_uuid(raw) == AppointmentId.from_uuid(raw)
        assert hash(AppointmentId.from_uuid(raw)) == hash(AppointmentId.from_uuid(raw))

    def test_from_string_round_trip(self):
        raw = uuid4()

        appointment_id = AppointmentId.from_string(str(raw))

        assert appointment_id.to_uuid() == raw
        assert str(appointment_id) == str(raw)

    def test_from_string_rejects_malformed_text(self):
        with pytest.raises(ValidationException) as exc_info:
            AppointmentId.from_string("not-a-uuid")

        assert "Invalid appointment id" in exc_info.value.message
        assert exc_info.value.code == "VALIDATION_ERROR"

    def test_rejects_raw_string_value(self):
        with pytest.raises(ValidationException):
            AppointmentId(str(uuid4()))  # type: ignore[arg-type]


# ============================================================================
# DateRange Tests
# ============================================================================


@pytest.mark.unit
class TestDateRange:
    def test_create_valid_range(self):
        date_range = DateRange.create(NINE, TEN)

        assert date_range.start == NINE
        assert date_range.end == TEN
        assert date_range.is_valid

    @pytest.mark.parametrize("start,end", [(TEN, NINE), (NINE, NINE)])
    def test_create_rejects_start_not_before_end(self, start, end):
        with pytest.raises(ValidationException) as exc_info:
            DateRange.create(start, end)

        assert exc_info.value.message == "Start date must be before end date"

    def test_create_reads_naive_values_as_utc(self):
        date_range = DateRange.create(NINE.replace(tzinfo=None), TEN.replace(tzinfo=None))

        assert date_range.start.utcoffset() == timedelta(0)
        assert date_range == DateRange.create(NINE, TEN)

    def test_duration(self):
        assert DateRange.create(NINE, ELEVEN).duration() == timedelta(hours=2)

    def test_contains_is_inclusive(self):
        date_range = DateRange.create(NINE, TEN)

        assert date_range.contains(NINE)
        assert date_range.contains(TEN)
        assert date_range.contains(NINE + timedelta(minutes=30))
        assert not date_range.contains(TEN + timedelta(seconds=1))
        assert not date_range.contains(NINE - timedelta(seconds=1))

    def test_overlapping_ranges(self):
        first = DateRange.create(NINE, TEN)
        second = DateRange.create(NINE + timedelta(minutes=30), ELEVEN)

        assert first.overlaps(second)
        assert second.overlaps(first)

    def test_adjacent_ranges_do_not_overlap(self):
        first = DateRange.create(NINE, TEN)
        second = DateRange.create(TEN, ELEVEN)

        assert not first.overlaps(second)
        assert not second.overlaps(first)

    def test_nested_range_overlaps(self):
        outer = DateRange.create(NINE, ELEVEN)
        inner = DateRange.create(NINE + timedelta(minutes=15), TEN)

        assert outer.overlaps(inner)
        assert inner.overlaps(outer)

    def test_value_equality_and_immutability(self):
        date_range = DateRange.create(NINE, TEN)

        assert date_range == DateRange.create(NINE, TEN)
        with pytest.raises(AttributeError):
            date_range.start = ELEVEN  # type: ignore[misc]

    def test_unvalidated_range_refuses_behavior(self):
        broken = DateRange(start=TEN, end=NINE)

        assert not broken.is_valid
        with pytest.raises(ValidationException):
            broken.duration()
        with pytest.raises(ValidationException):
            broken.overlaps(DateRange.create(NINE, TEN))


# ============================================================================
# AppointmentStatus Tests
# ============================================================================


@pytest.mark.unit
class TestAppointmentStatus:
    @pytest.mark.parametrize(
        "current,allowed",
        [
            (AppointmentStatus.SCHEDULED, {AppointmentStatus.CONFIRMED, AppointmentStatus.CANCELLED}),
            (
                AppointmentStatus.CONFIRMED,
                {AppointmentStatus.IN_PROGRESS, AppointmentStatus.CANCELLED, AppointmentStatus.NO_SHOW},
            ),
            (AppointmentStatus.IN_PROGRESS, {AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED}),
            (AppointmentStatus.COMPLETED, set()),
            (AppointmentStatus.CANCELLED, set()),
            (AppointmentStatus.NO_SHOW, set()),
        ],
    )
    def test_transition_table(self, current, allowed):
        for target in AppointmentStatus:
            assert current.can_transition_to(target) is (target in allowed)

    def test_terminal_states(self):
        terminal = {s for s in AppointmentStatus if s.is_terminal()}

        assert terminal == {AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED, AppointmentStatus.NO_SHOW}

    def test_from_string_is_case_insensitive(self):
        assert AppointmentStatus.from_string("IN_PROGRESS") is AppointmentStatus.IN_PROGRESS

    def test_from_string_rejects_unknown(self):
        with pytest.raises(ValueError):
            AppointmentStatus.from_string("postponed")

    def test_values(self):
        assert AppointmentStatus.values() == [
            "scheduled",
            "confirmed",
            "in_progress",
            "completed",
            "cancelled",
            "no_show",
        ]
