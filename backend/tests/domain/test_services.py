from datetime import datetime

import pytest
from booking.domain.errors import (
    CapacityExceededError,
    ClosedOnSundayError,
    InvalidPartySizeError,
    InvalidTimeGranularityError,
)
from booking.domain.services import SlotSnapshot, is_closed_day, is_on_the_hour, validate_schedule

FRIDAY_NOW = datetime(2021, 3, 26, 8, 30)
SUNDAY_NOW = datetime(2021, 3, 28, 17, 0)
ON_THE_HOUR = datetime(2021, 3, 26, 9, 0)


def test_is_on_the_hour() -> None:
    assert is_on_the_hour(ON_THE_HOUR)
    assert not is_on_the_hour(datetime(2021, 3, 26, 9, 5))
    assert not is_on_the_hour(datetime(2021, 3, 26, 9, 0, 30))


def test_is_closed_day_only_on_sunday() -> None:
    assert is_closed_day(SUNDAY_NOW)
    assert not is_closed_day(FRIDAY_NOW)
    assert not is_closed_day(datetime(2021, 3, 27, 12, 0))


def test_rejects_when_not_on_the_hour() -> None:
    snap = SlotSnapshot(capacity=3, reserved=0)
    with pytest.raises(InvalidTimeGranularityError):
        validate_schedule(snap, moment=datetime(2021, 3, 26, 9, 5), now=FRIDAY_NOW, party_size=1)


def test_granularity_is_checked_before_closed_day() -> None:
    snap = SlotSnapshot(capacity=3, reserved=3)
    with pytest.raises(InvalidTimeGranularityError):
        validate_schedule(snap, moment=datetime(2021, 3, 28, 9, 5), now=SUNDAY_NOW, party_size=10)


def test_rejects_on_sunday_even_with_room() -> None:
    snap = SlotSnapshot(capacity=3, reserved=0)
    with pytest.raises(ClosedOnSundayError) as excinfo:
        validate_schedule(snap, moment=ON_THE_HOUR, now=SUNDAY_NOW, party_size=1)
    assert str(excinfo.value) == "Booking system is not available on sunday"


def test_rejects_non_positive_party_size() -> None:
    snap = SlotSnapshot(capacity=3, reserved=0)
    with pytest.raises(InvalidPartySizeError):
        validate_schedule(snap, moment=ON_THE_HOUR, now=FRIDAY_NOW, party_size=0)


def test_rejects_when_party_exceeds_remaining() -> None:
    snap = SlotSnapshot(capacity=3, reserved=2)
    with pytest.raises(CapacityExceededError) as excinfo:
        validate_schedule(snap, moment=ON_THE_HOUR, now=FRIDAY_NOW, party_size=2)
    assert str(excinfo.value) == "Number of people is over restaurant capacity per hour"


def test_accepts_when_filling_slot_exactly() -> None:
    snap = SlotSnapshot(capacity=3, reserved=1)
    remaining_after = validate_schedule(snap, moment=ON_THE_HOUR, now=FRIDAY_NOW, party_size=2)
    assert remaining_after == 0
