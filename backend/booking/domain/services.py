import calendar
from dataclasses import dataclass
from datetime import datetime

from .errors import (
    CapacityExceededError,
    ClosedOnSundayError,
    InvalidPartySizeError,
    InvalidTimeGranularityError,
)


@dataclass(frozen=True)
class SlotSnapshot:
    capacity: int
    reserved: int


def is_on_the_hour(moment: datetime) -> bool:
    return moment.minute == 0 and moment.second == 0 and moment.microsecond == 0


def is_closed_day(now: datetime) -> bool:
    return now.weekday() == calendar.SUNDAY


def validate_schedule(snapshot: SlotSnapshot, *, moment: datetime, now: datetime, party_size: int) -> int:
    """
    Pure validation: ensures the booking is on the hour, the system is open today,
    and the hour slot still has room for the party.
    Returns remaining capacity after booking if OK. Raises domain errors otherwise.
    """
    if not is_on_the_hour(moment):
        raise InvalidTimeGranularityError()
    # Checked against the current day, not the day being booked.
    if is_closed_day(now):
        raise ClosedOnSundayError()
    if party_size <= 0:
        raise InvalidPartySizeError()

    remaining = snapshot.capacity - snapshot.reserved
    if party_size > remaining:
        raise CapacityExceededError()
    return remaining - party_size
