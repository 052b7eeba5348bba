from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .domain.ports import CustomerProfile


@dataclass(frozen=True)
class Customer:
    name: str
    phone_number: str
    email: str = ""

    def get_email(self) -> str:
        return self.email


@dataclass(frozen=True, eq=False)
class Reservation:
    """A requested table booking for one hour slot.

    Equality and hashing are by identity: two reservations with the same
    moment, party size and customer are still different bookings.
    """

    moment: datetime
    party_size: int
    customer: CustomerProfile
