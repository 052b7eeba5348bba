from __future__ import annotations

from datetime import datetime
from typing import Protocol

from ..models import Reservation


class ScheduleRepository(Protocol):
    def add(self, schedule: Reservation) -> None: ...

    def contains(self, schedule: Reservation) -> bool: ...

    def sum_reserved(self, moment: datetime) -> int: ...

    def list_all(self) -> list[Reservation]: ...
