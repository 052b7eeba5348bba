from __future__ import annotations

from datetime import datetime
from typing import List

from ..domain.repositories import ScheduleRepository
from ..models import Reservation


class InMemoryScheduleRepository(ScheduleRepository):
    def __init__(self) -> None:
        self._schedules: List[Reservation] = []

    def add(self, schedule: Reservation) -> None:
        self._schedules.append(schedule)

    def contains(self, schedule: Reservation) -> bool:
        return any(existing is schedule for existing in self._schedules)

    def sum_reserved(self, moment: datetime) -> int:
        return sum(existing.party_size for existing in self._schedules if existing.moment == moment)

    def list_all(self) -> List[Reservation]:
        return list(self._schedules)
