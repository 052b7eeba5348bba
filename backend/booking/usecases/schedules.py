from __future__ import annotations

import logging
from datetime import datetime

from ..domain.ports import Clock, MailSender, SmsSender
from ..domain.repositories import ScheduleRepository
from ..domain.services import SlotSnapshot, validate_schedule
from ..infrastructure.clock import SystemClock
from ..infrastructure.repositories import InMemoryScheduleRepository
from ..models import Reservation

logger = logging.getLogger(__name__)


class BookingScheduler:
    """Admits reservations into hour slots of a fixed per-hour capacity.

    A schedule is stored only after every rule passes; notifications are sent
    afterwards and their failures never undo the admission.
    Not safe to share between threads without an external lock around
    ``add_schedule``.
    """

    def __init__(
        self,
        capacity_per_hour: int,
        *,
        repository: ScheduleRepository | None = None,
        clock: Clock | None = None,
        sms_sender: SmsSender | None = None,
        mail_sender: MailSender | None = None,
    ) -> None:
        if capacity_per_hour < 1:
            raise ValueError("capacity_per_hour must be >= 1")
        self._capacity_per_hour = capacity_per_hour
        self._repository: ScheduleRepository = repository if repository is not None else InMemoryScheduleRepository()
        self._clock: Clock = clock if clock is not None else SystemClock()
        self._sms_sender = sms_sender
        self._mail_sender = mail_sender

    @property
    def capacity_per_hour(self) -> int:
        return self._capacity_per_hour

    def set_clock(self, clock: Clock) -> None:
        self._clock = clock

    def set_sms_sender(self, sms_sender: SmsSender) -> None:
        self._sms_sender = sms_sender

    def set_mail_sender(self, mail_sender: MailSender) -> None:
        self._mail_sender = mail_sender

    def add_schedule(self, schedule: Reservation) -> None:
        snapshot = SlotSnapshot(
            capacity=self._capacity_per_hour,
            reserved=self._repository.sum_reserved(schedule.moment),
        )
        remaining = validate_schedule(
            snapshot,
            moment=schedule.moment,
            now=self._clock.now(),
            party_size=schedule.party_size,
        )

        self._repository.add(schedule)
        logger.debug("admitted schedule at %s, %d seats left", schedule.moment.isoformat(), remaining)

        self._notify(schedule)

    def has_schedule(self, schedule: Reservation) -> bool:
        return self._repository.contains(schedule)

    def reserved_at(self, moment: datetime) -> int:
        return self._repository.sum_reserved(moment)

    def remaining_at(self, moment: datetime) -> int:
        return max(self._capacity_per_hour - self.reserved_at(moment), 0)

    def schedules(self) -> list[Reservation]:
        return self._repository.list_all()

    def _notify(self, schedule: Reservation) -> None:
        if self._sms_sender is None:
            logger.warning("no sms sender configured; skipping sms for %s", schedule.moment.isoformat())
        else:
            try:
                self._sms_sender.send(schedule)
            except Exception:
                logger.exception("sms notification failed for %s", schedule.moment.isoformat())

        if not schedule.customer.get_email():
            return
        if self._mail_sender is None:
            logger.warning("no mail sender configured; skipping mail for %s", schedule.moment.isoformat())
            return
        try:
            self._mail_sender.send_mail(schedule)
        except Exception:
            logger.exception("mail notification failed for %s", schedule.moment.isoformat())
