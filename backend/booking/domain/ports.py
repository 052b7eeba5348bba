from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..models import Reservation


class CustomerProfile(Protocol):
    def get_email(self) -> str: ...


class Clock(Protocol):
    def now(self) -> datetime: ...


class SmsSender(Protocol):
    def send(self, schedule: Reservation) -> None: ...


class MailSender(Protocol):
    def send_mail(self, schedule: Reservation) -> None: ...
