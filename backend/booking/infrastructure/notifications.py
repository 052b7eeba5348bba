"""Log-only notification senders.

Real SMS and mail transports are wired in by the deployment; these keep the
booking flow observable without one. Contact details are masked in the logs.
"""

from __future__ import annotations

import logging

from ..models import Reservation

logger = logging.getLogger(__name__)


def mask_email(email: str) -> str:
    local, sep, domain = email.partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"


class LoggingSmsSender:
    def send(self, schedule: Reservation) -> None:
        logger.info(
            "sms: booking confirmed at %s (party of %d)",
            schedule.moment.isoformat(),
            schedule.party_size,
        )


class LoggingMailSender:
    def send_mail(self, schedule: Reservation) -> None:
        logger.info(
            "mail to %s: booking confirmed at %s (party of %d)",
            mask_email(schedule.customer.get_email()),
            schedule.moment.isoformat(),
            schedule.party_size,
        )
