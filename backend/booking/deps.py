from functools import lru_cache

from .config import get_settings
from .infrastructure.clock import SystemClock
from .infrastructure.notifications import LoggingMailSender, LoggingSmsSender
from .usecases.schedules import BookingScheduler
from .utils.time import restaurant_tz


@lru_cache
def get_scheduler() -> BookingScheduler:
    settings = get_settings()
    return BookingScheduler(
        settings.capacity_per_hour,
        clock=SystemClock(restaurant_tz()),
        sms_sender=LoggingSmsSender(),
        mail_sender=LoggingMailSender(),
    )
