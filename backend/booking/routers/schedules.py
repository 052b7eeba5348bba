import logging
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status

from ..deps import get_scheduler
from ..domain.errors import (
    AdmissionError,
    CapacityExceededError,
    ClosedOnSundayError,
    InvalidPartySizeError,
    InvalidTimeGranularityError,
)
from ..models import Reservation
from ..schemas import ScheduleCreate, ScheduleRead
from ..usecases.schedules import BookingScheduler
from ..utils.audit_log import emit_audit_log
from ..utils.time import to_restaurant_naive

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["schedules"])

_STATUS_BY_ERROR: dict[type[AdmissionError], int] = {
    InvalidTimeGranularityError: status.HTTP_400_BAD_REQUEST,
    ClosedOnSundayError: status.HTTP_403_FORBIDDEN,
    InvalidPartySizeError: status.HTTP_400_BAD_REQUEST,
    CapacityExceededError: status.HTTP_409_CONFLICT,
}


def _audit(**kwargs: Any) -> None:
    # Runs after the outcome is decided; failures are logged only.
    try:
        emit_audit_log(**kwargs)
    except RuntimeError:
        logger.exception("audit log failed for %s", kwargs.get("action"))


@router.post("/schedules", response_model=ScheduleRead, status_code=status.HTTP_201_CREATED)
async def create_schedule(
    payload: ScheduleCreate,
    scheduler: BookingScheduler = Depends(get_scheduler),
) -> ScheduleRead:
    customer = payload.customer.to_domain()
    schedule = Reservation(
        moment=to_restaurant_naive(payload.starts_at),
        party_size=payload.party_size,
        customer=customer,
    )
    try:
        scheduler.add_schedule(schedule)
    except AdmissionError as exc:
        _audit(
            action="schedule.rejected",
            starts_at=schedule.moment,
            party_size=schedule.party_size,
            customer_name=customer.name,
            message=str(exc),
        )
        code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_400_BAD_REQUEST)
        raise HTTPException(status_code=code, detail=str(exc)) from exc

    remaining = scheduler.remaining_at(schedule.moment)
    _audit(
        action="schedule.created",
        starts_at=schedule.moment,
        party_size=schedule.party_size,
        customer_name=customer.name,
        remaining=remaining,
    )
    return ScheduleRead.from_domain(schedule=schedule, remaining=remaining)


@router.get("/schedules", response_model=List[ScheduleRead])
async def list_schedules(
    scheduler: BookingScheduler = Depends(get_scheduler),
) -> list[ScheduleRead]:
    return [
        ScheduleRead.from_domain(schedule=schedule, remaining=scheduler.remaining_at(schedule.moment))
        for schedule in scheduler.schedules()
    ]
