from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..deps import get_scheduler
from ..domain.services import is_on_the_hour
from ..schemas import SlotAvailability
from ..usecases.schedules import BookingScheduler
from ..utils.time import to_restaurant_naive

router = APIRouter(prefix="/slots", tags=["slots"])


@router.get("/availability", response_model=SlotAvailability)
async def get_availability(
    starts_at: datetime = Query(..., description="Hour slot start (ISO 8601)"),
    scheduler: BookingScheduler = Depends(get_scheduler),
) -> SlotAvailability:
    moment = to_restaurant_naive(starts_at)
    if not is_on_the_hour(moment):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="starts_at must be on the hour")
    reserved = scheduler.reserved_at(moment)
    return SlotAvailability(
        starts_at=moment,
        capacity=scheduler.capacity_per_hour,
        reserved=reserved,
        remaining=scheduler.remaining_at(moment),
    )
