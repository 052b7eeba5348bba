from datetime import datetime
from typing import AsyncIterator

import pytest
import pytest_asyncio
from booking.deps import get_scheduler
from booking.main import app
from booking.models import Customer, Reservation
from booking.usecases.schedules import BookingScheduler
from httpx import ASGITransport, AsyncClient

NINE = datetime(2021, 3, 26, 9, 0)


class FixedClock:
    def now(self) -> datetime:
        return datetime(2021, 3, 26, 8, 0)


@pytest.fixture
def scheduler() -> BookingScheduler:
    return BookingScheduler(4, clock=FixedClock())


@pytest_asyncio.fixture
async def client(scheduler: BookingScheduler) -> AsyncIterator[AsyncClient]:
    app.dependency_overrides[get_scheduler] = lambda: scheduler
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_availability_reports_reserved_and_remaining(
    client: AsyncClient, scheduler: BookingScheduler
) -> None:
    scheduler.add_schedule(Reservation(NINE, 3, Customer("Fake name", "010-1234-5678")))

    resp = await client.get("/slots/availability", params={"starts_at": "2021-03-26T09:00:00"})

    assert resp.status_code == 200
    assert resp.json() == {
        "starts_at": "2021-03-26T09:00:00",
        "capacity": 4,
        "reserved": 3,
        "remaining": 1,
    }


@pytest.mark.asyncio
async def test_availability_of_empty_slot(client: AsyncClient) -> None:
    resp = await client.get("/slots/availability", params={"starts_at": "2021-03-26T10:00:00"})

    assert resp.status_code == 200
    assert resp.json()["remaining"] == 4


@pytest.mark.asyncio
async def test_availability_requires_hour_boundary(client: AsyncClient) -> None:
    resp = await client.get("/slots/availability", params={"starts_at": "2021-03-26T10:30:00"})
    assert resp.status_code == 400
