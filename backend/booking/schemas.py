from datetime import datetime

from pydantic import BaseModel, Field

from .models import Customer, Reservation


class CustomerCreate(BaseModel):
    name: str = Field(min_length=1)
    phone_number: str = Field(min_length=1)
    email: str = ""

    def to_domain(self) -> Customer:
        return Customer(name=self.name, phone_number=self.phone_number, email=self.email)


class ScheduleCreate(BaseModel):
    starts_at: datetime
    party_size: int = Field(ge=1)
    customer: CustomerCreate


class ScheduleRead(BaseModel):
    starts_at: datetime
    party_size: int
    customer_name: str
    has_email: bool
    remaining: int

    @classmethod
    def from_domain(cls, *, schedule: Reservation, remaining: int) -> "ScheduleRead":
        customer = schedule.customer
        return cls(
            starts_at=schedule.moment,
            party_size=schedule.party_size,
            customer_name=customer.name if isinstance(customer, Customer) else "",
            has_email=bool(customer.get_email()),
            remaining=remaining,
        )


class SlotAvailability(BaseModel):
    starts_at: datetime
    capacity: int
    reserved: int
    remaining: int
