from functools import lru_cache
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()


class Settings(BaseModel):
    capacity_per_hour: int = Field(default=3, ge=1)
    timezone: str = Field(default="Asia/Seoul")


@lru_cache
def get_settings() -> Settings:
    return Settings(
        capacity_per_hour=int(os.getenv("CAPACITY_PER_HOUR", Settings.model_fields["capacity_per_hour"].default)),
        timezone=os.getenv("BOOKING_TIMEZONE", Settings.model_fields["timezone"].default),
    )
