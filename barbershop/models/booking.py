from enum import Enum
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BookingStatus(str, Enum):
    CONFIRMED = "Confirmed"
    ATTENDED = "Attended"
    CANCELLED = "Cancelled"


class CamelModel(BaseModel):
    # Wire format is camelCase, attributes and store columns are snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Booking(CamelModel):
    id: str
    service_name: str
    barber_name: str
    date: str
    time: str
    client_name: str
    client_phone: str
    status: BookingStatus = BookingStatus.CONFIRMED
    created_at: Optional[datetime] = Field(default=None)

    @classmethod
    def from_row(cls, row: dict) -> "Booking":
        """Build a Booking from a store row (snake_case columns)."""
        return cls.model_validate({**row, "id": str(row["id"])})
