from fastapi import APIRouter
from typing import Optional, List, Dict, Any
from pydantic import ConfigDict

from barbershop.models.booking import CamelModel
from barbershop.services.booking_service import booking_service

router = APIRouter()

class CreateBookingRequest(CamelModel):
    # All optional: presence is checked by BookingService so a missing field is a 400, not a 422.
    # Numbers (e.g. a phone sent as 5592...) are kept as their string form.
    model_config = ConfigDict(coerce_numbers_to_str=True)

    service_name: Optional[str] = None
    barber_name: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    client_name: Optional[str] = None
    client_phone: Optional[str] = None

class StatusUpdateRequest(CamelModel):
    status: Optional[str] = None

@router.post("/bookings", status_code=201)
async def create_booking(req: CreateBookingRequest):
    booking_id, wa_link = await booking_service.create_booking(req.model_dump())
    return {"id": booking_id, "waLink": wa_link}

@router.get("/bookings")
async def list_bookings() -> List[Dict[str, Any]]:
    bookings = await booking_service.list_bookings()
    return [b.model_dump(mode="json", by_alias=True) for b in bookings]

@router.patch("/bookings/{booking_id}")
async def update_booking_status(booking_id: str, req: StatusUpdateRequest):
    await booking_service.update_status(booking_id, req.status)
    return {"success": True}
