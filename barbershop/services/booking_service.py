from typing import Optional, List, Tuple

from barbershop.models.booking import Booking, BookingStatus
from barbershop.services.db_service import db_service
from barbershop.services.link_service import build_owner_notification
from barbershop.core.exceptions import ValidationError
from barbershop.core.logger import logger

REQUIRED_FIELDS = (
    "service_name",
    "barber_name",
    "date",
    "time",
    "client_name",
    "client_phone",
)


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class BookingService:

    async def create_booking(self, data: dict) -> Tuple[str, str]:
        """
        Persists a booking and builds the owner notification link.
        The link is only returned, opening it is up to the client.
        Returns: (booking id, wa.me link)
        """
        missing = [field for field in REQUIRED_FIELDS if _is_blank(data.get(field))]
        if missing:
            logger.info(f"📥 Booking rejected, missing: {', '.join(missing)}")
            raise ValidationError("Dados incompletos")

        logger.info(f"📥 Booking Request - {data['client_name']}: {data['service_name']} with {data['barber_name']} on {data['date']} {data['time']}")

        booking_id = await db_service.create_booking(data)

        booking = Booking(id=booking_id, **{f: data[f] for f in REQUIRED_FIELDS})
        wa_link = build_owner_notification(booking)
        logger.info(f"🔗 Notify link (wa.me): {wa_link}")

        return booking_id, wa_link

    async def list_bookings(self) -> List[Booking]:
        return await db_service.list_bookings()

    async def update_status(self, booking_id: str, status: Optional[str]) -> None:
        if _is_blank(status):
            raise ValidationError("Status obrigatório")

        try:
            new_status = BookingStatus(status)
        except ValueError:
            logger.info(f"⚠️ Unknown status '{status}' for booking {booking_id}")
            raise ValidationError("Status inválido")

        # Any status may follow any other
        await db_service.update_status(booking_id, new_status)


booking_service = BookingService()
