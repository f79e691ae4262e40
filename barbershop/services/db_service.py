from supabase import create_async_client, AsyncClient
from barbershop.core.config import settings
from barbershop.core.exceptions import NotFound, PersistenceError
from barbershop.models.booking import Booking, BookingStatus
import logging
import uuid
from datetime import datetime, timezone
from typing import List

logger = logging.getLogger("barbershop")

class DBService:
    _instance = None
    _client: AsyncClient = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(DBService, cls).__new__(cls)
            # Async client is created lazily on first use
        return cls._instance

    @property
    def table_name(self) -> str:
        return settings.SUPABASE_BOOKINGS_TABLE

    async def get_client(self) -> AsyncClient:
        if not self._client:
            if not (settings.SUPABASE_URL and settings.SUPABASE_KEY):
                logger.error("❌ Supabase credentials missing")
                raise PersistenceError()
            try:
                self._client = await create_async_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
                logger.info("✅ Supabase Async client initialized")
            except Exception as e:
                logger.error(f"❌ Failed to initialize Supabase Async: {e}")
                raise PersistenceError() from e
        return self._client

    async def create_booking(self, data: dict) -> str:
        """
        Inserts a new booking and returns the id assigned by the store.
        Status is always Confirmed and created_at is stamped here, never by the caller.
        """
        client = await self.get_client()

        row = {
            'service_name': data['service_name'],
            'barber_name': data['barber_name'],
            'date': data['date'],
            'time': data['time'],
            'client_name': data['client_name'],
            'client_phone': data['client_phone'],
            'status': BookingStatus.CONFIRMED.value,
            'created_at': datetime.now(timezone.utc).isoformat(),
        }

        try:
            response = await client.table(self.table_name).insert(row).execute()
        except Exception as e:
            logger.error(f"❌ DB Error (create_booking): {e}")
            raise PersistenceError() from e

        if not response.data:
            logger.error("❌ DB Error (create_booking): insert returned no row")
            raise PersistenceError()

        booking_id = str(response.data[0]['id'])
        logger.info(f"🆕 Booking {booking_id} created for {row['client_name']} ({row['date']} {row['time']})")
        return booking_id

    async def list_bookings(self) -> List[Booking]:
        """Returns every booking, newest first."""
        client = await self.get_client()

        try:
            response = await client.table(self.table_name)\
                .select("*")\
                .order('created_at', desc=True)\
                .execute()
        except Exception as e:
            logger.error(f"❌ DB Error (list_bookings): {e}")
            raise PersistenceError() from e

        return [Booking.from_row(row) for row in response.data or []]

    async def update_status(self, booking_id: str, status: BookingStatus) -> None:
        """
        Overwrites the status of one booking. Other columns are left untouched.
        """
        # ids are uuids, anything else cannot match a row
        try:
            uuid.UUID(str(booking_id))
        except ValueError:
            logger.warning(f"⚠️ Booking {booking_id} not found for status update (not a uuid)")
            raise NotFound()

        client = await self.get_client()

        try:
            response = await client.table(self.table_name)\
                .update({'status': status.value})\
                .eq('id', booking_id)\
                .execute()
        except Exception as e:
            logger.error(f"❌ DB Error (update_status): {e}")
            raise PersistenceError() from e

        if not response.data:
            logger.warning(f"⚠️ Booking {booking_id} not found for status update")
            raise NotFound()

        logger.info(f"✏️ Booking {booking_id} status -> {status.value}")

db_service = DBService()
