from supabase import create_async_client, AsyncClient
from app.core.config import settings
from app.core.errors import StoreUnavailableError
from app.models.db_models import Booking
import asyncio
import logging
from typing import Dict, List, Optional

logger = logging.getLogger("app")

class BookingStore:
    """
    Persistence contract for booking records: insert, scan-all (newest first),
    lookup by id, delete one, delete all. Every backend failure surfaces as
    StoreUnavailableError.
    """

    async def insert_booking(self, booking: Booking) -> Booking:
        raise NotImplementedError

    async def list_bookings(self) -> List[Booking]:
        raise NotImplementedError

    async def get_booking(self, booking_id: str) -> Optional[Booking]:
        raise NotImplementedError

    async def delete_booking(self, booking_id: str) -> bool:
        raise NotImplementedError

    async def delete_all_bookings(self) -> int:
        raise NotImplementedError

    async def ping(self) -> bool:
        raise NotImplementedError


class SupabaseBookingStore(BookingStore):
    _instance = None
    _client: AsyncClient = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(SupabaseBookingStore, cls).__new__(cls)
            # Async client init is tricky in __new__ (sync), will init on first usage
        return cls._instance

    @property
    def table_name(self) -> str:
        return settings.BOOKINGS_TABLE

    async def get_client(self) -> AsyncClient:
        if not self._client:
            if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
                logger.error("❌ Supabase credentials missing (SUPABASE_URL / SUPABASE_KEY)")
                raise StoreUnavailableError()
            try:
                self._client = await create_async_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
                logger.info("✅ Supabase Async client initialized")
            except Exception as e:
                logger.error(f"❌ Failed to initialize Supabase Async: {e}")
                raise StoreUnavailableError() from e
        return self._client

    async def insert_booking(self, booking: Booking) -> Booking:
        client = await self.get_client()
        try:
            response = await client.table(self.table_name).insert(booking.to_row()).execute()
        except Exception as e:
            logger.exception(f"❌ DB Error (insert_booking): {e}")
            raise StoreUnavailableError() from e

        if response.data:
            return Booking.from_row(response.data[0])
        return booking

    async def list_bookings(self) -> List[Booking]:
        client = await self.get_client()
        try:
            response = await client.table(self.table_name)\
                .select("*")\
                .order('created_at', desc=True)\
                .execute()
        except Exception as e:
            logger.exception(f"❌ DB Error (list_bookings): {e}")
            raise StoreUnavailableError() from e

        return [Booking.from_row(row) for row in response.data or []]

    async def get_booking(self, booking_id: str) -> Optional[Booking]:
        client = await self.get_client()
        try:
            response = await client.table(self.table_name).select("*").eq('id', booking_id).limit(1).execute()
        except Exception as e:
            logger.exception(f"❌ DB Error (get_booking): {e}")
            raise StoreUnavailableError() from e

        if response.data:
            return Booking.from_row(response.data[0])
        return None

    async def delete_booking(self, booking_id: str) -> bool:
        client = await self.get_client()
        try:
            response = await client.table(self.table_name).delete().eq('id', booking_id).execute()
        except Exception as e:
            logger.exception(f"❌ DB Error (delete_booking): {e}")
            raise StoreUnavailableError() from e

        # Deleted rows are echoed back; nothing echoed means nothing matched
        return bool(response.data)

    async def delete_all_bookings(self) -> int:
        client = await self.get_client()
        try:
            # PostgREST refuses an unfiltered DELETE
            response = await client.table(self.table_name)\
                .delete()\
                .gte('created_at', '1970-01-01T00:00:00+00:00')\
                .execute()
        except Exception as e:
            logger.exception(f"❌ DB Error (delete_all_bookings): {e}")
            raise StoreUnavailableError() from e

        return len(response.data or [])

    async def ping(self) -> bool:
        try:
            client = await self.get_client()
            await client.table(self.table_name).select("id").limit(1).execute()
            return True
        except Exception as e:
            logger.warning(f"⚠️ Supabase ping failed: {e}")
            return False


class MemoryBookingStore(BookingStore):
    """Process-local store for development and tests. Data is lost on restart."""

    def __init__(self):
        self._bookings: Dict[str, Booking] = {}
        self._lock = asyncio.Lock()

    async def insert_booking(self, booking: Booking) -> Booking:
        async with self._lock:
            self._bookings[booking.id] = booking
        return booking

    async def list_bookings(self) -> List[Booking]:
        # Insertion order breaks createdAt ties so newest-first stays stable
        bookings = list(self._bookings.values())
        bookings.reverse()
        return sorted(bookings, key=lambda b: b.created_at, reverse=True)

    async def get_booking(self, booking_id: str) -> Optional[Booking]:
        return self._bookings.get(booking_id)

    async def delete_booking(self, booking_id: str) -> bool:
        async with self._lock:
            return self._bookings.pop(booking_id, None) is not None

    async def delete_all_bookings(self) -> int:
        async with self._lock:
            count = len(self._bookings)
            self._bookings.clear()
        return count

    async def ping(self) -> bool:
        return True


def get_store() -> BookingStore:
    backend = settings.STORAGE_BACKEND.lower()
    if backend == "memory":
        logger.warning("⚠️ Using in-memory booking store, data will not survive a restart")
        return MemoryBookingStore()
    if backend != "supabase":
        raise ValueError(f"Unknown STORAGE_BACKEND: {settings.STORAGE_BACKEND}")
    return SupabaseBookingStore()
