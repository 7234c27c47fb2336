import time
from typing import Any, Dict, List, Mapping, Optional, Tuple

from app.models.db_models import Booking
from app.services.db_service import BookingStore, get_store
from app.services.report_service import generate_bookings_report

from app.core.logger import logger
from app.core.config_loader import load_booking_config, get_time_slots, get_available_dates
from app.core.errors import BookingNotFoundError, BookingValidationError
from app.core.validators import normalize_booking_fields, validate_booking_form


class BookingService:
    def __init__(self, store: Optional[BookingStore] = None):
        self.store = store or get_store()
        self.config = load_booking_config()

    async def create_booking(self, fields: Mapping[str, Any]) -> Booking:
        """
        Validates and stores a new booking.
        Client-side checks are never trusted: the full form is validated again here
        and nothing is written unless every field passes.
        """
        normalized = normalize_booking_fields(fields)
        errors = validate_booking_form(normalized)
        if errors:
            logger.info(f"📝 Booking rejected, invalid fields: {sorted(errors)}")
            raise BookingValidationError(errors)

        booking = Booking(
            name=normalized["name"],
            email=normalized["email"],
            phone=normalized["phone"],
            date=normalized["date"],
            time_slot=normalized["timeSlot"],
        )

        logger.info(f"📥 Booking Request - Date: {booking.date}, Slot: {booking.time_slot}")
        stored = await self.store.insert_booking(booking)
        logger.info(f"✅ Booking {stored.id} saved for {stored.name}")
        return stored

    async def list_bookings(self) -> List[Booking]:
        """All bookings, newest first."""
        return await self.store.list_bookings()

    async def delete_booking(self, booking_id: str) -> None:
        deleted = await self.store.delete_booking(booking_id)
        if not deleted:
            logger.warning(f"⚠️ Delete requested for unknown booking {booking_id}")
            raise BookingNotFoundError(booking_id)
        logger.info(f"🗑️ Booking {booking_id} deleted.")

    async def delete_all_bookings(self) -> int:
        count = await self.store.delete_all_bookings()
        logger.info(f"🗑️ Cleared all bookings ({count} removed).")
        return count

    async def export_bookings(self) -> Tuple[bytes, str]:
        """
        Returns (xlsx bytes, suggested filename) for the current booking list.
        """
        started = time.time()
        bookings = await self.store.list_bookings()
        content = generate_bookings_report(bookings)
        filename = f"bookings_{int(time.time() * 1000)}.xlsx"
        logger.info(f"📊 Export built: {filename} ({len(bookings)} bookings, {time.time() - started:.2f}s)")
        return content, filename

    def get_booking_options(self) -> Dict[str, List[str]]:
        return {
            "timeSlots": get_time_slots(self.config),
            "dates": get_available_dates(self.config),
        }

    async def check_health(self) -> bool:
        return await self.store.ping()
