from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response

from app.core.errors import MalformedRequestError
from app.core.logger import logger
from app.core.security import require_admin
from app.models.api_models import BookingRequest, envelope
from app.services.booking_service import BookingService
from app.services.list_view import SORT_DESC, build_display_list
from app.services.report_service import XLSX_MEDIA_TYPE

router = APIRouter()
booking_service = BookingService()

@router.post("/bookings", status_code=201)
async def create_booking(req: BookingRequest):
    missing = req.missing_fields()
    if missing:
        logger.info(f"📭 Booking payload missing fields: {missing}")
        raise MalformedRequestError()

    booking = await booking_service.create_booking(req.as_fields())
    return envelope(True, message="Booking created successfully", data=booking.to_api())

@router.get("/bookings", dependencies=[Depends(require_admin)])
async def list_bookings(search: Optional[str] = None, sort_by: Optional[str] = None, order: Optional[str] = None):
    bookings = await booking_service.list_bookings()

    if search or sort_by or order:
        try:
            bookings = build_display_list(bookings, search, sort_by or "createdAt", order or SORT_DESC)
        except ValueError as e:
            return JSONResponse(status_code=400, content=envelope(False, message=str(e)))

    return envelope(True, count=len(bookings), data=[booking.to_api() for booking in bookings])

@router.get("/bookings/export", dependencies=[Depends(require_admin)])
async def export_bookings():
    content, filename = await booking_service.export_bookings()
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={
            "Content-Disposition": f"attachment; filename={filename}",
            "Cache-Control": "no-cache",
        },
    )

@router.get("/bookings/options")
async def booking_options():
    return envelope(True, data=booking_service.get_booking_options())

@router.delete("/bookings/{booking_id}", dependencies=[Depends(require_admin)])
async def delete_booking(booking_id: str):
    await booking_service.delete_booking(booking_id)
    return envelope(True, message="Booking deleted successfully")

@router.delete("/bookings", dependencies=[Depends(require_admin)])
async def delete_all_bookings():
    count = await booking_service.delete_all_bookings()
    return envelope(True, message=f"{count} bookings deleted successfully", count=count)
