"""
Search and sort over an already fetched booking list, as shown on the admin
dashboard. Both steps return new lists and leave the input untouched.
"""

from typing import Callable, Dict, List, Optional, Sequence

from app.models.db_models import Booking

SORT_ASC = "asc"
SORT_DESC = "desc"

SORT_OPTIONS = [
    ("createdAt", SORT_DESC, "Newest First"),
    ("createdAt", SORT_ASC, "Oldest First"),
    ("name", SORT_ASC, "Name (A-Z)"),
    ("name", SORT_DESC, "Name (Z-A)"),
    ("date", SORT_ASC, "Date (Earliest)"),
    ("date", SORT_DESC, "Date (Latest)"),
]

SORT_KEYS: Dict[str, Callable[[Booking], object]] = {
    "createdAt": lambda booking: booking.created_at,
    "name": lambda booking: (booking.name or "").lower(),
    "date": lambda booking: (booking.date or "").lower(),
}


def matches_search(booking: Booking, term: str) -> bool:
    lower_term = term.lower()
    return (
        lower_term in booking.name.lower()
        or lower_term in booking.email.lower()
        or term in booking.phone
        or lower_term in booking.date.lower()
        or lower_term in booking.time_slot.lower()
    )


def filter_bookings(bookings: Sequence[Booking], term: Optional[str]) -> List[Booking]:
    if not term:
        return list(bookings)
    return [booking for booking in bookings if matches_search(booking, term)]


def sort_bookings(
    bookings: Sequence[Booking],
    field: str = "createdAt",
    direction: str = SORT_DESC,
) -> List[Booking]:
    """
    Stable sort on createdAt, name or date. Equal keys keep their input order
    in both directions.
    """
    if field not in SORT_KEYS:
        raise ValueError(f"Unsupported sort field: {field}")
    if direction not in (SORT_ASC, SORT_DESC):
        raise ValueError(f"Unsupported sort direction: {direction}")

    return sorted(bookings, key=SORT_KEYS[field], reverse=direction == SORT_DESC)


def build_display_list(
    bookings: Sequence[Booking],
    term: Optional[str] = None,
    field: str = "createdAt",
    direction: str = SORT_DESC,
) -> List[Booking]:
    return sort_bookings(filter_bookings(bookings, term), field, direction)
