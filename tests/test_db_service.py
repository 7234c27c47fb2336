import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from app.core.config import settings
from app.core.errors import StoreUnavailableError
from app.models.db_models import Booking
from app.services.db_service import MemoryBookingStore, SupabaseBookingStore, get_store


def make_booking(name="John Doe"):
    return Booking(
        name=name,
        email="john@example.com",
        phone="9876543210",
        date="February 15, 2026",
        timeSlot="10:00 AM - 11:00 AM",
    )


@pytest.fixture
def supabase_store():
    store = SupabaseBookingStore()
    store._client = MagicMock()
    yield store
    store._client = None


@pytest.mark.asyncio
async def test_memory_store_crud():
    store = MemoryBookingStore()
    booking = await store.insert_booking(make_booking())

    assert await store.get_booking(booking.id) == booking
    assert await store.delete_booking(booking.id) is True
    assert await store.delete_booking(booking.id) is False
    assert await store.get_booking(booking.id) is None


def test_get_store_backend():
    with patch.object(settings, "STORAGE_BACKEND", "memory"):
        assert isinstance(get_store(), MemoryBookingStore)
    with patch.object(settings, "STORAGE_BACKEND", "supabase"):
        assert isinstance(get_store(), SupabaseBookingStore)
    with patch.object(settings, "STORAGE_BACKEND", "mongo"):
        with pytest.raises(ValueError):
            get_store()


def test_supabase_store_is_singleton():
    assert SupabaseBookingStore() is SupabaseBookingStore()


@pytest.mark.asyncio
async def test_supabase_missing_credentials():
    store = SupabaseBookingStore()
    store._client = None

    with patch.object(settings, "SUPABASE_URL", ""):
        with pytest.raises(StoreUnavailableError):
            await store.list_bookings()
        assert await store.ping() is False


@pytest.mark.asyncio
async def test_supabase_insert_maps_row(supabase_store):
    booking = make_booking()
    row = booking.to_row()
    supabase_store._client.table.return_value.insert.return_value.execute = AsyncMock(return_value=MagicMock(data=[row]))

    stored = await supabase_store.insert_booking(booking)

    assert stored == booking
    supabase_store._client.table.assert_called_with(settings.BOOKINGS_TABLE)
    inserted = supabase_store._client.table.return_value.insert.call_args[0][0]
    assert inserted["time_slot"] == "10:00 AM - 11:00 AM"
    assert "timeSlot" not in inserted


@pytest.mark.asyncio
async def test_supabase_list_orders_newest_first(supabase_store):
    query = supabase_store._client.table.return_value.select.return_value.order.return_value
    query.execute = AsyncMock(return_value=MagicMock(data=[make_booking("B").to_row(), make_booking("A").to_row()]))

    bookings = await supabase_store.list_bookings()

    assert [b.name for b in bookings] == ["B", "A"]
    supabase_store._client.table.return_value.select.return_value.order.assert_called_with('created_at', desc=True)


@pytest.mark.asyncio
async def test_supabase_errors_become_store_unavailable(supabase_store):
    query = supabase_store._client.table.return_value.select.return_value.order.return_value
    query.execute = AsyncMock(side_effect=RuntimeError("connection refused"))

    with pytest.raises(StoreUnavailableError) as exc_info:
        await supabase_store.list_bookings()

    assert "connection refused" not in exc_info.value.message


@pytest.mark.asyncio
async def test_supabase_delete_reports_missing_row(supabase_store):
    query = supabase_store._client.table.return_value.delete.return_value.eq.return_value
    query.execute = AsyncMock(return_value=MagicMock(data=[]))

    assert await supabase_store.delete_booking("missing") is False


@pytest.mark.asyncio
async def test_supabase_delete_all_counts_rows(supabase_store):
    query = supabase_store._client.table.return_value.delete.return_value.gte.return_value
    query.execute = AsyncMock(return_value=MagicMock(data=[{"id": "1"}, {"id": "2"}]))

    assert await supabase_store.delete_all_bookings() == 2
