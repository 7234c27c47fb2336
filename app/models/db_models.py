import uuid
from typing import Any, Dict
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

class Booking(BaseModel):
    """
    A stored appointment. API payloads use camelCase (timeSlot, createdAt),
    the bookings table uses snake_case columns (time_slot, created_at).
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    email: str
    phone: str
    date: str
    time_slot: str = Field(alias="timeSlot")
    created_at: datetime = Field(default_factory=utc_now, alias="createdAt")

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Booking":
        return cls.model_validate(row)

    def to_row(self) -> Dict[str, Any]:
        row = self.model_dump(by_alias=False)
        row["created_at"] = self.created_at.isoformat()
        return row

    def to_api(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")
