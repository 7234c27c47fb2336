from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, Any

# --- Incoming Request Models ---

class BookingRequest(BaseModel):
    # Absent fields arrive as None; the route answers them with "All fields are required"
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    date: Optional[str] = None
    time_slot: Optional[str] = Field(default=None, alias="timeSlot")

    def missing_fields(self) -> list:
        return [field for field, value in self.as_fields().items() if value is None]

    def as_fields(self) -> Dict[str, Optional[str]]:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "date": self.date,
            "timeSlot": self.time_slot,
        }

class AdminLoginRequest(BaseModel):
    username: str = ""
    password: str = ""


# --- Outgoing Response Envelope ---

def envelope(
    success: bool,
    message: Optional[str] = None,
    data: Any = None,
    count: Optional[int] = None,
    errors: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """
    Every JSON response carries `success`; the rest is only present when set.
    Clients branch on `success`, status codes are kept consistent with it.
    """
    body: Dict[str, Any] = {"success": success}
    if message is not None:
        body["message"] = message
    if count is not None:
        body["count"] = count
    if data is not None:
        body["data"] = data
    if errors:
        body["errors"] = errors
    return body
