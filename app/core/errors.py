from typing import Dict


class BookingError(Exception):
    """Base class for every failure the API turns into a response envelope."""

    status_code = 500
    message = "Server error. Please try again later."

    def __init__(self, message: str = None):
        if message:
            self.message = message
        super().__init__(self.message)


class MalformedRequestError(BookingError):
    status_code = 400
    message = "All fields are required"


class BookingValidationError(BookingError):
    """One or more fields failed validation. `errors` maps field name to message."""

    status_code = 400

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__(", ".join(self.errors.values()))


class BookingNotFoundError(BookingError):
    status_code = 404
    message = "Booking not found"

    def __init__(self, booking_id: str):
        self.booking_id = booking_id
        super().__init__()


class StoreUnavailableError(BookingError):
    """Persistence failed. Callers only ever see the generic message."""

    status_code = 500


class AuthenticationError(BookingError):
    status_code = 401
    message = "Unauthorized"
