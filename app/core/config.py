from pathlib import Path

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    PROJECT_NAME: str = "Appointment Booking"
    API_V1_STR: str = "/api"

    # Server
    PORT: int = 8000
    ENVIRONMENT: str = "development"

    # Storage ("supabase" or "memory")
    STORAGE_BACKEND: str = "supabase"

    # Supabase
    SUPABASE_URL: str = ""
    SUPABASE_KEY: str = ""
    BOOKINGS_TABLE: str = "bookings"

    # Admin
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin123"
    ADMIN_SESSION_TTL_SECONDS: int = 8 * 60 * 60

    # Report
    REPORT_TIMEZONE: str = "Asia/Kolkata"
    REPORT_DATETIME_FORMAT: str = "%d %b %Y, %I:%M %p"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    BOOKING_CONFIG_PATH: str = str(BASE_DIR / "data" / "booking_config.json")

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
