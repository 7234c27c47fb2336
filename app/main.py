from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.config import settings
from app.core.errors import BookingError, BookingValidationError, MalformedRequestError
from app.api import bookings, admin
from app.core.logger import setup_logging, logger
from app.models.api_models import envelope
from contextlib import asynccontextmanager
from datetime import datetime

setup_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"🚀 Starting {settings.PROJECT_NAME} backend ({settings.STORAGE_BACKEND} store)")
    yield
    # Shutdown
    logger.info("🛑 Shutting down backend")

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan
)

@app.exception_handler(BookingError)
async def booking_error_handler(request: Request, exc: BookingError):
    errors = exc.errors if isinstance(exc, BookingValidationError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=envelope(False, message=exc.message, errors=errors)
    )

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info(f"📭 Malformed request on {request.url.path}")
    return JSONResponse(
        status_code=400,
        content=envelope(False, message=MalformedRequestError.message)
    )

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = "Route not found" if exc.status_code == 404 else str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content=envelope(False, message=message))

# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"🔥 UNHANDLED ERROR: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=envelope(False, message="Internal server error")
    )

# Include routers
app.include_router(bookings.router, prefix=settings.API_V1_STR, tags=["Bookings"])
app.include_router(admin.router, prefix=settings.API_V1_STR, tags=["Admin"])

@app.get("/")
async def root():
    return {'status': 'active', 'time': datetime.now().isoformat()}

@app.get("/api/health")
async def health_check():
    connected = await bookings.booking_service.check_health()
    return {
        "status": "OK",
        "message": "Server is running",
        "environment": settings.ENVIRONMENT,
        "database": "Connected" if connected else "Disconnected",
        "timestamp": datetime.now().isoformat(),
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT, reload=True)
