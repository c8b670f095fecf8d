from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from yatra import __version__
from yatra.api import (
    auth, bookings, buses, checkout, destinations, flights, health,
    hotels, public_objects, trains, travel_guide,
)
from yatra.api.errors import validation_error_response
from yatra.config import get_settings
from yatra.database import create_tables

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting Yatra API {__version__} ({settings.env})")

    if settings.database_url.startswith("sqlite"):
        logger.info("SQLite detected - creating tables if needed")
        create_tables()

    yield

    logger.info("Shutting down Yatra API")


app = FastAPI(
    title="Yatra",
    description="Flight, hotel, train and bus search and booking API",
    version=__version__,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected {request.method} {request.url.path}: {len(exc.errors())} field error(s)")
    return validation_error_response(request.url.path, exc.errors())


app.include_router(health.router, tags=["health"])
app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(destinations.router, prefix="/api/destinations", tags=["destinations"])
app.include_router(flights.router, prefix="/api/flights", tags=["flights"])
app.include_router(hotels.router, prefix="/api/hotels", tags=["hotels"])
app.include_router(trains.router, prefix="/api/trains", tags=["trains"])
app.include_router(buses.router, prefix="/api/buses", tags=["buses"])
app.include_router(bookings.router, prefix="/api/bookings", tags=["bookings"])
app.include_router(checkout.router, prefix="/api/checkout", tags=["checkout"])
app.include_router(travel_guide.router, prefix="/api/travel-guide", tags=["travel-guide"])
app.include_router(public_objects.router, tags=["assets"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
