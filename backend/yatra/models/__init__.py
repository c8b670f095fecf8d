# SQLAlchemy models
from yatra.models.user import User
from yatra.models.destination import Destination, Airline
from yatra.models.transport import Flight, Train, Bus, SeatClass
from yatra.models.hotel import Hotel
from yatra.models.booking import Booking, TravelType, BookingStatus
from yatra.models.article import TravelGuideArticle
from yatra.models.checkout import CheckoutDraft, CheckoutStep

__all__ = [
    "User",
    # Reference data and inventory
    "Destination",
    "Airline",
    "Flight",
    "Train",
    "Bus",
    "Hotel",
    "TravelGuideArticle",
    # Booking lifecycle
    "Booking",
    "CheckoutDraft",
    # Enums
    "SeatClass",
    "TravelType",
    "BookingStatus",
    "CheckoutStep",
]
