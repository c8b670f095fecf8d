from yatra.schemas.catalog import (
    UserResponse, DestinationResponse, FlightResponse, HotelResponse,
    TrainResponse, BusResponse, ArticleResponse,
)
from yatra.schemas.search import (
    FlightSearch, HotelSearch, TrainSearch, BusSearch,
    FlightSearchResult, HotelSearchResult, TrainSearchResult, BusSearchResult,
)
from yatra.schemas.booking import (
    BookingCreate, BookingResponse, BookingConfirmation, CheckoutRequest,
    CheckoutStart, CheckoutPassengersUpdate, CheckoutPaymentRequest, CheckoutDraftResponse,
    PassengerDetails, PaymentDetails, parse_passenger_details,
)

__all__ = [
    "UserResponse", "DestinationResponse", "FlightResponse", "HotelResponse",
    "TrainResponse", "BusResponse", "ArticleResponse",
    "FlightSearch", "HotelSearch", "TrainSearch", "BusSearch",
    "FlightSearchResult", "HotelSearchResult", "TrainSearchResult", "BusSearchResult",
    "BookingCreate", "BookingResponse", "BookingConfirmation", "CheckoutRequest",
    "CheckoutStart", "CheckoutPassengersUpdate", "CheckoutPaymentRequest", "CheckoutDraftResponse",
    "PassengerDetails", "PaymentDetails", "parse_passenger_details",
]
