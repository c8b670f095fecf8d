from datetime import date, datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import Field, model_validator

from yatra.models.transport import SeatClass
from yatra.schemas.base import CamelModel


FlightSeatClass = Literal["economy", "business", "first"]
TrainSeatClass = Literal["sleeper", "ac3", "ac2", "ac1"]


class RouteSearch(CamelModel):
    # "from" is a keyword, so both endpoints carry explicit aliases
    from_city: str = Field(alias="from", min_length=1)
    to_city: str = Field(alias="to", min_length=1)


class FlightSearch(RouteSearch):
    departure_date: date
    passengers: int = Field(1, ge=1)
    seat_class: FlightSeatClass = "economy"


class TrainSearch(RouteSearch):
    journey_date: date
    seat_class: TrainSeatClass = "sleeper"
    passengers: int = Field(1, ge=1)


class BusSearch(RouteSearch):
    journey_date: date
    passengers: int = Field(1, ge=1)


class HotelSearch(CamelModel):
    destination: str = Field(min_length=1)
    check_in_date: date
    check_out_date: date
    guests: int = Field(1, ge=1)
    rooms: int = Field(1, ge=1)

    @model_validator(mode="after")
    def check_stay_dates(self):
        if self.check_out_date <= self.check_in_date:
            raise ValueError("checkOutDate must be after checkInDate")
        return self


class PlaceSummary(CamelModel):
    name: str
    city: str


class AirlineSummary(CamelModel):
    name: str
    code: str
    logo_url: Optional[str] = None


class TransportResult(CamelModel):
    id: str
    departure_time: datetime
    arrival_time: datetime
    duration: int
    price: Decimal
    available_seats: int
    from_destination: PlaceSummary
    to_destination: PlaceSummary


class FlightSearchResult(TransportResult):
    flight_number: str
    total_seats: int
    seat_class: SeatClass
    airline: AirlineSummary


class TrainSearchResult(TransportResult):
    train_number: str
    train_name: str
    seat_class: SeatClass
    from_destination_id: str
    to_destination_id: str


class BusSearchResult(TransportResult):
    operator_name: str
    bus_type: str
    total_seats: int
    from_destination_id: str
    to_destination_id: str


class HotelSearchResult(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    address: str
    image_url: Optional[str] = None
    destination_id: str
    rating: Optional[Decimal] = None
    price_per_night: Decimal
    amenities: Optional[list[str]] = None
    available_rooms: int
    total_rooms: int
    destination: PlaceSummary
