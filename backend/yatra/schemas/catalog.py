from datetime import datetime
from decimal import Decimal
from typing import Optional

from yatra.models.transport import SeatClass
from yatra.schemas.base import CamelModel


class UserResponse(CamelModel):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DestinationResponse(CamelModel):
    id: str
    name: str
    city: str
    state: str
    country: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    popularity_score: Optional[int] = 0
    created_at: Optional[datetime] = None


class FlightResponse(CamelModel):
    id: str
    airline_id: str
    flight_number: str
    from_destination_id: str
    to_destination_id: str
    departure_time: datetime
    arrival_time: datetime
    price: Decimal
    available_seats: int
    total_seats: int
    seat_class: SeatClass
    duration: int
    created_at: Optional[datetime] = None


class HotelResponse(CamelModel):
    id: str
    name: str
    destination_id: str
    address: str
    rating: Optional[Decimal] = None
    price_per_night: Decimal
    amenities: Optional[list[str]] = None
    image_url: Optional[str] = None
    description: Optional[str] = None
    available_rooms: int
    total_rooms: int
    created_at: Optional[datetime] = None


class TrainResponse(CamelModel):
    id: str
    train_number: str
    train_name: str
    from_destination_id: str
    to_destination_id: str
    departure_time: datetime
    arrival_time: datetime
    price: Decimal
    available_seats: int
    seat_class: SeatClass
    duration: int
    created_at: Optional[datetime] = None


class BusResponse(CamelModel):
    id: str
    operator_name: str
    bus_type: str
    from_destination_id: str
    to_destination_id: str
    departure_time: datetime
    arrival_time: datetime
    price: Decimal
    available_seats: int
    total_seats: int
    duration: int
    created_at: Optional[datetime] = None


class ArticleResponse(CamelModel):
    id: str
    title: str
    content: str
    excerpt: Optional[str] = None
    image_url: Optional[str] = None
    slug: str
    author_id: str
    destination_id: Optional[str] = None
    published: bool
    published_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
