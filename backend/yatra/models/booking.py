from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey, JSON, Enum as SQLEnum
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from yatra.database import Base, generate_uuid
from yatra.models.transport import _enum_values
import enum


class TravelType(str, enum.Enum):
    FLIGHT = "flight"
    HOTEL = "hotel"
    TRAIN = "train"
    BUS = "bus"


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


# Cancelled and completed are terminal
ALLOWED_STATUS_TRANSITIONS = {
    BookingStatus.PENDING: {BookingStatus.CONFIRMED, BookingStatus.CANCELLED},
    BookingStatus.CONFIRMED: {BookingStatus.CANCELLED, BookingStatus.COMPLETED},
    BookingStatus.CANCELLED: set(),
    BookingStatus.COMPLETED: set(),
}

# Booking column holding the inventory reference for each travel type
ITEM_ID_FIELDS = {
    TravelType.FLIGHT: "flight_id",
    TravelType.HOTEL: "hotel_id",
    TravelType.TRAIN: "train_id",
    TravelType.BUS: "bus_id",
}


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(255), ForeignKey("users.id"), nullable=False, index=True)

    travel_type = Column(
        SQLEnum(TravelType, name="travel_type", values_callable=_enum_values),
        nullable=False,
    )
    flight_id = Column(String(36), ForeignKey("flights.id"), nullable=True)
    hotel_id = Column(String(36), ForeignKey("hotels.id"), nullable=True)
    train_id = Column(String(36), ForeignKey("trains.id"), nullable=True)
    bus_id = Column(String(36), ForeignKey("buses.id"), nullable=True)

    passenger_details = Column(JSON, nullable=False)
    # Seats (or rooms, for hotels) taken out of inventory by this booking
    quantity = Column(Integer, nullable=False, default=1)
    total_amount = Column(Numeric(10, 2), nullable=False)

    status = Column(
        SQLEnum(BookingStatus, name="booking_status", values_callable=_enum_values),
        nullable=False,
        default=BookingStatus.PENDING,
    )

    booking_date = Column(DateTime, server_default=func.now())
    travel_date = Column(DateTime, nullable=False)
    check_in_date = Column(DateTime, nullable=True)
    check_out_date = Column(DateTime, nullable=True)
    payment_id = Column(String(64), nullable=True)

    created_at = Column(DateTime, server_default=func.now(), index=True)

    user = relationship("User", back_populates="bookings")
    flight = relationship("Flight")
    hotel = relationship("Hotel")
    train = relationship("Train")
    bus = relationship("Bus")

    @property
    def item_id(self):
        return getattr(self, ITEM_ID_FIELDS[self.travel_type])

    def can_transition_to(self, status: BookingStatus) -> bool:
        return status in ALLOWED_STATUS_TRANSITIONS[self.status]

    def __repr__(self) -> str:
        return f"<Booking {self.id}: {self.travel_type.value} {self.status.value}>"
