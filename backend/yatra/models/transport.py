from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey, Enum as SQLEnum
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from yatra.database import Base, generate_uuid
import enum


class SeatClass(str, enum.Enum):
    ECONOMY = "economy"
    BUSINESS = "business"
    FIRST = "first"
    SLEEPER = "sleeper"
    AC1 = "ac1"
    AC2 = "ac2"
    AC3 = "ac3"


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


SeatClassColumn = SQLEnum(SeatClass, name="seat_class", values_callable=_enum_values)


class Flight(Base):
    __tablename__ = "flights"

    # Column decremented by the inventory service when a booking reserves seats
    availability_attr = "available_seats"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    airline_id = Column(String(36), ForeignKey("airlines.id"), nullable=False)
    flight_number = Column(String(16), nullable=False)

    from_destination_id = Column(String(36), ForeignKey("destinations.id"), nullable=False, index=True)
    to_destination_id = Column(String(36), ForeignKey("destinations.id"), nullable=False, index=True)

    departure_time = Column(DateTime, nullable=False, index=True)
    arrival_time = Column(DateTime, nullable=False)
    duration = Column("duration_minutes", Integer, nullable=False)

    price = Column(Numeric(10, 2), nullable=False)
    available_seats = Column(Integer, nullable=False)
    total_seats = Column(Integer, nullable=False)
    seat_class = Column(SeatClassColumn, nullable=False)

    created_at = Column(DateTime, server_default=func.now())

    airline = relationship("Airline")
    from_destination = relationship("Destination", foreign_keys=[from_destination_id])
    to_destination = relationship("Destination", foreign_keys=[to_destination_id])

    @property
    def summary(self) -> str:
        return f"{self.airline.code if self.airline else ''}{self.flight_number}"

    def __repr__(self) -> str:
        return f"<Flight {self.flight_number} {self.departure_time}>"


class Train(Base):
    __tablename__ = "trains"

    availability_attr = "available_seats"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    train_number = Column(String(16), nullable=False)
    train_name = Column(String(255), nullable=False)

    from_destination_id = Column(String(36), ForeignKey("destinations.id"), nullable=False, index=True)
    to_destination_id = Column(String(36), ForeignKey("destinations.id"), nullable=False, index=True)

    departure_time = Column(DateTime, nullable=False, index=True)
    arrival_time = Column(DateTime, nullable=False)
    duration = Column("duration_minutes", Integer, nullable=False)

    price = Column(Numeric(10, 2), nullable=False)
    available_seats = Column(Integer, nullable=False)
    seat_class = Column(SeatClassColumn, nullable=False)

    created_at = Column(DateTime, server_default=func.now())

    from_destination = relationship("Destination", foreign_keys=[from_destination_id])
    to_destination = relationship("Destination", foreign_keys=[to_destination_id])

    @property
    def summary(self) -> str:
        return f"{self.train_number} {self.train_name}"


class Bus(Base):
    __tablename__ = "buses"

    availability_attr = "available_seats"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    operator_name = Column(String(255), nullable=False)
    bus_type = Column(String(64), nullable=False)  # AC, Non-AC, Sleeper, ...

    from_destination_id = Column(String(36), ForeignKey("destinations.id"), nullable=False, index=True)
    to_destination_id = Column(String(36), ForeignKey("destinations.id"), nullable=False, index=True)

    departure_time = Column(DateTime, nullable=False, index=True)
    arrival_time = Column(DateTime, nullable=False)
    duration = Column("duration_minutes", Integer, nullable=False)

    price = Column(Numeric(10, 2), nullable=False)
    available_seats = Column(Integer, nullable=False)
    total_seats = Column(Integer, nullable=False)

    created_at = Column(DateTime, server_default=func.now())

    from_destination = relationship("Destination", foreign_keys=[from_destination_id])
    to_destination = relationship("Destination", foreign_keys=[to_destination_id])

    @property
    def summary(self) -> str:
        return f"{self.operator_name} ({self.bus_type})"
