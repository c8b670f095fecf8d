from sqlalchemy import Column, Integer, String, DateTime, Numeric, Text, ForeignKey, JSON
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from yatra.database import Base, generate_uuid


class Hotel(Base):
    __tablename__ = "hotels"

    availability_attr = "available_rooms"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=False)
    destination_id = Column(String(36), ForeignKey("destinations.id"), nullable=False, index=True)
    address = Column(Text, nullable=False)

    rating = Column(Numeric(2, 1), nullable=True)
    price_per_night = Column(Numeric(10, 2), nullable=False)
    amenities = Column(JSON, default=list)

    image_url = Column(String(1024), nullable=True)
    description = Column(Text, nullable=True)

    available_rooms = Column(Integer, nullable=False)
    total_rooms = Column(Integer, nullable=False)

    created_at = Column(DateTime, server_default=func.now())

    destination = relationship("Destination")

    @property
    def summary(self) -> str:
        return self.name
