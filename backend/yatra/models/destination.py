from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.sql import func
from yatra.database import Base, generate_uuid


class Destination(Base):
    """
    A city-level place that transport runs between and hotels sit in.

    Airports are stored as destinations too (e.g. "Indira Gandhi Airport") so
    flights have endpoints, but the public destination listing hides them.
    """
    __tablename__ = "destinations"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=False)
    city = Column(String(255), nullable=False, index=True)
    state = Column(String(255), nullable=False)
    country = Column(String(255), nullable=False, default="India")
    description = Column(Text, nullable=True)
    image_url = Column(String(1024), nullable=True)
    popularity_score = Column(Integer, default=0)

    created_at = Column(DateTime, server_default=func.now())

    def __repr__(self) -> str:
        return f"<Destination {self.id}: {self.name} ({self.city})>"


class Airline(Base):
    __tablename__ = "airlines"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=False)
    code = Column(String(8), nullable=False, unique=True)
    logo_url = Column(String(1024), nullable=True)
