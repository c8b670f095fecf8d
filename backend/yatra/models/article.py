from sqlalchemy import Column, String, DateTime, Boolean, Text, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from yatra.database import Base, generate_uuid


class TravelGuideArticle(Base):
    __tablename__ = "travel_guide_articles"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    excerpt = Column(String(512), nullable=True)
    image_url = Column(String(1024), nullable=True)
    slug = Column(String(255), nullable=False, unique=True)

    author_id = Column(String(255), ForeignKey("users.id"), nullable=False)
    destination_id = Column(String(36), ForeignKey("destinations.id"), nullable=True)

    published = Column(Boolean, default=False)
    published_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    author = relationship("User", back_populates="articles")
    destination = relationship("Destination")
