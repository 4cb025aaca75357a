from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from database import Base, utcnow


class TravelPackage(Base):
    __tablename__ = "packages"

    id = Column(String(64), primary_key=True, index=True)
    title = Column(String(256), nullable=False)
    slug = Column(String(256), nullable=False, index=True)
    description = Column(Text, nullable=True)
    short_description = Column(String(512), nullable=True)
    category_id = Column(String(64), ForeignKey("categories.id"), nullable=False, index=True)
    destination_id = Column(String(64), ForeignKey("destinations.id"), nullable=False, index=True)

    # Prices in cents
    price = Column(Integer, nullable=False)
    original_price = Column(Integer, nullable=True)
    price_child_6_10 = Column(Integer, nullable=True)
    price_child_11_13 = Column(Integer, nullable=True)

    duration_days = Column(Integer, nullable=False, default=1)
    departure_location = Column(String(256), nullable=True)
    departure_time = Column(String(16), nullable=True)
    departure_date = Column(DateTime(timezone=True), nullable=True)
    return_date = Column(DateTime(timezone=True), nullable=True)

    available_seats = Column(Integer, nullable=False, default=0)
    total_seats = Column(Integer, nullable=False, default=0)
    min_participants = Column(Integer, nullable=False, default=10)

    includes = Column(JSON, nullable=False, default=list)
    not_includes = Column(JSON, nullable=False, default=list)
    # Free-form day-by-day plan, stored snake_case like every other payload
    itinerary = Column(JSON, nullable=True)
    cover_image = Column(String(512), nullable=True)
    gallery_images = Column(JSON, nullable=False, default=list)

    status = Column(String(32), nullable=False, default="draft", index=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    views_count = Column(Integer, nullable=False, default=0)
    bookings_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    category = relationship("Category")
    destination = relationship("Destination")
    bookings = relationship("Booking", back_populates="package")
