from sqlalchemy import Boolean, Column, DateTime, Float, String, Text

from database import Base, utcnow


class Destination(Base):
    __tablename__ = "destinations"

    id = Column(String(64), primary_key=True, index=True)
    name = Column(String(256), nullable=False)
    slug = Column(String(128), unique=True, nullable=False, index=True)
    city = Column(String(128), nullable=False)
    state = Column(String(64), nullable=False)
    country = Column(String(64), nullable=False, default="Brasil")
    description = Column(Text, nullable=True)
    image_url = Column(String(512), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
