from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from database import Base, utcnow


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(String(64), primary_key=True, index=True)
    package_id = Column(String(64), ForeignKey("packages.id"), nullable=False, index=True)
    user_id = Column(String(64), nullable=True, index=True)

    customer_name = Column(String(256), nullable=False)
    customer_email = Column(String(256), nullable=False)
    customer_phone = Column(String(64), nullable=False)
    customer_cpf = Column(String(32), nullable=True)

    num_passengers = Column(Integer, nullable=False)
    # Seat numbers picked on the bus map, e.g. [12, 13]
    selected_seats = Column(JSON, nullable=True)
    total_amount = Column(Integer, nullable=False)

    status = Column(String(32), nullable=False, default="pending", index=True)
    payment_status = Column(String(32), nullable=False, default="pending")
    payment_method = Column(String(32), nullable=True)
    paid_at = Column(DateTime(timezone=True), nullable=True)

    notes = Column(Text, nullable=True)
    customer_notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    package = relationship("TravelPackage", back_populates="bookings")
