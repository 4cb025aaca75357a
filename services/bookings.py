from __future__ import annotations

import logging
import uuid
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from database import utcnow
from models import Booking, TravelPackage
from schemas.booking import BookingCreate, BookingUpdate
from services.exceptions import InsufficientSeatsError, NotFoundError

logger = logging.getLogger(__name__)

BOOKING_RELATIONS = {"package": {"destination": None, "category": None}}
SEAT_HOLDING_STATUSES = ("pending", "confirmed")


def _with_package(stmt):
    return stmt.options(
        selectinload(Booking.package).selectinload(TravelPackage.destination),
        selectinload(Booking.package).selectinload(TravelPackage.category),
    )


async def list_bookings(session: AsyncSession, package_id: Optional[str] = None) -> list[Booking]:
    stmt = _with_package(select(Booking))
    if package_id:
        stmt = stmt.where(Booking.package_id == package_id)
    result = await session.execute(stmt.order_by(Booking.created_at.desc()))
    return list(result.scalars().all())


async def get_booking(session: AsyncSession, booking_id: str) -> Booking:
    result = await session.execute(_with_package(select(Booking)).where(Booking.id == booking_id))
    booking = result.scalar_one_or_none()
    if booking is None:
        raise NotFoundError("Booking", booking_id)
    return booking


async def create_booking(session: AsyncSession, body: BookingCreate, user_id: Optional[str] = None) -> Booking:
    """
    Reserve seats on a package.
    Total amount is price x passengers; the package loses that many available
    seats and gains one booking in the same transaction.
    """
    pkg = await session.get(TravelPackage, body.package_id, with_for_update=True)
    if pkg is None:
        raise NotFoundError("Package", body.package_id)
    if pkg.available_seats < body.num_passengers:
        raise InsufficientSeatsError(pkg.available_seats, body.num_passengers)

    booking = Booking(
        id=f"bkg-{uuid.uuid4().hex[:12]}",
        package_id=pkg.id,
        user_id=user_id,
        customer_name=body.customer_name,
        customer_email=body.customer_email,
        customer_phone=body.customer_phone,
        customer_cpf=body.customer_cpf,
        num_passengers=body.num_passengers,
        selected_seats=body.selected_seats,
        total_amount=pkg.price * body.num_passengers,
        customer_notes=body.customer_notes,
        status="pending",
        payment_status="pending",
    )
    session.add(booking)
    pkg.available_seats -= body.num_passengers
    pkg.bookings_count = (pkg.bookings_count or 0) + 1
    await session.flush()
    logger.info(
        "Booking %s created for package %s (%d passengers, %d seats left)",
        booking.id, pkg.id, body.num_passengers, pkg.available_seats,
    )
    await session.refresh(booking)
    await session.refresh(booking, ["package"])
    await session.refresh(pkg, ["destination", "category"])
    return booking


async def update_booking(session: AsyncSession, body: BookingUpdate) -> Booking:
    booking = await get_booking(session, body.id)
    if body.status:
        booking.status = body.status
    if body.payment_status:
        booking.payment_status = body.payment_status
        if body.payment_status == "paid":
            booking.paid_at = utcnow()
    if body.payment_method:
        booking.payment_method = body.payment_method
    if "notes" in body.model_fields_set:
        booking.notes = body.notes
    await session.flush()
    return booking


async def get_seat_occupancy(session: AsyncSession, package_id: str) -> dict[str, Any]:
    """
    Seats held by pending or confirmed bookings of a package.
    Paid and canceled bookings do not hold seats on the map.
    """
    pkg = await session.get(TravelPackage, package_id)
    if pkg is None:
        raise NotFoundError("Package", package_id)

    result = await session.execute(
        select(Booking.selected_seats, Booking.num_passengers).where(
            Booking.package_id == package_id,
            Booking.status.in_(SEAT_HOLDING_STATUSES),
        )
    )
    rows = result.all()
    occupied: set[int] = set()
    total_participants = 0
    for selected_seats, num_passengers in rows:
        total_participants += num_passengers
        if isinstance(selected_seats, list):
            occupied.update(selected_seats)

    total_seats = pkg.total_seats or 0
    occupied_seats = sorted(occupied)
    return {
        "package_id": pkg.id,
        "package_title": pkg.title,
        "total_seats": total_seats,
        "occupied_seats": occupied_seats,
        "available_seats": total_seats - len(occupied_seats),
        "total_bookings": len(rows),
        "total_participants": total_participants,
    }
