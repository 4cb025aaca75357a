from typing import Any, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from api.errors import http_error_from_service
from database import get_db
from models import Booking
from schemas.booking import BookingCreate, BookingUpdate
from services import bookings as booking_service
from services.exceptions import ServiceError
from services.rate_limit import general_rate_limit
from utils.case import dict_keys_to_camel
from utils.serialize import row_to_dict

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


def _booking_to_response(b: Booking) -> dict[str, Any]:
    return dict_keys_to_camel(row_to_dict(b, booking_service.BOOKING_RELATIONS))


@router.get("")
async def list_bookings(
    package_id: Optional[str] = Query(None, alias="packageId"),
    db: AsyncSession = Depends(get_db),
):
    bookings = await booking_service.list_bookings(db, package_id)
    return {"data": [_booking_to_response(b) for b in bookings]}


@router.post("", status_code=201, dependencies=[Depends(general_rate_limit)])
async def create_booking(body: BookingCreate, db: AsyncSession = Depends(get_db)):
    try:
        booking = await booking_service.create_booking(db, body)
    except ServiceError as e:
        raise http_error_from_service(e) from e
    return {"data": _booking_to_response(booking)}


@router.put("", dependencies=[Depends(general_rate_limit)])
async def update_booking(body: BookingUpdate, db: AsyncSession = Depends(get_db)):
    try:
        booking = await booking_service.update_booking(db, body)
    except ServiceError as e:
        raise http_error_from_service(e) from e
    return {"data": _booking_to_response(booking)}
