from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from api.errors import http_error_from_service
from database import get_db
from models import TravelPackage
from schemas.package import PackageCreate, PackageFilters, PackageUpdate
from services import bookings as booking_service
from services import packages as package_service
from services.exceptions import ServiceError
from services.rate_limit import general_rate_limit
from utils.case import dict_keys_to_camel
from utils.serialize import row_to_dict

router = APIRouter(prefix="/api/packages", tags=["packages"])


def _package_to_response(p: TravelPackage) -> dict[str, Any]:
    """Serialize package (with category and destination) to camelCase for frontend."""
    return dict_keys_to_camel(row_to_dict(p, package_service.PACKAGE_RELATIONS))


@router.get("")
async def list_packages(
    category: Optional[str] = None,
    destination: Optional[str] = None,
    min_price: Optional[int] = Query(None, alias="minPrice"),
    max_price: Optional[int] = Query(None, alias="maxPrice"),
    min_duration: Optional[int] = Query(None, alias="minDuration"),
    max_duration: Optional[int] = Query(None, alias="maxDuration"),
    status: str = "published",
    featured: Optional[str] = None,
    search: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    filters = PackageFilters(
        category=category or None,
        destination=destination or None,
        min_price=min_price,
        max_price=max_price,
        min_duration=min_duration,
        max_duration=max_duration,
        status=status or "published",
        # only an explicit "true" filters; anything else lists all
        is_featured=True if featured == "true" else None,
        search=search or None,
    )
    packages = await package_service.list_packages(db, filters)
    return {"data": [_package_to_response(p) for p in packages]}


@router.get("/{package_id}")
async def get_package(package_id: str, db: AsyncSession = Depends(get_db)):
    try:
        pkg = await package_service.get_package(db, package_id)
    except ServiceError as e:
        raise http_error_from_service(e) from e
    return {"data": _package_to_response(pkg)}


@router.get("/{package_id}/seats")
async def get_package_seats(package_id: str, db: AsyncSession = Depends(get_db)):
    try:
        occupancy = await booking_service.get_seat_occupancy(db, package_id)
    except ServiceError as e:
        raise http_error_from_service(e) from e
    return {"data": dict_keys_to_camel(occupancy)}


@router.post("", status_code=201, dependencies=[Depends(general_rate_limit)])
async def create_package(body: PackageCreate, db: AsyncSession = Depends(get_db)):
    try:
        pkg = await package_service.create_package(db, body)
    except ServiceError as e:
        raise http_error_from_service(e) from e
    return {"data": _package_to_response(pkg)}


@router.put("", dependencies=[Depends(general_rate_limit)])
async def update_package(body: PackageUpdate, db: AsyncSession = Depends(get_db)):
    try:
        pkg = await package_service.update_package(db, body)
    except ServiceError as e:
        raise http_error_from_service(e) from e
    return {"data": _package_to_response(pkg)}


@router.delete("", dependencies=[Depends(general_rate_limit)])
async def delete_package(
    package_id: Optional[str] = Query(None, alias="id"),
    db: AsyncSession = Depends(get_db),
):
    if not package_id:
        raise HTTPException(status_code=400, detail="Package id is required")
    try:
        await package_service.deactivate_package(db, package_id)
    except ServiceError as e:
        raise http_error_from_service(e) from e
    return {"message": "Package removed"}
