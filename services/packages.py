"""
Package queries and mutations.
Rows are returned as ORM objects with category and destination loaded; routes
serialize them with row_to_dict + dict_keys_to_camel.
"""
from __future__ import annotations

import logging
import re
import unicodedata
import uuid
from typing import Any

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from config import settings
from models import Category, Destination, TravelPackage
from schemas.package import PackageCreate, PackageFilters, PackageUpdate
from services.exceptions import NotFoundError
from utils.case import dict_keys_to_snake

logger = logging.getLogger(__name__)

PACKAGE_RELATIONS = {"category": None, "destination": None}


async def _ensure_exists(session: AsyncSession, model, resource: str, row_id: str) -> None:
    if await session.get(model, row_id) is None:
        raise NotFoundError(resource, row_id)


async def _check_references(session: AsyncSession, data: dict[str, Any]) -> None:
    if data.get("category_id"):
        await _ensure_exists(session, Category, "Category", data["category_id"])
    if data.get("destination_id"):
        await _ensure_exists(session, Destination, "Destination", data["destination_id"])


def slugify(title: str) -> str:
    """'Férias em Gramado!' -> 'ferias-em-gramado'."""
    normalized = unicodedata.normalize("NFD", title.lower())
    ascii_only = "".join(c for c in normalized if not unicodedata.combining(c))
    return re.sub(r"[^a-z0-9]+", "-", ascii_only).strip("-")


def _with_relations(stmt):
    return stmt.options(selectinload(TravelPackage.category), selectinload(TravelPackage.destination))


async def list_packages(session: AsyncSession, filters: PackageFilters) -> list[TravelPackage]:
    stmt = select(TravelPackage).where(
        TravelPackage.is_active.is_(True),
        TravelPackage.status == filters.status,
    )
    if filters.category:
        stmt = stmt.where(TravelPackage.category_id == filters.category)
    if filters.destination:
        stmt = stmt.where(TravelPackage.destination_id == filters.destination)
    if filters.is_featured is not None:
        stmt = stmt.where(TravelPackage.is_featured.is_(filters.is_featured))
    if filters.min_price:
        stmt = stmt.where(TravelPackage.price >= filters.min_price)
    if filters.max_price:
        stmt = stmt.where(TravelPackage.price <= filters.max_price)
    if filters.min_duration:
        stmt = stmt.where(TravelPackage.duration_days >= filters.min_duration)
    if filters.max_duration:
        stmt = stmt.where(TravelPackage.duration_days <= filters.max_duration)
    if filters.search:
        pattern = f"%{filters.search}%"
        stmt = stmt.where(or_(TravelPackage.title.ilike(pattern), TravelPackage.description.ilike(pattern)))

    stmt = _with_relations(stmt).order_by(TravelPackage.is_featured.desc(), TravelPackage.created_at.desc())
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_package(session: AsyncSession, package_id: str) -> TravelPackage:
    result = await session.execute(_with_relations(select(TravelPackage)).where(TravelPackage.id == package_id))
    pkg = result.scalar_one_or_none()
    if pkg is None:
        raise NotFoundError("Package", package_id)
    return pkg


async def create_package(session: AsyncSession, body: PackageCreate) -> TravelPackage:
    data: dict[str, Any] = body.model_dump(by_alias=False)
    if data.get("min_participants") is None:
        data["min_participants"] = settings.default_min_participants
    if data.get("itinerary") is not None:
        data["itinerary"] = dict_keys_to_snake(data["itinerary"])
    await _check_references(session, data)
    pkg = TravelPackage(
        id=f"pkg-{uuid.uuid4().hex[:12]}",
        slug=slugify(body.title),
        **data,
    )
    session.add(pkg)
    await session.flush()
    await session.refresh(pkg)
    await session.refresh(pkg, ["category", "destination"])
    logger.info("Created package %s (%s)", pkg.id, pkg.slug)
    return pkg


async def update_package(session: AsyncSession, body: PackageUpdate) -> TravelPackage:
    pkg = await get_package(session, body.id)
    changes = body.model_dump(by_alias=False, exclude_unset=True, exclude={"id"})
    columns = TravelPackage.__table__.c
    # null for a NOT NULL column means "leave unchanged"
    changes = {k: v for k, v in changes.items() if v is not None or columns[k].nullable}
    if changes.get("itinerary") is not None:
        changes["itinerary"] = dict_keys_to_snake(changes["itinerary"])
    await _check_references(session, changes)
    if changes.get("title"):
        changes["slug"] = slugify(changes["title"])
    for key, value in changes.items():
        setattr(pkg, key, value)
    await session.flush()
    await session.refresh(pkg, ["category", "destination"])
    return pkg


async def deactivate_package(session: AsyncSession, package_id: str) -> None:
    """Soft delete: the row stays, but list_packages no longer returns it."""
    result = await session.execute(select(TravelPackage).where(TravelPackage.id == package_id))
    pkg = result.scalar_one_or_none()
    if pkg is None:
        raise NotFoundError("Package", package_id)
    pkg.is_active = False
    await session.flush()
    logger.info("Deactivated package %s", package_id)
