from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from models import Category, Destination
from utils.case import dict_keys_to_camel
from utils.serialize import row_to_dict

router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/categories")
async def list_categories(db: AsyncSession = Depends(get_db)) -> dict[str, Any]:
    result = await db.execute(select(Category).where(Category.is_active.is_(True)).order_by(Category.name))
    rows = [row_to_dict(c) for c in result.scalars().all()]
    return {"data": dict_keys_to_camel(rows)}


@router.get("/destinations")
async def list_destinations(db: AsyncSession = Depends(get_db)) -> dict[str, Any]:
    result = await db.execute(
        select(Destination)
        .where(Destination.is_active.is_(True))
        .order_by(Destination.state, Destination.city)
    )
    rows = [row_to_dict(d) for d in result.scalars().all()]
    return {"data": dict_keys_to_camel(rows)}
