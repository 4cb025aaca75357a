"""
Seed categories, destinations and a few published packages.
Run: python -m scripts.seed_packages (from the project root, with DB reachable).
"""
import asyncio
import os
import sys
from datetime import datetime, timezone

# Add parent so we can import from backend
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from database import AsyncSessionLocal, init_db
from models import Category, Destination, TravelPackage
from services.packages import slugify


CATEGORIES_DATA = [
    {"id": "praias", "name": "Praias", "slug": "praias", "description": "Destinos litorâneos com sol e mar", "icon": "Waves", "color": "#0ea5e9"},
    {"id": "montanhas", "name": "Montanhas", "slug": "montanhas", "description": "Destinos de altitude e natureza", "icon": "Mountain", "color": "#10b981"},
    {"id": "cidades-historicas", "name": "Cidades Históricas", "slug": "cidades-historicas", "description": "Patrimônios culturais e históricos", "icon": "Landmark", "color": "#f59e0b"},
    {"id": "compras", "name": "Compras", "slug": "compras", "description": "Destinos ideais para fazer compras", "icon": "ShoppingBag", "color": "#8b5cf6"},
]

DESTINATIONS_DATA = [
    {"id": "buzios-rj", "name": "Búzios, RJ", "slug": "buzios-rj", "city": "Búzios", "state": "RJ", "image_url": "/destinations/buzios.jpg"},
    {"id": "ouro-preto-mg", "name": "Ouro Preto, MG", "slug": "ouro-preto-mg", "city": "Ouro Preto", "state": "MG", "image_url": "/destinations/ouro-preto.jpg"},
    {"id": "monte-verde-mg", "name": "Monte Verde, MG", "slug": "monte-verde-mg", "city": "Monte Verde", "state": "MG", "image_url": "/destinations/monte-verde.jpg"},
    {"id": "rio-de-janeiro-rj", "name": "Rio de Janeiro, RJ", "slug": "rio-de-janeiro-rj", "city": "Rio de Janeiro", "state": "RJ", "image_url": "/destinations/rio.jpg"},
]

PACKAGES_DATA = [
    {
        "id": "pkg-buzios",
        "title": "Fim de Semana em Búzios",
        "short_description": "3 dias de sol, mar e muito charme na península",
        "category_id": "praias",
        "destination_id": "buzios-rj",
        "price": 45_000,
        "original_price": 55_000,
        "duration_days": 3,
        "departure_location": "Belo Horizonte, MG",
        "departure_time": "06:00",
        "departure_date": datetime(2025, 12, 15, tzinfo=timezone.utc),
        "return_date": datetime(2025, 12, 17, tzinfo=timezone.utc),
        "available_seats": 8,
        "total_seats": 45,
        "min_participants": 20,
        "includes": ["Transporte ida e volta", "Hospedagem (2 noites)", "Café da manhã", "Seguro viagem"],
        "not_includes": ["Almoço", "Jantar", "Passeios extras"],
        "cover_image": "/packages/buzios-hero.jpg",
        "status": "published",
        "is_featured": True,
    },
    {
        "id": "pkg-ouro-preto",
        "title": "Cidades Históricas de Minas",
        "category_id": "cidades-historicas",
        "destination_id": "ouro-preto-mg",
        "price": 28_000,
        "duration_days": 2,
        "departure_location": "Belo Horizonte, MG",
        "available_seats": 15,
        "total_seats": 45,
        "includes": ["Transporte ida e volta", "Guia local"],
        "itinerary": {"day_1": {"morning_visit": "Igreja de São Francisco"}, "day_2": {"morning_visit": "Mina da Passagem"}},
        "status": "published",
    },
    {
        "id": "pkg-mantiqueira",
        "title": "Aventura na Serra da Mantiqueira",
        "category_id": "montanhas",
        "destination_id": "monte-verde-mg",
        "price": 52_000,
        "original_price": 65_000,
        "duration_days": 3,
        "available_seats": 5,
        "total_seats": 40,
        "status": "published",
    },
]


async def _seed_rows(session, model, rows, label):
    for data in rows:
        if await session.get(model, data["id"]):
            print(f"{label} {data['id']} already exists, skipping")
            continue
        session.add(model(**data))
        print(f"Seeded {label.lower()}: {data['id']}")
    await session.flush()


async def seed():
    await init_db()
    async with AsyncSessionLocal() as session:
        await _seed_rows(session, Category, CATEGORIES_DATA, "Category")
        await _seed_rows(session, Destination, DESTINATIONS_DATA, "Destination")
        packages = [{**p, "slug": slugify(p["title"])} for p in PACKAGES_DATA]
        await _seed_rows(session, TravelPackage, packages, "Package")
        await session.commit()
    print("Seed complete.")


if __name__ == "__main__":
    asyncio.run(seed())
