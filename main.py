from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.bookings import router as bookings_router
from api.catalog import router as catalog_router
from api.errors import register_exception_handlers
from api.packages import router as packages_router
from config import settings
from database import init_db
from utils.log import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    await init_db()
    yield


app = FastAPI(
    title=settings.app_name,
    description="Travel package catalog and booking API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(catalog_router)
app.include_router(packages_router)
app.include_router(bookings_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
