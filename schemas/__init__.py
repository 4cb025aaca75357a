from schemas.base import CamelModel
from schemas.booking import BookingCreate, BookingUpdate
from schemas.package import PackageCreate, PackageFilters, PackageUpdate

__all__ = [
    "CamelModel",
    "BookingCreate",
    "BookingUpdate",
    "PackageCreate",
    "PackageFilters",
    "PackageUpdate",
]
