from models.booking import Booking
from models.category import Category
from models.destination import Destination
from models.package import TravelPackage

__all__ = [
    "Booking",
    "Category",
    "Destination",
    "TravelPackage",
]
