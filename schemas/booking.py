from typing import Literal, Optional

from pydantic import Field

from schemas.base import CamelModel

BookingStatus = Literal["pending", "confirmed", "paid", "canceled"]
PaymentStatus = Literal["pending", "paid", "failed"]


class BookingCreate(CamelModel):
    package_id: str = Field(..., min_length=1)
    customer_name: str = Field(..., min_length=1)
    customer_email: str = Field(..., min_length=3)
    customer_phone: str = Field(..., min_length=1)
    customer_cpf: Optional[str] = None
    num_passengers: int = Field(..., ge=1)
    selected_seats: Optional[list[int]] = None
    customer_notes: Optional[str] = None


class BookingUpdate(CamelModel):
    id: str = Field(..., min_length=1)
    status: Optional[BookingStatus] = None
    payment_status: Optional[PaymentStatus] = None
    payment_method: Optional[Literal["pix", "credit_card", "bank_slip"]] = None
    notes: Optional[str] = None
