from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str = Field(..., min_length=3, max_length=4, description="IATA-style airport code")
    city: str
    country: str
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class Airline(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)


class Aircraft(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str = Field(..., min_length=1)
    cruise_speed_kmh: float = Field(..., gt=0)


class LiveEstimate(BaseModel):
    """Distance/time/fare for the current selections. Replaced on every recompute."""
    model_config = ConfigDict(frozen=True)

    distance_km: float = Field(..., ge=0)
    duration_hours: float = Field(..., ge=0)
    fare_usd: float = Field(..., ge=59)


class ConfirmedEstimate(BaseModel):
    """Snapshot taken when the user confirms; later selections never touch it."""
    model_config = ConfigDict(frozen=True)

    distance_km: float = Field(..., ge=0)
    duration_hours: float = Field(..., ge=0)
    fare_usd: float = Field(..., ge=59)

    origin_code: str
    destination_code: str
    airline: str
    aircraft: str
    departure_date: Optional[str] = None  # free-form, not validated against schedules
    confirmed_at: datetime

    @property
    def amount_due(self) -> int:
        from hanztravel.payments.gateway import to_amount
        return to_amount(self.fare_usd)


class OrderHandle(BaseModel):
    order_id: str
    amount: int
    currency: str = "USD"
    status: str = "CREATED"
    approve_url: Optional[str] = None


class PayerInfo(BaseModel):
    given_name: str
    surname: Optional[str] = None
    email: Optional[str] = None


class PaymentResult(BaseModel):
    ok: bool
    order_id: str
    payer: Optional[PayerInfo] = None
    error: Optional[str] = None  # e.g., 'capture failed: HTTP 422'
