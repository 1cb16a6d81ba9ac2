from decimal import Decimal, ROUND_HALF_UP
from typing import Protocol

from hanztravel.types import OrderHandle, PaymentResult

ORDER_DESCRIPTION = "HanzTravel Flight Booking"


class PaymentError(Exception):
    """Remote checkout call failed (HTTP error, timeout, malformed reply)."""


class PaymentGateway(Protocol):
    def create_order(self, amount: int, currency: str = "USD",
                     description: str = ORDER_DESCRIPTION) -> OrderHandle:
        ...

    def capture(self, handle: OrderHandle) -> PaymentResult:
        ...


def to_amount(fare: float) -> int:
    """Whole currency units for the checkout amount field, half rounds up."""
    return int(Decimal(str(fare)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
