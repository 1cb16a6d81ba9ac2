from __future__ import annotations

"""Hands confirmed estimates to the payment gateway.

Fire-and-forget with respect to the estimate session: results are logged
and returned to the caller, but nothing here holds a session reference.
"""

from typing import Dict, Optional
import threading

from hanztravel.config import settings
from hanztravel.infrastructure.resilience import CircuitBreaker, CircuitOpenError
from hanztravel.obs.logger import log_event
from hanztravel.obs.metrics import inc_counter
from hanztravel.payments.gateway import PaymentGateway, PaymentError, to_amount
from hanztravel.types import ConfirmedEstimate, OrderHandle, PaymentResult


class CheckoutCoordinator:
    def __init__(self, gateway: PaymentGateway, breaker: Optional[CircuitBreaker] = None,
                 currency: str = None):
        self.gateway = gateway
        self.currency = currency or settings.CURRENCY
        self.breaker = breaker or CircuitBreaker(
            name="payment_gateway",
            failure_threshold=settings.PAYMENT_BREAKER_THRESHOLD,
            recovery_timeout=settings.PAYMENT_BREAKER_RECOVERY,
            expected_exception=PaymentError,
        )
        self._lock = threading.Lock()
        self._orders: Dict[str, OrderHandle] = {}

    def start(self, confirmed: ConfirmedEstimate, session_id: Optional[str] = None) -> Optional[OrderHandle]:
        """Open a checkout order for the snapshot's rounded fare; None if the gateway fails."""
        amount = to_amount(confirmed.fare_usd)
        try:
            handle = self.breaker.call(self.gateway.create_order, amount, self.currency)
        except (PaymentError, CircuitOpenError) as e:
            if session_id:
                with self._lock:
                    self._orders.pop(session_id, None)
            inc_counter("payments_total", {"outcome": "order_failed"})
            log_event("order_failed", level="WARNING", session_id=session_id, amount=amount, error=str(e))
            return None

        if session_id:
            with self._lock:
                self._orders[session_id] = handle
        inc_counter("payments_total", {"outcome": "order_created"})
        log_event("order_created", session_id=session_id, order_id=handle.order_id, amount=amount)
        return handle

    def current_order(self, session_id: str) -> Optional[OrderHandle]:
        with self._lock:
            return self._orders.get(session_id)

    def forget(self, session_id: str) -> None:
        """Drop the order remembered for a session that has ended."""
        with self._lock:
            self._orders.pop(session_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)

    def complete(self, handle: OrderHandle, session_id: Optional[str] = None) -> PaymentResult:
        """Capture an approved order. Failures come back as ok=False, never raised."""
        try:
            result = self.breaker.call(self.gateway.capture, handle)
        except (PaymentError, CircuitOpenError) as e:
            result = PaymentResult(ok=False, order_id=handle.order_id, error=str(e))

        if result.ok:
            inc_counter("payments_total", {"outcome": "captured"})
            log_event(
                "payment_captured",
                session_id=session_id,
                order_id=handle.order_id,
                payer=result.payer.given_name if result.payer else None,
            )
        else:
            inc_counter("payments_total", {"outcome": "capture_failed"})
            log_event("payment_failed", level="WARNING", session_id=session_id,
                      order_id=handle.order_id, error=result.error)
        return result
