import httpx
import time
from typing import Dict, Any, Optional
from hanztravel.config import settings
from hanztravel.obs.logger import log_event
from hanztravel.payments.gateway import PaymentError, ORDER_DESCRIPTION
from hanztravel.types import OrderHandle, PayerInfo, PaymentResult

BASE = "https://api-m.sandbox.paypal.com" if settings.PAYPAL_ENV != "live" \
       else "https://api-m.paypal.com"


class PayPalClient:
    """PayPal Orders v2 adapter: create an order for a fixed amount, capture it."""

    def __init__(self, client_id: str = None, client_secret: str = None):
        self.client_id = client_id or settings.PAYPAL_CLIENT_ID
        self.client_secret = client_secret if client_secret is not None else settings.PAYPAL_CLIENT_SECRET
        self._token = None
        self._exp = 0
        # Persistent HTTP client with HTTP/2 and sensible timeouts
        self._http = httpx.Client(
            http2=True,
            timeout=httpx.Timeout(connect=3.0, read=15.0, write=15.0, pool=15.0),
        )

    def _get_token(self) -> str:
        if self._token and time.time() < self._exp - 60:
            return self._token
        try:
            r = self._http.post(
                f"{BASE}/v1/oauth2/token",
                data={"grant_type": "client_credentials"},
                auth=(self.client_id, self.client_secret),
                headers={"Accept": "application/json"},
            )
            r.raise_for_status()
            j = r.json()
            token = j["access_token"]
            expires_in = float(j.get("expires_in", 32400))
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            raise PaymentError(f"PayPal auth failed: {type(e).__name__}: {e}") from e
        self._token = token
        self._exp = time.time() + expires_in
        return self._token

    def _post(self, url: str, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        headers = {
            "Authorization": f"Bearer {self._get_token()}",
            "Content-Type": "application/json",
        }
        # Single retry with short backoff on 5xx and connection trouble
        attempt = 0
        while True:
            try:
                r = self._http.post(url, json=body or {}, headers=headers)
                r.raise_for_status()
                data = r.json()
            except httpx.HTTPStatusError as e:
                if 500 <= e.response.status_code < 600 and attempt == 0:
                    attempt += 1
                    time.sleep(1.0)
                    continue
                raise PaymentError(f"HTTP {e.response.status_code}: {e.response.text}") from e
            except httpx.TransportError as e:
                # Connect/read/write/pool timeouts and dropped connections
                if attempt == 0:
                    attempt += 1
                    time.sleep(1.0)
                    continue
                raise PaymentError(f"{type(e).__name__}: {e}") from e
            except (httpx.HTTPError, ValueError) as e:
                raise PaymentError(f"Bad PayPal response: {type(e).__name__}: {e}") from e
            if not isinstance(data, dict):
                raise PaymentError("Bad PayPal response: expected a JSON object")
            return data

    def create_order(self, amount: int, currency: str = "USD",
                     description: str = ORDER_DESCRIPTION) -> OrderHandle:
        body = {
            "intent": "CAPTURE",
            "purchase_units": [
                {
                    "amount": {"currency_code": currency, "value": str(amount)},
                    "description": description,
                }
            ],
        }
        data = self._post(f"{BASE}/v2/checkout/orders", body)
        if "id" not in data:
            raise PaymentError("PayPal order response missing id")
        approve = next(
            (l.get("href") for l in data.get("links", []) if l.get("rel") in ("approve", "payer-action")),
            None,
        )
        log_event("paypal_order_created", order_id=data["id"], amount=amount, currency=currency)
        return OrderHandle(
            order_id=data["id"],
            amount=amount,
            currency=currency,
            status=data.get("status", "CREATED"),
            approve_url=approve,
        )

    def capture(self, handle: OrderHandle) -> PaymentResult:
        try:
            data = self._post(f"{BASE}/v2/checkout/orders/{handle.order_id}/capture")
        except PaymentError as e:
            return PaymentResult(ok=False, order_id=handle.order_id, error=f"capture failed: {e}")

        if data.get("status") != "COMPLETED":
            return PaymentResult(
                ok=False,
                order_id=handle.order_id,
                error=f"capture status {data.get('status')}",
            )
        payer = data.get("payer") or {}
        name = payer.get("name") or {}
        return PaymentResult(
            ok=True,
            order_id=handle.order_id,
            payer=PayerInfo(
                given_name=name.get("given_name") or "",
                surname=name.get("surname"),
                email=payer.get("email_address"),
            ),
        )
