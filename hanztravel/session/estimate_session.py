"""
Estimate session: the user's current selections and the estimates derived
from them.

Every selector replaces one field and calls ``recompute()``, which derives
distance -> duration -> fare into a fresh ``LiveEstimate``. ``confirm()``
copies the live values into a ``ConfirmedEstimate`` that later selections
cannot reach. Unknown identifiers are ignored and the previous selection is
kept.
"""

from datetime import date, datetime, timezone
from enum import Enum
import threading
from typing import Callable, Optional, Union

from hanztravel.catalog.lookup import Catalog
from hanztravel.config import settings
from hanztravel.estimate.duration import duration
from hanztravel.estimate.pricing import PricingStrategy, default_pricing
from hanztravel.geo.distance import distance
from hanztravel.obs.logger import log_event
from hanztravel.obs.metrics import inc_counter
from hanztravel.types import Location, Airline, Aircraft, LiveEstimate, ConfirmedEstimate
from hanztravel.utils.dates import normalise_departure_date


class SessionState(Enum):
    EDITING = "editing"
    CONFIRMED = "confirmed"


ConfirmListener = Callable[[ConfirmedEstimate], object]


class EstimateSession:
    def __init__(
        self,
        catalog: Catalog,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
        airline: Optional[str] = None,
        aircraft: Optional[str] = None,
        pricing: Optional[PricingStrategy] = None,
        on_confirm: Optional[ConfirmListener] = None,
        session_id: Optional[str] = None,
    ):
        self.catalog = catalog
        self.pricing = pricing or default_pricing
        self.on_confirm = on_confirm
        self.session_id = session_id
        # Selections, recompute and confirm run under one lock; handlers may be on different threads
        self._lock = threading.RLock()

        # Unknown defaults fall back to the first catalog entry
        self.origin: Location = catalog.location(origin) or catalog.locations[0]
        self.destination: Location = catalog.location(destination) or catalog.locations[0]
        self.airline: Airline = catalog.airline(airline) or catalog.airlines[0]
        self.aircraft: Aircraft = catalog.aircraft_type(aircraft) or catalog.aircraft[0]
        self.departure_date: Optional[str] = None

        self.confirmed: Optional[ConfirmedEstimate] = None
        self.live: LiveEstimate = self.recompute()

    @property
    def state(self) -> SessionState:
        return SessionState.CONFIRMED if self.confirmed is not None else SessionState.EDITING

    def recompute(self) -> LiveEstimate:
        """Derive distance, then duration and fare from it, for the current selections."""
        with self._lock:
            distance_km = distance(self.origin, self.destination)
            duration_hours = duration(distance_km, self.aircraft)
            fare = self.pricing.price(distance_km, self.airline, self.catalog.airlines)
            live = LiveEstimate(
                distance_km=distance_km,
                duration_hours=duration_hours,
                fare_usd=fare,
            )
            self.live = live
        inc_counter("estimates_recomputed_total")
        return live

    def _reject(self, field: str, value) -> bool:
        log_event("selection_rejected", level="WARNING", session_id=self.session_id,
                  field=field, value=value)
        return False

    def _changed(self, field: str, value) -> bool:
        live = self.recompute()
        log_event("selection_changed", session_id=self.session_id, field=field, value=value,
                  distance_km=live.distance_km, fare_usd=live.fare_usd)
        return True

    def select_origin(self, code: str) -> bool:
        loc = self.catalog.location(code)
        if loc is None:
            return self._reject("origin", code)
        with self._lock:
            self.origin = loc
            return self._changed("origin", loc.code)

    def select_destination(self, code: str) -> bool:
        loc = self.catalog.location(code)
        if loc is None:
            return self._reject("destination", code)
        with self._lock:
            self.destination = loc
            return self._changed("destination", loc.code)

    def select_airline(self, name: str) -> bool:
        airline = self.catalog.airline(name)
        if airline is None:
            return self._reject("airline", name)
        with self._lock:
            self.airline = airline
            return self._changed("airline", airline.name)

    def select_aircraft(self, type_name: str) -> bool:
        aircraft = self.catalog.aircraft_type(type_name)
        if aircraft is None:
            return self._reject("aircraft", type_name)
        with self._lock:
            self.aircraft = aircraft
            return self._changed("aircraft", aircraft.type)

    def select_date(self, value: Union[str, date, None]) -> bool:
        departure_date = normalise_departure_date(value, tz=settings.TZ)
        with self._lock:
            self.departure_date = departure_date
            return self._changed("date", departure_date)

    def confirm(self) -> ConfirmedEstimate:
        """Freeze the live estimate and hand it to the confirmation listener.

        The snapshot is taken under the session lock, so it always pairs one
        ``LiveEstimate`` with the selections it was derived from. The listener
        runs after the lock is released and may block (a gateway call) without
        holding up further selections.
        """
        with self._lock:
            live = self.live
            snapshot = ConfirmedEstimate(
                distance_km=live.distance_km,
                duration_hours=live.duration_hours,
                fare_usd=live.fare_usd,
                origin_code=self.origin.code,
                destination_code=self.destination.code,
                airline=self.airline.name,
                aircraft=self.aircraft.type,
                departure_date=self.departure_date,
                confirmed_at=datetime.now(timezone.utc),
            )
            self.confirmed = snapshot
        inc_counter("estimates_confirmed_total")
        log_event("estimate_confirmed", session_id=self.session_id,
                  route=f"{snapshot.origin_code}-{snapshot.destination_code}",
                  fare_usd=snapshot.fare_usd, amount_due=snapshot.amount_due)

        if self.on_confirm is not None:
            # Outcome is the listener's business; it never feeds back into the session
            self.on_confirm(snapshot)
        return snapshot
