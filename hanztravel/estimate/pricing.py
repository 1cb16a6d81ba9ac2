"""Fare pricing.

The default model is a flat base fare plus a per-km rate with a floor, scaled
by a carrier factor that cycles through three tiers by catalog position. It
sits behind ``PricingStrategy`` so a real yield engine can replace it.
"""

from typing import Protocol, Sequence

from hanztravel.types import Airline

BASE_FARE = 79.0
PER_KM = 0.12
MIN_FARE = 59.0
TIER_STEP = 0.05
TIER_COUNT = 3


class PricingStrategy(Protocol):
    def price(self, distance_km: float, airline: Airline, airlines: Sequence[Airline]) -> float:
        ...


def carrier_factor(index: int) -> float:
    """1.00x, 1.05x, 1.10x repeating by catalog index."""
    return 1 + (index % TIER_COUNT) * TIER_STEP


class IndexTierPricing:
    def __init__(self, base: float = BASE_FARE, per_km: float = PER_KM, floor: float = MIN_FARE):
        self.base = base
        self.per_km = per_km
        self.floor = floor

    def raw_fare(self, distance_km: float) -> float:
        return max(self.floor, self.base + distance_km * self.per_km)

    def price(self, distance_km: float, airline: Airline, airlines: Sequence[Airline]) -> float:
        if distance_km < 0:
            raise ValueError("distance_km must be non-negative")
        index = next((i for i, a in enumerate(airlines) if a.name == airline.name), -1)
        if index < 0:
            raise ValueError(f"Airline not in catalog: {airline.name}")
        return self.raw_fare(distance_km) * carrier_factor(index)


default_pricing = IndexTierPricing()


def price(distance_km: float, airline: Airline, airlines: Sequence[Airline]) -> float:
    return default_pricing.price(distance_km, airline, airlines)
