from hanztravel.types import Aircraft


def duration(distance_km: float, aircraft: Aircraft) -> float:
    """Time of flight in hours at the aircraft's cruise speed. Not rounded."""
    if aircraft.cruise_speed_kmh <= 0:
        raise ValueError(f"Invalid cruise speed for {aircraft.type}: {aircraft.cruise_speed_kmh}")
    if distance_km < 0:
        raise ValueError("distance_km must be non-negative")
    return distance_km / aircraft.cruise_speed_kmh
