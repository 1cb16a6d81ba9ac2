from typing import Dict
from hanztravel.types import Location, LiveEstimate, ConfirmedEstimate
from hanztravel.utils.dates import format_duration_hours


def currency(amount: float) -> str:
    """USD display, e.g. 1234.5 -> "$1,234.50"."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_distance(distance_km: float) -> str:
    return f"{distance_km:.0f} km"


def format_hours(hours: float) -> str:
    return f"{hours:.2f} h"


def route_line(origin: Location, destination: Location) -> str:
    return f"{origin.city} ({origin.code}) → {destination.city} ({destination.code})"


def format_estimate(estimate: LiveEstimate) -> Dict[str, str]:
    return {
        "distance": format_distance(estimate.distance_km),
        "time": format_hours(estimate.duration_hours),
        "time_human": format_duration_hours(estimate.duration_hours),
        "fare": currency(estimate.fare_usd),
    }


def format_trip_summary(origin: Location, destination: Location, airline: str,
                        aircraft: str, departure_date: str | None,
                        estimate: LiveEstimate) -> str:
    tiles = format_estimate(estimate)
    lines = [
        "Trip summary",
        f"Route: {route_line(origin, destination)}",
        f"Airline: {airline}",
        f"Aircraft: {aircraft}",
    ]
    if departure_date:
        lines.append(f"Date: {departure_date}")
    lines += [
        "",
        f"Distance: {tiles['distance']} • Est. time: {tiles['time']} • Fare: {tiles['fare']}",
    ]
    return "\n".join(lines)


def format_amount_due(confirmed: ConfirmedEstimate) -> str:
    return f"Amount due today: {currency(confirmed.amount_due)}"
