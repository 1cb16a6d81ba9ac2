from datetime import datetime, timezone

from hanztravel.formatters.summary import (
    currency, format_distance, format_hours, route_line, format_estimate,
    format_trip_summary, format_amount_due,
)
from hanztravel.types import LiveEstimate, ConfirmedEstimate


def test_currency():
    assert currency(208.95) == "$208.95"
    assert currency(1234.5) == "$1,234.50"
    assert currency(59) == "$59.00"


def test_distance_and_hours_display():
    assert format_distance(5539.7) == "5540 km"
    assert format_hours(6.5792) == "6.58 h"


def test_route_line(catalog):
    assert route_line(catalog.location("JFK"), catalog.location("LHR")) == "New York (JFK) → London (LHR)"


def test_format_estimate():
    tiles = format_estimate(LiveEstimate(distance_km=1000.0, duration_hours=1.25, fare_usd=208.95))
    assert tiles == {"distance": "1000 km", "time": "1.25 h", "time_human": "1h 15min", "fare": "$208.95"}


def test_trip_summary_includes_date_only_when_set(catalog):
    est = LiveEstimate(distance_km=0.0, duration_hours=0.0, fare_usd=79.0)
    jfk = catalog.location("JFK")
    without = format_trip_summary(jfk, jfk, "KLM", "Airbus A320", None, est)
    assert "Date:" not in without
    with_date = format_trip_summary(jfk, jfk, "KLM", "Airbus A320", "2026-12-24", est)
    assert "Date: 2026-12-24" in with_date
    assert "Fare: $79.00" in with_date


def test_amount_due_line():
    snap = ConfirmedEstimate(
        distance_km=1000.0, duration_hours=1.2, fare_usd=208.95,
        origin_code="JFK", destination_code="ORD", airline="Air France",
        aircraft="Airbus A320", confirmed_at=datetime.now(timezone.utc),
    )
    assert format_amount_due(snap) == "Amount due today: $209.00"
