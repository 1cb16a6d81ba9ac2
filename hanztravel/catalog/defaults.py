"""Built-in reference tables: airports with coordinates, carriers, aircraft."""

from typing import List, Dict, Any

LOCATIONS: List[Dict[str, Any]] = [
    {"code": "JFK", "city": "New York", "country": "USA", "lat": 40.6413, "lon": -73.7781},
    {"code": "LAX", "city": "Los Angeles", "country": "USA", "lat": 33.9416, "lon": -118.4085},
    {"code": "SFO", "city": "San Francisco", "country": "USA", "lat": 37.6213, "lon": -122.379},
    {"code": "ORD", "city": "Chicago", "country": "USA", "lat": 41.9742, "lon": -87.9073},
    {"code": "LHR", "city": "London", "country": "UK", "lat": 51.4700, "lon": -0.4543},
    {"code": "CDG", "city": "Paris", "country": "France", "lat": 49.0097, "lon": 2.5479},
    {"code": "DXB", "city": "Dubai", "country": "UAE", "lat": 25.2532, "lon": 55.3657},
    {"code": "HND", "city": "Tokyo", "country": "Japan", "lat": 35.5494, "lon": 139.7798},
    {"code": "NRT", "city": "Tokyo-Narita", "country": "Japan", "lat": 35.7719, "lon": 140.3929},
    {"code": "SIN", "city": "Singapore", "country": "Singapore", "lat": 1.3644, "lon": 103.9915},
    {"code": "SYD", "city": "Sydney", "country": "Australia", "lat": -33.9399, "lon": 151.1753},
    {"code": "FRA", "city": "Frankfurt", "country": "Germany", "lat": 50.0379, "lon": 8.5622},
    {"code": "AMS", "city": "Amsterdam", "country": "Netherlands", "lat": 52.3105, "lon": 4.7683},
    {"code": "BCN", "city": "Barcelona", "country": "Spain", "lat": 41.2974, "lon": 2.0833},
    {"code": "GRU", "city": "Sao Paulo", "country": "Brazil", "lat": -23.4356, "lon": -46.4731},
    {"code": "JNB", "city": "Johannesburg", "country": "South Africa", "lat": -26.1337, "lon": 28.2420},
]

# Order matters: the fare model derives the carrier tier from the position
AIRLINES: List[str] = [
    "American Airlines",
    "Delta Air Lines",
    "United Airlines",
    "British Airways",
    "Air France",
    "Emirates",
    "Qatar Airways",
    "Singapore Airlines",
    "Lufthansa",
    "KLM",
]

# Average cruise speeds in km/h
AIRCRAFT: List[Dict[str, Any]] = [
    {"type": "Airbus A320", "cruise_speed_kmh": 828},
    {"type": "Airbus A350", "cruise_speed_kmh": 905},
    {"type": "Boeing 737-800", "cruise_speed_kmh": 842},
    {"type": "Boeing 777-300ER", "cruise_speed_kmh": 892},
    {"type": "Boeing 787-9", "cruise_speed_kmh": 903},
]
