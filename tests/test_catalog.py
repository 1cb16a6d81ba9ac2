import json

import pytest

from hanztravel.catalog.lookup import Catalog, load_catalog


def test_default_catalog_sizes(catalog):
    assert len(catalog.locations) == 16
    assert len(catalog.airlines) == 10
    assert len(catalog.aircraft) == 5


def test_location_lookup_is_case_insensitive(catalog):
    loc = catalog.location("jfk")
    assert loc is not None
    assert loc.city == "New York"
    assert (loc.lat, loc.lon) == (40.6413, -73.7781)


def test_unknown_identifiers_return_none(catalog):
    assert catalog.location("XXX") is None
    assert catalog.location("") is None
    assert catalog.airline("Pan Am") is None
    assert catalog.aircraft_type("Concorde") is None


def test_airline_order_preserved(catalog):
    assert catalog.airlines[0].name == "American Airlines"
    assert catalog.airlines[4].name == "Air France"
    assert catalog.airlines[9].name == "KLM"


def test_aircraft_speeds(catalog):
    assert catalog.aircraft_type("Boeing 737-800").cruise_speed_kmh == 842


def test_duplicate_codes_rejected():
    with pytest.raises(ValueError):
        Catalog(
            [
                {"code": "AAA", "city": "A", "country": "X", "lat": 0, "lon": 0},
                {"code": "AAA", "city": "B", "country": "X", "lat": 1, "lon": 1},
            ],
            ["Air One"],
            [{"type": "Jet", "cruise_speed_kmh": 800}],
        )


def test_out_of_range_latitude_rejected():
    with pytest.raises(ValueError):
        Catalog(
            [{"code": "AAA", "city": "A", "country": "X", "lat": 91, "lon": 0}],
            ["Air One"],
            [{"type": "Jet", "cruise_speed_kmh": 800}],
        )


def test_non_positive_cruise_speed_is_fatal():
    with pytest.raises(ValueError):
        Catalog(
            [{"code": "AAA", "city": "A", "country": "X", "lat": 0, "lon": 0}],
            ["Air One"],
            [{"type": "Glider", "cruise_speed_kmh": 0}],
        )


def test_load_from_json(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({
        "locations": [
            {"code": "OSL", "city": "Oslo", "country": "Norway", "lat": 60.1976, "lon": 11.1004},
            {"code": "BGO", "city": "Bergen", "country": "Norway", "lat": 60.2934, "lon": 5.2181},
        ],
        "airlines": ["Norwegian", "Wideroe"],
        "aircraft": [{"type": "Dash 8", "cruise_speed_kmh": 500}],
    }), encoding="utf-8")

    cat = load_catalog(str(path))
    assert [l.code for l in cat.locations] == ["OSL", "BGO"]
    assert cat.airline("Wideroe").name == "Wideroe"


def test_load_catalog_defaults_without_path():
    assert load_catalog(None).location("SYD") is not None
