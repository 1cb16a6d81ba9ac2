from datetime import date, datetime

import pytz

from hanztravel.utils.dates import to_iso_date, normalise_departure_date, format_duration_hours

# Monday 2026-10-19
BASE = datetime(2026, 10, 19, 9, 0, tzinfo=pytz.UTC)


def test_weekday_names_resolve_forward():
    assert to_iso_date("next Friday", base_date=BASE) == "2026-10-23"
    assert to_iso_date("monday", base_date=BASE) == "2026-10-26"
    assert to_iso_date("this monday", base_date=BASE) == "2026-10-19"


def test_relative_words():
    assert to_iso_date("today", base_date=BASE) == "2026-10-19"
    assert to_iso_date("tomorrow", base_date=BASE) == "2026-10-20"


def test_iso_passthrough():
    assert to_iso_date("2026-11-19", base_date=BASE) == "2026-11-19"


def test_normalise_departure_date_variants():
    assert normalise_departure_date(None) is None
    assert normalise_departure_date("   ") is None
    assert normalise_departure_date(date(2026, 12, 1)) == "2026-12-01"
    assert normalise_departure_date(datetime(2026, 12, 1, 8, 30)) == "2026-12-01"
    assert normalise_departure_date("tomorrow", base_date=BASE) == "2026-10-20"
    assert normalise_departure_date("TBD", base_date=BASE) == "TBD"


def test_format_duration_hours():
    assert format_duration_hours(6.58) == "6h 35min"
    assert format_duration_hours(2.0) == "2h"
    assert format_duration_hours(0.25) == "15min"
    assert format_duration_hours(-1) == ""
