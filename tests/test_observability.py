import json

from hanztravel.obs.context import session_id_var, clear_context
from hanztravel.obs.logger import log_event
from hanztravel.obs.metrics import inc_counter, record_timing, get_metrics_snapshot, get_counter
from hanztravel.obs.middleware import route_template


def test_log_event_is_single_json_line(capsys):
    log_event("selection_changed", field="origin", value="LAX", fare_usd=123.456789)
    line = capsys.readouterr().out.strip()
    payload = json.loads(line)
    assert payload["event"] == "selection_changed"
    assert payload["level"] == "INFO"
    assert payload["fare_usd"] == 123.4568


def test_log_event_picks_up_session_context(capsys):
    session_id_var.set("abc123")
    try:
        log_event("estimate_confirmed")
        payload = json.loads(capsys.readouterr().out.strip())
        assert payload["session_id"] == "abc123"
    finally:
        clear_context()


def test_counters_and_histograms():
    inc_counter("payments_total", {"outcome": "captured"})
    inc_counter("payments_total", {"outcome": "captured"})
    record_timing("request_latency_ms", 42.0, {"route": "/health"})
    record_timing("request_latency_ms", 5000.0, {"route": "/health"})

    assert get_counter("payments_total", {"outcome": "captured"}) == 2
    snap = get_metrics_snapshot()
    hist = next(h for h in snap["histograms"] if h["name"] == "request_latency_ms")
    assert sum(hist["counts"]) == 2
    assert hist["counts"][-1] == 1
    assert hist["sum_ms"] == 5042.0


def test_route_template():
    assert route_template("/sessions/abc") == "/sessions/{session_id}"
    assert route_template("/sessions/abc/orders/O-1/capture") == "/sessions/{session_id}/orders/{order_id}/capture"
    assert route_template("/sessions") == "/sessions"
