from contextlib import asynccontextmanager
from typing import Optional, Dict, Any
from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse, Response
from dotenv import load_dotenv
from pydantic import BaseModel

from hanztravel.config import settings
from hanztravel.catalog.lookup import load_catalog
from hanztravel.formatters.summary import format_estimate, format_trip_summary, route_line, format_amount_due
from hanztravel.geo.map_preview import map_preview
from hanztravel.infrastructure.resilience import HealthChecker, CircuitState
from hanztravel.obs.logger import log_event
from hanztravel.obs.middleware import ObservabilityMiddleware
from hanztravel.payments.checkout import CheckoutCoordinator
from hanztravel.payments.paypal import PayPalClient
from hanztravel.session.estimate_session import EstimateSession
from hanztravel.session.store import SessionStore

load_dotenv()


class SelectionUpdate(BaseModel):
    origin: Optional[str] = None
    destination: Optional[str] = None
    airline: Optional[str] = None
    aircraft: Optional[str] = None
    date: Optional[str] = None


@asynccontextmanager
async def lifespan(api: FastAPI):
    log_event("startup", env=settings.APP_ENV)

    api.state.catalog = load_catalog(settings.CATALOG_PATH)
    api.state.checkout = CheckoutCoordinator(PayPalClient())

    def new_session(session_id: str) -> EstimateSession:
        return EstimateSession(
            api.state.catalog,
            origin=settings.DEFAULT_ORIGIN,
            destination=settings.DEFAULT_DESTINATION,
            airline=settings.DEFAULT_AIRLINE,
            aircraft=settings.DEFAULT_AIRCRAFT,
            # Looked up at confirm time so the gateway can be swapped at runtime
            on_confirm=lambda snapshot: api.state.checkout.start(snapshot, session_id=session_id),
            session_id=session_id,
        )

    api.state.sessions = SessionStore(
        new_session,
        ttl_seconds=settings.SESSION_TTL_SECONDS,
        on_evict=lambda session_id: api.state.checkout.forget(session_id),
    )

    yield

    log_event("shutdown")


api = FastAPI(
    title="HanzTravel Fare Estimator",
    version="1.0.0",
    lifespan=lifespan
)


def _session_or_404(request: Request, session_id: str) -> EstimateSession:
    session = request.app.state.sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Unknown or expired session")
    request.app.state.sessions.touch(session_id)
    return session


def session_view(session: EstimateSession) -> Dict[str, Any]:
    confirmed = session.confirmed
    return {
        "session_id": session.session_id,
        "state": session.state.value,
        "selections": {
            "origin": session.origin.code,
            "destination": session.destination.code,
            "airline": session.airline.name,
            "aircraft": session.aircraft.type,
            "date": session.departure_date,
        },
        "route": route_line(session.origin, session.destination),
        "live": session.live.model_dump(),
        "display": format_estimate(session.live),
        "summary": format_trip_summary(
            session.origin, session.destination, session.airline.name,
            session.aircraft.type, session.departure_date, session.live,
        ),
        "confirmed": confirmed.model_dump(mode="json") if confirmed else None,
        "amount_due": confirmed.amount_due if confirmed else None,
        "map_previews": [
            map_preview(session.origin, "Origin").model_dump(),
            map_preview(session.destination, "Destination").model_dump(),
        ],
    }


@api.get("/")
async def root():
    return {
        "service": "HanzTravel Fare Estimator",
        "version": "1.0.0",
        "status": "running",
        "currency": settings.CURRENCY,
    }


@api.get("/health")
async def health():
    return {"status": "healthy", "service": "hanztravel-estimator"}


@api.get("/health/detailed")
async def detailed_health(request: Request):
    health_checker = HealthChecker()
    health_checker.register_check("catalog", lambda: bool(request.app.state.catalog.locations))
    health_checker.register_check(
        "payment_gateway",
        lambda: request.app.state.checkout.breaker.state != CircuitState.OPEN,
    )
    results = await health_checker.run_checks()
    status_code = 200 if results["status"] == "healthy" else 503
    return JSONResponse(results, status_code=status_code)


@api.get("/metrics")
async def metrics(request: Request):
    from hanztravel.obs.metrics import get_metrics_snapshot
    snapshot = get_metrics_snapshot()
    checkout = getattr(request.app.state, "checkout", None)
    if checkout is not None:
        snapshot["circuit_breaker"] = checkout.breaker.get_state()
        snapshot["open_orders"] = len(checkout)
    sessions = getattr(request.app.state, "sessions", None)
    if sessions is not None:
        snapshot["active_sessions"] = len(sessions)
    return snapshot


@api.get("/catalog")
async def catalog(request: Request):
    return request.app.state.catalog.as_dict()


@api.post("/sessions", status_code=201)
async def create_session(request: Request):
    session = request.app.state.sessions.create()
    return session_view(session)


@api.get("/sessions/{session_id}")
async def get_session(request: Request, session_id: str):
    return session_view(_session_or_404(request, session_id))


@api.patch("/sessions/{session_id}")
async def update_session(request: Request, session_id: str, update: SelectionUpdate):
    session = _session_or_404(request, session_id)
    # Unknown identifiers are dropped by the session itself
    if update.origin is not None:
        session.select_origin(update.origin)
    if update.destination is not None:
        session.select_destination(update.destination)
    if update.airline is not None:
        session.select_airline(update.airline)
    if update.aircraft is not None:
        session.select_aircraft(update.aircraft)
    if "date" in update.model_fields_set:
        session.select_date(update.date)
    return session_view(session)


@api.delete("/sessions/{session_id}", status_code=204)
async def end_session(request: Request, session_id: str):
    _session_or_404(request, session_id)
    request.app.state.sessions.clear(session_id)
    return Response(status_code=204)


@api.post("/sessions/{session_id}/confirm")
def confirm_session(request: Request, session_id: str):
    session = _session_or_404(request, session_id)
    confirmed = session.confirm()
    order = request.app.state.checkout.current_order(session_id)
    view = session_view(session)
    view["amount_due_display"] = format_amount_due(confirmed)
    view["order"] = order.model_dump() if order else None
    return view


@api.post("/sessions/{session_id}/orders/{order_id}/capture")
def capture_order(request: Request, session_id: str, order_id: str):
    _session_or_404(request, session_id)
    checkout = request.app.state.checkout
    order = checkout.current_order(session_id)
    if order is None or order.order_id != order_id:
        raise HTTPException(status_code=404, detail="Unknown order for this session")
    result = checkout.complete(order, session_id=session_id)
    return result.model_dump()


# Apply middleware
app = ObservabilityMiddleware(api)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8001,
        reload=True,
        log_level="info"
    )
