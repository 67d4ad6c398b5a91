from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events, record_event
from .catalog.data_store import get_options, get_photo, get_photos
from .config import DEFAULT_SETTINGS, configure_logging
from .dashboard.models import (
    MINIMUM_FACE_CHOICES,
    SLIDER_MAX,
    SLIDER_MIN,
    WEIGHT_LABELS,
    DashboardView,
    ProfileToggle,
    ProfileUpdate,
    SliderWeights,
)
from .dashboard.state import load_state, reset_state, save_state
from .dashboard.view import build_dashboard_view
from .ranking.cache import get_cache_stats
from .ranking.filters import toggle_value
from .ranking.models import ClientProfile, FilterState, Photo, RankingRequest, RankingResponse
from .ranking.service import get_rankings, rank_request
from .shortlist.builder import build_shortlist
from .shortlist.models import ShortlistSummary, ToggleResponse

configure_logging(DEFAULT_SETTINGS.log_level)

app = FastAPI(title="Capture Curator API", version="1.0.0")
app.add_middleware(SessionMiddleware, secret_key=DEFAULT_SETTINGS.session_secret)

_STATIC_DIR = Path(__file__).resolve().parent / "static"


# ── Catalog endpoints ────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    options = get_options()
    return {
        **options,
        "highlight_tag_choices": options["tags"][:12],
        "minimum_face_choices": list(MINIMUM_FACE_CHOICES),
        "slider": {"min": SLIDER_MIN, "max": SLIDER_MAX},
        "weight_labels": WEIGHT_LABELS,
        "catalog_size": len(get_photos()),
    }


@app.get("/photos/{photo_id}", response_model=Photo)
def photo(photo_id: str) -> Photo:
    found = get_photo(photo_id)
    if found is None:
        raise HTTPException(status_code=404, detail="Photo not found")
    return found


@app.post("/rankings", response_model=RankingResponse)
def rankings(body: RankingRequest) -> RankingResponse:
    return rank_request(body)


# ── Dashboard endpoints ──────────────────────────────────────────────────


@app.get("/dashboard", response_model=DashboardView)
def dashboard(request: Request) -> DashboardView:
    return build_dashboard_view(load_state(request.session))


@app.put("/dashboard/weights", response_model=DashboardView)
def update_weights(body: SliderWeights, request: Request) -> DashboardView:
    state = load_state(request.session)
    state.weights = body
    save_state(request.session, state)
    return build_dashboard_view(state)


@app.put("/dashboard/profile", response_model=DashboardView)
def update_profile(body: ProfileUpdate, request: Request) -> DashboardView:
    state = load_state(request.session)
    state.profile = ClientProfile.model_validate(body.model_dump())
    save_state(request.session, state)
    return build_dashboard_view(state)


@app.post("/dashboard/profile/toggle", response_model=DashboardView)
def toggle_profile(body: ProfileToggle, request: Request) -> DashboardView:
    state = load_state(request.session)
    current = getattr(state.profile, body.field.value)
    state.profile = state.profile.model_copy(
        update={body.field.value: toggle_value(current, body.value)},
    )
    save_state(request.session, state)
    return build_dashboard_view(state)


@app.put("/dashboard/filters", response_model=DashboardView)
def update_filters(body: FilterState, request: Request) -> DashboardView:
    state = load_state(request.session)
    state.filters = body
    save_state(request.session, state)
    return build_dashboard_view(state)


@app.post("/dashboard/reset", response_model=DashboardView)
def reset_dashboard(request: Request) -> DashboardView:
    return build_dashboard_view(reset_state(request.session))


# ── Shortlist endpoints ──────────────────────────────────────────────────


@app.get("/shortlist", response_model=ShortlistSummary)
def shortlist(request: Request) -> ShortlistSummary:
    state = load_state(request.session)
    ranked = get_rankings(state.weights.to_scoring_weights(), state.profile)
    return build_shortlist(
        get_photos(),
        set(state.selected_ids),
        ranked,
        DEFAULT_SETTINGS.shortlist_preview,
    )


@app.post("/shortlist/{photo_id}/toggle", response_model=ToggleResponse)
def toggle_shortlist(photo_id: str, request: Request) -> ToggleResponse:
    if get_photo(photo_id) is None:
        raise HTTPException(status_code=404, detail="Photo not found")

    state = load_state(request.session)
    state.selected_ids = toggle_value(state.selected_ids, photo_id)
    save_state(request.session, state)

    selected = photo_id in state.selected_ids
    record_event("shortlist_toggle", {"photo_id": photo_id, "selected": selected})
    return ToggleResponse(
        photo_id=photo_id,
        selected=selected,
        count=len(state.selected_ids),
    )


@app.delete("/shortlist", response_model=ShortlistSummary)
def clear_shortlist(request: Request) -> ShortlistSummary:
    state = load_state(request.session)
    state.selected_ids = []
    save_state(request.session, state)
    return build_shortlist(get_photos(), set(), [], DEFAULT_SETTINGS.shortlist_preview)


# ── Operational endpoints ────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()


# ── Static ───────────────────────────────────────────────────────────────


app.mount("/static", StaticFiles(directory=str(_STATIC_DIR)), name="static")


@app.get("/")
def root():
    return FileResponse(str(_STATIC_DIR / "index.html"))
