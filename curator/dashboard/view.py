from __future__ import annotations

from ..catalog.data_store import get_photos
from ..config import DEFAULT_SETTINGS
from ..ranking.scoring import percentile
from ..ranking.service import get_rankings, narrow, to_item
from ..shortlist.builder import build_shortlist
from .models import Coverage, DashboardState, DashboardView


def build_dashboard_view(
    state: DashboardState,
    top_n: int = DEFAULT_SETTINGS.top_n,
    preview_size: int = DEFAULT_SETTINGS.shortlist_preview,
) -> DashboardView:
    """Rank, filter and summarize the catalog for one session's state."""
    photos = get_photos()
    weights = state.weights.to_scoring_weights()
    normalized = weights.normalized()
    selected = set(state.selected_ids)

    rankings = get_rankings(weights, state.profile)
    filtered = narrow(rankings, state.filters, selected)

    items = [to_item(entry, selected) for entry in filtered[:top_n]]
    hero = items[0] if items else None

    total = len(photos)
    coverage = Coverage(
        filtered=len(filtered),
        total=total,
        percent=percentile(len(filtered) / total) if total else 0,
    )

    return DashboardView(
        weights=state.weights,
        influence={
            key: percentile(value)
            for key, value in normalized.model_dump().items()
        },
        profile=state.profile,
        filters=state.filters,
        items=items,
        hero=hero,
        hero_confidence=percentile(hero.score) if hero else 0,
        coverage=coverage,
        shortlist=build_shortlist(photos, selected, rankings, preview_size),
    )
