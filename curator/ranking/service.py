from __future__ import annotations

import logging
import time

from ..analytics.store import record_event
from ..catalog.data_store import get_photos
from .cache import cache_get, cache_set
from .filters import apply_filters
from .models import (
    ClientProfile,
    FilterState,
    RankedEntry,
    RankingItem,
    RankingRequest,
    RankingResponse,
    ScoringWeights,
)
from .scoring import build_photo_rankings, score_to_label

logger = logging.getLogger(__name__)


def get_rankings(weights: ScoringWeights, profile: ClientProfile) -> list[RankedEntry]:
    """Rank the whole catalog for raw (un-normalized) weights and a profile."""
    start_time = time.time()
    normalized = weights.normalized()

    cache_inputs = {
        "weights": normalized.model_dump(),
        "profile": {
            "preferred_moods": sorted(set(profile.preferred_moods)),
            "required_shots": sorted(set(profile.required_shots)),
            "highlight_tags": sorted(set(profile.highlight_tags)),
            "minimum_faces": profile.minimum_faces,
        },
    }
    rankings = cache_get(cache_inputs)
    cache_hit = rankings is not None
    if rankings is None:
        photos = get_photos()
        rankings = build_photo_rankings(photos, normalized, profile)
        cache_set(cache_inputs, rankings)
        logger.debug("Ranked %d photos", len(rankings))

    elapsed_ms = round((time.time() - start_time) * 1000, 3)
    record_event("ranking", {
        "weights": normalized.model_dump(),
        "preferred_moods": list(profile.preferred_moods),
        "required_shots": list(profile.required_shots),
        "highlight_tags": list(profile.highlight_tags),
        "minimum_faces": profile.minimum_faces,
        "catalog_size": len(rankings),
        "response_time_ms": elapsed_ms,
        "cache_hit": cache_hit,
    })
    return rankings


def to_item(entry: RankedEntry, selected_ids: set[str] | frozenset[str] = frozenset()) -> RankingItem:
    return RankingItem(
        photo=entry.photo,
        score=round(entry.score, 4),
        label=score_to_label(entry.score),
        selected=entry.photo.id in selected_ids,
    )


def narrow(
    rankings: list[RankedEntry],
    filters: FilterState,
    selected_ids: set[str],
) -> list[RankedEntry]:
    """Apply the hard filters and log which ones were in play."""
    filtered = apply_filters(rankings, filters, selected_ids)
    if filters.is_active():
        record_event("filter", {
            "query": filters.query.strip(),
            "shot_types": list(filters.shot_types),
            "moods": list(filters.moods),
            "locations": list(filters.locations),
            "show_selected_only": filters.show_selected_only,
            "results": len(filtered),
        })
    return filtered


def rank_request(request: RankingRequest) -> RankingResponse:
    """Stateless ranking: explicit weights, profile and filters in one call."""
    rankings = get_rankings(request.weights, request.profile)
    selected = set(request.selected_ids)
    filtered = narrow(rankings, request.filters, selected)

    items = [to_item(entry, selected) for entry in filtered[: request.limit]]
    return RankingResponse(
        items=items,
        hero=items[0] if items else None,
        total_ranked=len(rankings),
        total_filtered=len(filtered),
    )
