from __future__ import annotations

from collections import Counter
from typing import Any


def _top(counter: Counter[str], limit: int = 10) -> list[dict[str, Any]]:
    return [{"name": n, "count": c} for n, c in counter.most_common(limit)]


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    rankings = [e for e in events if e["type"] == "ranking"]
    filters = [e for e in events if e["type"] == "filter"]
    toggles = [e for e in events if e["type"] == "shortlist_toggle"]
    total = len(rankings)

    # Average ranking time
    times = [r["response_time_ms"] for r in rankings if "response_time_ms" in r]
    avg_time = round(sum(times) / len(times), 3) if times else 0.0

    # Profile usage
    mood_counter: Counter[str] = Counter()
    shot_counter: Counter[str] = Counter()
    tag_counter: Counter[str] = Counter()
    for r in rankings:
        mood_counter.update(r.get("preferred_moods", []) or [])
        shot_counter.update(r.get("required_shots", []) or [])
        tag_counter.update(r.get("highlight_tags", []) or [])

    # Filter usage rates
    filter_counts = {"shot_types": 0, "moods": 0, "locations": 0, "query": 0, "selected_only": 0}
    for f in filters:
        if f.get("shot_types"):
            filter_counts["shot_types"] += 1
        if f.get("moods"):
            filter_counts["moods"] += 1
        if f.get("locations"):
            filter_counts["locations"] += 1
        if f.get("query"):
            filter_counts["query"] += 1
        if f.get("show_selected_only"):
            filter_counts["selected_only"] += 1
    filter_usage = {
        k: round(v / total * 100, 1) if total else 0.0
        for k, v in filter_counts.items()
    }

    # Cache stats as seen by the ranking calls
    cache_hits = sum(1 for r in rankings if r.get("cache_hit"))
    cache_misses = total - cache_hits

    # Shortlist activity
    added = sum(1 for t in toggles if t.get("selected"))
    removed = len(toggles) - added

    return {
        "total_rankings": total,
        "avg_response_time_ms": avg_time,
        "top_preferred_moods": _top(mood_counter),
        "top_required_shots": _top(shot_counter),
        "top_highlight_tags": _top(tag_counter),
        "filter_usage": filter_usage,
        "cache_stats": {
            "hits": cache_hits,
            "misses": cache_misses,
            "hit_rate": round(cache_hits / total * 100, 1) if total else 0.0,
        },
        "shortlist_activity": {
            "toggles": len(toggles),
            "added": added,
            "removed": removed,
        },
    }
