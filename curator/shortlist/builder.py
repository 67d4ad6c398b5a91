from __future__ import annotations

from collections.abc import Collection, Sequence

from ..ranking.models import Photo, RankedEntry
from ..ranking.scoring import score_to_label
from .models import ShortlistItem, ShortlistSummary

# Shown on a shortlisted card whose photo has no current score
DISPLAY_SCORE_DEFAULT = 0.5


def build_shortlist(
    photos: Sequence[Photo],
    selected_ids: Collection[str],
    rankings: Sequence[RankedEntry],
    preview_size: int = 9,
) -> ShortlistSummary:
    """
    Summarize the shortlist against the current ranking.

    Shortlisted photos keep catalog order, not ranking order. The average
    alignment counts an unranked photo as 0.
    """
    scores = {entry.photo.id: entry.score for entry in rankings}
    chosen = [photo for photo in photos if photo.id in selected_ids]

    if chosen:
        average = sum(scores.get(photo.id, 0.0) for photo in chosen) / len(chosen)
    else:
        average = 0.0

    preview: list[ShortlistItem] = []
    for photo in chosen[:preview_size]:
        score = scores.get(photo.id, DISPLAY_SCORE_DEFAULT)
        preview.append(ShortlistItem(
            photo=photo,
            score=round(score, 4),
            label=score_to_label(score),
        ))

    return ShortlistSummary(
        count=len(chosen),
        average_alignment=round(min(1.0, max(0.0, average)), 4),
        selected_ids=[photo.id for photo in chosen],
        preview=preview,
        remaining=max(0, len(chosen) - preview_size),
    )
