"""
Ranking engine.

Scores every photo as a weighted sum of three criteria and orders the
catalog by that score. Profile mismatches soften a photo's client-alignment
sub-score; they never remove it from the ranking. Hard narrowing is left to
``filters.apply_filters``.
"""
from __future__ import annotations

from collections.abc import Sequence

from .models import ClientProfile, Photo, RankedEntry, ScoringWeights

MOOD_BONUS = 0.15
TAG_OVERLAP_BONUS = 0.2
SHOT_MISMATCH_DAMPING = 0.6
FACE_SHORTFALL_DAMPING = 0.7

SCORE_LABELS: list[tuple[float, str]] = [
    (0.86, "Hero candidate"),
    (0.72, "Strong pick"),
    (0.6, "Consider"),
]


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def client_alignment_score(photo: Photo, profile: ClientProfile) -> float:
    """Composite client-alignment sub-score, before weighting."""
    score = photo.metrics.client_relevance

    if photo.mood in profile.preferred_moods:
        score += MOOD_BONUS

    highlight = set(profile.highlight_tags)
    if highlight:
        overlap = len(highlight.intersection(photo.tags)) / len(highlight)
        score += TAG_OVERLAP_BONUS * overlap

    if profile.required_shots and photo.shot_type not in profile.required_shots:
        score *= SHOT_MISMATCH_DAMPING

    if photo.faces < profile.minimum_faces:
        score *= FACE_SHORTFALL_DAMPING

    return _clamp(score)


def score_photo(photo: Photo, weights: ScoringWeights, profile: ClientProfile) -> float:
    technical = weights.technical * photo.metrics.sharpness
    storytelling = weights.storytelling * photo.metrics.emotion
    alignment = weights.client_alignment * client_alignment_score(photo, profile)
    return _clamp(technical + storytelling + alignment)


def build_photo_rankings(
    photos: Sequence[Photo],
    weights: ScoringWeights,
    profile: ClientProfile,
) -> list[RankedEntry]:
    """Rank ``photos`` best-first.

    ``weights`` must already be normalized. Every photo appears exactly once;
    equal scores keep their catalog order.
    """
    if not weights.is_normalized():
        raise ValueError("scoring weights must be normalized before ranking")

    entries = [
        RankedEntry(photo=photo, score=score_photo(photo, weights, profile))
        for photo in photos
    ]
    # sorted() is stable, so ties stay in catalog order
    return sorted(entries, key=lambda entry: entry.score, reverse=True)


def score_to_label(score: float) -> str:
    for threshold, label in SCORE_LABELS:
        if score > threshold:
            return label
    return "Hold"


def percentile(value: float) -> int:
    return round(value * 100)
