from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from curator.ranking.models import Photo, PhotoMetrics


@pytest.fixture
def make_photo():
    """Factory for Photo records with neutral defaults."""
    counter = {"n": 0}

    def _make(
        photo_id: str | None = None,
        *,
        sharpness: float = 0.5,
        emotion: float = 0.5,
        client_relevance: float = 0.5,
        shot_type: str = "Detail",
        mood: str = "Serene",
        location: str = "Rooftop",
        tags: tuple[str, ...] = (),
        client_notes: tuple[str, ...] = (),
        faces: int = 0,
        title: str | None = None,
    ) -> Photo:
        counter["n"] += 1
        pid = photo_id or f"p{counter['n']}"
        return Photo(
            id=pid,
            title=title or f"Frame {pid}",
            url=f"https://example.test/{pid}.jpg",
            thumbnail_url=f"https://example.test/{pid}-thumb.jpg",
            shot_type=shot_type,
            mood=mood,
            location=location,
            tags=tags,
            client_notes=client_notes,
            faces=faces,
            captured_at=datetime(2024, 6, 15, 14, 0) + timedelta(minutes=counter["n"]),
            metrics=PhotoMetrics(
                sharpness=sharpness,
                emotion=emotion,
                client_relevance=client_relevance,
            ),
        )

    return _make
