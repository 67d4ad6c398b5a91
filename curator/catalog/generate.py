from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path
from typing import List

import numpy as np
import pandas as pd

from .config import (
    CLIENT_NOTE_OPTIONS,
    DEFAULT_CATALOG_CONFIG,
    LOCATION_OPTIONS,
    MOOD_OPTIONS,
    SHOT_TYPE_OPTIONS,
    TAG_OPTIONS,
    CatalogConfig,
)

CANONICAL_COLUMNS: List[str] = [
    "id",
    "title",
    "url",
    "thumbnail_url",
    "shot_type",
    "mood",
    "location",
    "tags",
    "client_notes",
    "faces",
    "captured_at",
    "sharpness",
    "emotion",
    "client_relevance",
]

LIST_SEPARATOR = "|"

# Inclusive face-count range per shot type
_FACE_RANGES: dict[str, tuple[int, int]] = {
    "Portrait": (1, 2),
    "Candid": (1, 5),
    "Group": (4, 12),
    "Detail": (0, 0),
    "Landscape": (0, 2),
    "Action": (1, 6),
}

_WARM_MOODS = {"Joyful", "Romantic", "Dramatic"}


def _pick(rng: np.random.Generator, options: tuple[str, ...], low: int, high: int) -> list[str]:
    """Pick between ``low`` and ``high`` distinct options, preserving vocabulary order."""
    count = int(rng.integers(low, high + 1))
    if count == 0:
        return []
    indices = sorted(rng.choice(len(options), size=count, replace=False).tolist())
    return [options[i] for i in indices]


def _metric(value: float) -> float:
    return round(float(np.clip(value, 0.0, 1.0)), 3)


def generate_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> pd.DataFrame:
    """
    Build the synthetic shoot catalog.

    The same seed always yields the same frames, in capture order.
    """
    rng = np.random.default_rng(config.seed)
    captured = datetime.fromisoformat(config.shoot_start)

    rows: list[dict] = []
    for index in range(config.size):
        frame = index + 1
        shot_type = SHOT_TYPE_OPTIONS[int(rng.integers(len(SHOT_TYPE_OPTIONS)))]
        mood = MOOD_OPTIONS[int(rng.integers(len(MOOD_OPTIONS)))]
        location = LOCATION_OPTIONS[int(rng.integers(len(LOCATION_OPTIONS)))]

        low, high = _FACE_RANGES[shot_type]
        faces = int(rng.integers(low, high + 1))

        emotion = rng.beta(3.0, 2.0)
        if mood in _WARM_MOODS:
            emotion += 0.1

        captured += timedelta(seconds=int(rng.integers(20, 241)))

        rows.append({
            "id": f"frame-{frame:03d}",
            "title": f"{mood} {shot_type} at {location}",
            "url": f"https://picsum.photos/seed/curator-{frame}/1600/1200",
            "thumbnail_url": f"https://picsum.photos/seed/curator-{frame}/600/450",
            "shot_type": shot_type,
            "mood": mood,
            "location": location,
            "tags": LIST_SEPARATOR.join(_pick(rng, TAG_OPTIONS, 2, 5)),
            "client_notes": LIST_SEPARATOR.join(_pick(rng, CLIENT_NOTE_OPTIONS, 0, 2)),
            "faces": faces,
            "captured_at": captured.isoformat(),
            "sharpness": _metric(rng.beta(5.0, 2.0)),
            "emotion": _metric(emotion),
            "client_relevance": _metric(rng.beta(4.0, 3.0)),
        })

    return pd.DataFrame(rows, columns=CANONICAL_COLUMNS)


def run_generation(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> Path:
    """
    Generate the catalog and persist it as CSV for later sessions.
    """
    config.processed_dir.mkdir(parents=True, exist_ok=True)

    catalog = generate_catalog(config)

    output_path = config.processed_path
    catalog.to_csv(output_path, index=False)
    return output_path


if __name__ == "__main__":
    path = run_generation()
    print(f"Catalog generated. Saved to: {path}")
