from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import pandas as pd

from ..config import DEFAULT_SETTINGS
from ..ranking.cache import clear_cache
from ..ranking.models import Photo, PhotoMetrics
from .config import (
    DEFAULT_CATALOG_CONFIG,
    LOCATION_OPTIONS,
    MOOD_OPTIONS,
    SHOT_TYPE_OPTIONS,
    TAG_OPTIONS,
    CatalogConfig,
)
from .generate import CANONICAL_COLUMNS, LIST_SEPARATOR, generate_catalog

logger = logging.getLogger(__name__)

_df: pd.DataFrame | None = None
_photos: tuple[Photo, ...] | None = None
_by_id: dict[str, Photo] = {}


class CatalogError(ValueError):
    """Raised when a catalog file cannot be turned into photo records."""


def _split(value: object) -> list[str]:
    if pd.isna(value):
        return []
    return [part.strip() for part in str(value).split(LIST_SEPARATOR) if part.strip()]


def _read_csv(path: Path) -> pd.DataFrame:
    df = pd.read_csv(path)
    missing = [c for c in CANONICAL_COLUMNS if c not in df.columns]
    if missing:
        raise CatalogError(f"catalog {path} is missing columns: {', '.join(missing)}")
    return df


def _load() -> pd.DataFrame:
    # Explicit path first, then the file written by ``run_generation``
    path = DEFAULT_SETTINGS.catalog_path or DEFAULT_CATALOG_CONFIG.processed_path
    if path.is_file():
        logger.info("Loading photo catalog from %s", path)
        df = _read_csv(path)
    else:
        config = CatalogConfig(
            seed=DEFAULT_SETTINGS.catalog_seed,
            size=DEFAULT_SETTINGS.catalog_size,
        )
        logger.info("Generating photo catalog (seed=%d, size=%d)", config.seed, config.size)
        df = generate_catalog(config)

    # Pre-parse multi-valued columns into lists
    df["tags_list"] = df["tags"].apply(_split)
    df["client_notes_list"] = df["client_notes"].apply(_split)
    df["faces"] = df["faces"].fillna(0).astype(int)
    return df


def _to_photo(row: pd.Series) -> Photo:
    return Photo(
        id=str(row["id"]),
        title=str(row["title"]),
        url=str(row["url"]),
        thumbnail_url=str(row["thumbnail_url"]),
        shot_type=str(row["shot_type"]),
        mood=str(row["mood"]),
        location=str(row["location"]),
        tags=tuple(row["tags_list"]),
        client_notes=tuple(row["client_notes_list"]),
        faces=int(row["faces"]),
        captured_at=datetime.fromisoformat(str(row["captured_at"])),
        metrics=PhotoMetrics(
            sharpness=float(row["sharpness"]),
            emotion=float(row["emotion"]),
            client_relevance=float(row["client_relevance"]),
        ),
    )


def get_dataframe() -> pd.DataFrame:
    """Return the in-memory catalog DataFrame, loading it on first call."""
    global _df
    if _df is None:
        _df = _load()
    return _df


def get_photos() -> tuple[Photo, ...]:
    """Return the immutable Photo records in catalog order."""
    global _photos
    if _photos is None:
        df = get_dataframe()
        _photos = tuple(_to_photo(row) for _, row in df.iterrows())
        _by_id.clear()
        _by_id.update({p.id: p for p in _photos})
    return _photos


def get_photo(photo_id: str) -> Photo | None:
    get_photos()
    return _by_id.get(photo_id)


def _merge_options(configured: tuple[str, ...], present: list[str]) -> list[str]:
    merged = list(configured)
    merged.extend(sorted(v for v in set(present) if v not in configured))
    return merged


def get_options() -> dict[str, list[str]]:
    """Chip vocabularies: configured options first, then any extra values in the catalog."""
    df = get_dataframe()
    tags = [t for tl in df["tags_list"] for t in tl]
    return {
        "moods": _merge_options(MOOD_OPTIONS, df["mood"].dropna().tolist()),
        "shot_types": _merge_options(SHOT_TYPE_OPTIONS, df["shot_type"].dropna().tolist()),
        "locations": _merge_options(LOCATION_OPTIONS, df["location"].dropna().tolist()),
        "tags": _merge_options(TAG_OPTIONS, tags),
    }


def reset_catalog() -> None:
    global _df, _photos
    _df = None
    _photos = None
    _by_id.clear()
    # Cached rankings refer to the old records
    clear_cache()
