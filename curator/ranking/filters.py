from __future__ import annotations

from collections.abc import Collection, Iterable

from .models import FilterState, Photo, RankedEntry


def toggle_value(values: Iterable[str], value: str) -> list[str]:
    """Insert ``value`` if absent, remove it if present. Order is preserved."""
    current = list(dict.fromkeys(values))
    if value in current:
        current.remove(value)
    else:
        current.append(value)
    return current


def matches_query(photo: Photo, query: str) -> bool:
    """Case-insensitive substring match over tags, client notes and title."""
    needle = query.strip().lower()
    if not needle:
        return True
    if any(needle in tag.lower() for tag in photo.tags):
        return True
    if any(needle in note.lower() for note in photo.client_notes):
        return True
    return needle in photo.title.lower()


def apply_filters(
    entries: Iterable[RankedEntry],
    filters: FilterState,
    selected_ids: Collection[str] = (),
) -> list[RankedEntry]:
    """Narrow a ranking with the active chips, search text and selection toggle."""
    kept: list[RankedEntry] = []
    for entry in entries:
        photo = entry.photo
        if filters.show_selected_only and photo.id not in selected_ids:
            continue
        if filters.shot_types and photo.shot_type not in filters.shot_types:
            continue
        if filters.moods and photo.mood not in filters.moods:
            continue
        if filters.locations and photo.location not in filters.locations:
            continue
        if not matches_query(photo, filters.query):
            continue
        kept.append(entry)
    return kept
