"""
Ranking cache.

Rankings depend only on the normalized weights and the client profile, so a
slider that returns to an earlier position reuses the earlier ordering.
"""
from __future__ import annotations

import hashlib
import json
import logging
import time
from typing import Any

from ..config import DEFAULT_SETTINGS

logger = logging.getLogger(__name__)

_entries: dict[str, tuple[float, Any]] = {}
_stats = {"hits": 0, "misses": 0, "expired": 0}


def make_key(inputs: dict[str, Any]) -> str:
    encoded = json.dumps(inputs, sort_keys=True, default=str).encode()
    return hashlib.sha256(encoded).hexdigest()[:16]


def cache_get(inputs: dict[str, Any], ttl: float = DEFAULT_SETTINGS.cache_ttl) -> Any | None:
    key = make_key(inputs)
    entry = _entries.get(key)
    if entry is not None:
        created_at, value = entry
        if time.time() - created_at < ttl:
            _stats["hits"] += 1
            return value
        del _entries[key]
        _stats["expired"] += 1
        logger.debug("Ranking cache entry %s expired", key)
    _stats["misses"] += 1
    return None


def cache_set(inputs: dict[str, Any], value: Any) -> None:
    _entries[make_key(inputs)] = (time.time(), value)


def get_cache_stats() -> dict:
    lookups = _stats["hits"] + _stats["misses"]
    return {
        "size": len(_entries),
        "hits": _stats["hits"],
        "misses": _stats["misses"],
        "expired": _stats["expired"],
        "hit_rate": round(_stats["hits"] / lookups * 100, 1) if lookups else 0.0,
    }


def clear_cache() -> None:
    _entries.clear()
    for name in _stats:
        _stats[name] = 0
