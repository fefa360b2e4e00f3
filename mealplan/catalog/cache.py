from __future__ import annotations

import hashlib
import json
import time
from typing import Any

from ..recipes.models import Recipe

_cache: dict[str, dict[str, Any]] = {}
_hits: int = 0
_misses: int = 0


def _make_key(query: dict) -> str:
    normalized = json.dumps(query, sort_keys=True, default=str)
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


def cache_get(query: dict, ttl: int) -> list[Recipe] | None:
    global _hits, _misses
    key = _make_key(query)
    entry = _cache.get(key)
    if entry and time.time() - entry["created_at"] < ttl:
        _hits += 1
        return list(entry["value"])
    if entry:
        del _cache[key]
    _misses += 1
    return None


def cache_set(query: dict, recipes: list[Recipe], ttl: int) -> None:
    now = time.time()
    for key in [k for k, e in _cache.items() if now - e["created_at"] >= ttl]:
        del _cache[key]
    # Recipes are frozen, so a shallow copy of the list is enough
    _cache[_make_key(query)] = {"value": tuple(recipes), "created_at": now}


def get_cache_stats() -> dict:
    total = _hits + _misses
    return {
        "size": len(_cache),
        "hits": _hits,
        "misses": _misses,
        "hit_rate": round(_hits / total * 100, 1) if total > 0 else 0.0,
    }


def clear_cache() -> None:
    global _hits, _misses
    _cache.clear()
    _hits = 0
    _misses = 0
