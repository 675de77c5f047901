"""
FastAPI dependencies — CatalogStore / PreferenceStore singletons, cap parsing.
"""
from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Query

from catalogo.config import DEFAULT_DISPLAY_CAP
from catalogo.data.store import CatalogStore
from catalogo.api.preferences import PreferenceStore
from catalogo.search.session import validate_max_results

# ---------------------------------------------------------------------------
# Global singletons (set during startup)
# ---------------------------------------------------------------------------
_store: CatalogStore | None = None
_prefs: PreferenceStore | None = None


def set_store(store: CatalogStore) -> None:
    global _store
    _store = store


def get_store() -> CatalogStore:
    if _store is None or not _store.is_loaded:
        raise HTTPException(503, "Catalog not loaded yet")
    return _store


def set_preferences(prefs: PreferenceStore) -> None:
    global _prefs
    _prefs = prefs


def get_preferences() -> PreferenceStore:
    if _prefs is None:
        raise HTTPException(503, "Server not initialized yet")
    return _prefs


# ---------------------------------------------------------------------------
# Query params
# ---------------------------------------------------------------------------

def parse_max_results(
    max_results: Optional[int] = Query(None, description="100|200|500|1000"),
) -> int:
    """Display cap from the query string, restricted to the offered options."""
    if max_results is None:
        return DEFAULT_DISPLAY_CAP
    try:
        return validate_max_results(max_results)
    except ValueError as exc:
        raise HTTPException(400, str(exc))
