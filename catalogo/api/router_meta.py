"""
Meta endpoints: health, options, full catalog, reload.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from catalogo.config import DISPLAY_CAP_OPTIONS, DEFAULT_DISPLAY_CAP, DEBOUNCE_MS, COPY_FEEDBACK_SECONDS
from catalogo.data.store import CatalogStore
from catalogo.api.dependencies import get_store
from catalogo.api.response_models import CatalogRecord, HealthResponse, OptionsResponse

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: CatalogStore = Depends(get_store)):
    return HealthResponse(
        status="ok",
        rows=store.row_count(),
        categories=len(store.categories()),
    )


@router.get("/options", response_model=OptionsResponse)
def options():
    return OptionsResponse(
        display_caps=list(DISPLAY_CAP_OPTIONS),
        default_display_cap=DEFAULT_DISPLAY_CAP,
        debounce_ms=DEBOUNCE_MS,
        copy_feedback_ms=int(COPY_FEEDBACK_SECONDS * 1000),
    )


@router.get("/catalog", response_model=list[CatalogRecord])
def catalog(store: CatalogStore = Depends(get_store)):
    """The whole catalog in the catalogo.json shape."""
    return store.records()


@router.post("/reload")
def reload_catalog(store: CatalogStore = Depends(get_store)):
    """Re-read catalogo.json from disk."""
    store.reload()
    print(f"  Reload complete — {store.row_count():,} rows")
    return {"status": "ok", "rows": store.row_count()}
