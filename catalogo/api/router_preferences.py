"""
Display preference endpoints (light/dark theme).
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from catalogo.api.dependencies import get_preferences
from catalogo.api.preferences import PreferenceStore
from catalogo.api.response_models import PreferencesResponse, PreferencesUpdate

router = APIRouter(prefix="/api/preferences", tags=["preferences"])


@router.get("", response_model=PreferencesResponse)
def read_preferences(prefs: PreferenceStore = Depends(get_preferences)):
    return PreferencesResponse(theme=prefs.get_theme())


@router.put("", response_model=PreferencesResponse)
def update_preferences(
    req: PreferencesUpdate,
    prefs: PreferenceStore = Depends(get_preferences),
):
    try:
        theme = prefs.set_theme(req.theme)
    except ValueError as exc:
        raise HTTPException(400, str(exc))
    return PreferencesResponse(theme=theme)
