"""
Pydantic request/response schemas for the API.
"""
from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str
    rows: int
    categories: int


class OptionsResponse(BaseModel):
    display_caps: list[int]
    default_display_cap: int
    debounce_ms: int
    copy_feedback_ms: int


class CatalogRecord(BaseModel):
    DescripcionCIAN: str
    ActividadBMX: str = ""
    DescripcionBMX: str = ""


class GroupResponse(BaseModel):
    DescripcionCIAN: str
    items: list[CatalogRecord]


class SearchResponse(BaseModel):
    query: str
    term: str
    total: int
    shown: int
    max_results: int
    truncated: bool
    message: str
    groups: list[GroupResponse]


class PreferencesResponse(BaseModel):
    theme: str


class PreferencesUpdate(BaseModel):
    theme: str = Field(..., description="light|dark")
