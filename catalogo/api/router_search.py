"""
Search endpoints: grouped JSON results and Excel download.
"""
from __future__ import annotations

import io
import re

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse

from catalogo.data.store import CatalogStore
from catalogo.api.dependencies import get_store, parse_max_results
from catalogo.api.response_models import SearchResponse
from catalogo.reports import search_report

router = APIRouter(prefix="/api/search", tags=["search"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.get("", response_model=SearchResponse)
def search(
    q: str = Query("", description="Free-text keyword"),
    max_results: int = Depends(parse_max_results),
    store: CatalogStore = Depends(get_store),
):
    """Records whose SCIAN category contains q, grouped by category."""
    return search_report.generate_json(store, q, max_results)


def _safe_filename(q: str) -> str:
    slug = re.sub(r"[^\w-]+", "_", q.strip(), flags=re.ASCII)[:40].strip("_")
    return f"Catalogo_{slug or 'busqueda'}.xlsx"


@router.get("/excel")
def search_excel(
    q: str = Query("", description="Free-text keyword"),
    max_results: int = Depends(parse_max_results),
    store: CatalogStore = Depends(get_store),
):
    """Download the grouped matches as an xlsx built in memory."""
    buf = io.BytesIO(search_report.generate_excel_bytes(store, q, max_results))
    return StreamingResponse(
        buf,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={_safe_filename(q)}"},
    )
