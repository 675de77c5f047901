"""
Search Report — one query's grouped matches as JSON or an Excel sheet.
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path

from catalogo.config import CATEGORY_FIELD, CODE_FIELD, DESCRIPTION_FIELD, DEFAULT_DISPLAY_CAP
from catalogo.data.schemas import SearchResult
from catalogo.data.store import CatalogStore
from catalogo.excel.writer import ExcelWriter
from catalogo.search.pipeline import status_message


RESULT_COLS = [
    (CATEGORY_FIELD, "wrap", "Categoría SCIAN"),
    (CODE_FIELD, "code", "Actividad BMXID"),
    (DESCRIPTION_FIELD, "wrap", "Descripción"),
]


def generate_json(store: CatalogStore, query: str, max_results: int = DEFAULT_DISPLAY_CAP) -> dict:
    return store.search(query, max_results).to_dict()


def build_search_workbook(result: SearchResult) -> ExcelWriter:
    """Lay out a search result as a single styled sheet."""
    ew = ExcelWriter()
    ws = ew.add_sheet("Resultados")

    subtitle = f'Búsqueda: "{result.query.strip()}"  |  Generado {datetime.now():%Y-%m-%d %H:%M}'
    row = ew.write_title(ws, "Catálogo SCIAN → BMX", subtitle, note=status_message(result) or None)

    rows = [r.to_dict() for g in result.groups for r in g.items]
    ew.write_table(ws, row, RESULT_COLS, rows, group_key=CATEGORY_FIELD)
    ew.set_widths(ws, {1: 45, 3: 70})
    return ew


def write_search_workbook(result: SearchResult, output_path: str | Path) -> Path:
    return build_search_workbook(result).save(output_path)


def generate_excel(
    store: CatalogStore,
    output_path: str | Path,
    query: str,
    max_results: int = DEFAULT_DISPLAY_CAP,
) -> Path:
    return write_search_workbook(store.search(query, max_results), output_path)


def generate_excel_bytes(store: CatalogStore, query: str, max_results: int = DEFAULT_DISPLAY_CAP) -> bytes:
    """In-memory workbook for HTTP downloads; nothing is written to disk."""
    return build_search_workbook(store.search(query, max_results)).to_bytes()
