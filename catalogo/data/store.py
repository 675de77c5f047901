"""
CatalogStore — In-memory catalog backed by pandas.

Loaded once at startup, read-only afterwards, searched on every query.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from catalogo.config import CATALOG_JSON, CATEGORY_FIELD, CATEGORY_NORM_COL, DEFAULT_DISPLAY_CAP, OUTPUT_FIELDS
from catalogo.data.loader import load_catalog_json
from catalogo.data.normalize import normalize_series
from catalogo.data.schemas import SearchResult


class CatalogStore:
    """SCIAN → BMX records with a precomputed normalized category column."""

    def __init__(self, path: Path = CATALOG_JSON) -> None:
        self.path = Path(path)
        self.df: pd.DataFrame = pd.DataFrame(columns=OUTPUT_FIELDS + [CATEGORY_NORM_COL])
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "CatalogStore":
        """Build a store from an already-cleaned frame (tests, CLI pipelines)."""
        store = cls()
        store._set_frame(df)
        return store

    def _set_frame(self, df: pd.DataFrame) -> None:
        df = df[OUTPUT_FIELDS].copy().reset_index(drop=True)
        df[CATEGORY_NORM_COL] = normalize_series(df[CATEGORY_FIELD])
        self.df = df
        self._loaded = True

    def load(self, path: Path | None = None) -> "CatalogStore":
        """Load the catalog JSON and precompute normalized categories."""
        if path is not None:
            self.path = Path(path)
        print(f"Loading catalog from {self.path}...")
        self._set_frame(load_catalog_json(self.path))
        print(f"  {self.row_count():,} registros, {len(self.categories()):,} categorías")
        return self

    def reload(self) -> "CatalogStore":
        return self.load()

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def search(self, query: str, max_results: int = DEFAULT_DISPLAY_CAP) -> SearchResult:
        """Filter, group and cap the catalog for one query."""
        from catalogo.search.pipeline import run_search
        return run_search(self.df, query, max_results)

    def records(self) -> list[dict]:
        """The catalog as the JSON handoff array."""
        return self.df[OUTPUT_FIELDS].to_dict("records")

    def categories(self) -> list[str]:
        """Unique categories in first-seen order."""
        if self.df.empty:
            return []
        return self.df[CATEGORY_FIELD].drop_duplicates().tolist()

    def row_count(self) -> int:
        return len(self.df)
