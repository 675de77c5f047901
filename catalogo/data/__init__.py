"""Catalog loading, normalization, and in-memory store."""
from .loader import CatalogLoadError, read_source_csv, clean_records, convert_csv_to_json, load_catalog_json
from .normalize import normalize_text, normalize_series
from .schemas import Record, Group, SearchResult, SearchState
from .store import CatalogStore
