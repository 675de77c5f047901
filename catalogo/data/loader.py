"""
CSV → JSON catalog conversion (batch) and JSON catalog loading (runtime).
"""
from __future__ import annotations

import json
import os
import sys
import tempfile
from pathlib import Path

import pandas as pd

from catalogo.config import (
    SOURCE_CSV, CATALOG_JSON,
    CATEGORY_FIELD, CODE_FIELD, DESCRIPTION_FIELD, OUTPUT_FIELDS, CODE_SOURCE_FIELDS,
)


class CatalogLoadError(Exception):
    """The source file is missing or is not usable row data."""


# ---------------------------------------------------------------------------
# Source CSV
# ---------------------------------------------------------------------------

def read_source_csv(path: Path = SOURCE_CSV) -> pd.DataFrame:
    """Read the source CSV with every cell as a string, blank lines skipped."""
    path = Path(path)
    if not path.exists():
        raise CatalogLoadError(f"No se encontró: {path}")

    try:
        df = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8",
        )
    except pd.errors.EmptyDataError as exc:
        raise CatalogLoadError(f"CSV vacío: {path}") from exc
    except (pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise CatalogLoadError(f"Error al parsear CSV: {exc}") from exc

    # Short rows come back with NaN in the missing trailing cells; empty cells stay "".
    short = df.isna().any(axis=1)
    if short.any():
        n = int(short.to_numpy().argmax()) + 1
        raise CatalogLoadError(
            f"Error al parsear CSV: la fila {n} de {path.name} tiene menos campos que el encabezado"
        )

    df.columns = [str(c).strip() for c in df.columns]
    missing = [c for c in (CATEGORY_FIELD, DESCRIPTION_FIELD) if c not in df.columns]
    if not any(c in df.columns for c in CODE_SOURCE_FIELDS):
        missing.append(" o ".join(CODE_SOURCE_FIELDS))
    if missing:
        raise CatalogLoadError(f"Faltan columnas en {path.name}: {', '.join(missing)}")
    return df


def _text_column(df: pd.DataFrame, col: str) -> pd.Series:
    if col not in df.columns:
        return pd.Series("", index=df.index, dtype=object)
    return df[col].where(df[col].notna(), "").astype(str).str.strip()


def _code_column(df: pd.DataFrame) -> pd.Series:
    """First present code column per row, in CODE_SOURCE_FIELDS order."""
    code = pd.Series(pd.NA, index=df.index, dtype=object)
    for col in CODE_SOURCE_FIELDS:
        if col in df.columns:
            code = code.fillna(df[col])
    return code.fillna("").astype(str).str.strip()


def clean_records(df: pd.DataFrame) -> pd.DataFrame:
    """Project to the three output fields, trim, drop rows with no category."""
    out = pd.DataFrame({
        CATEGORY_FIELD: _text_column(df, CATEGORY_FIELD),
        CODE_FIELD: _code_column(df),
        DESCRIPTION_FIELD: _text_column(df, DESCRIPTION_FIELD),
    }, index=df.index)
    out = out[out[CATEGORY_FIELD] != ""]
    return out.reset_index(drop=True)


# ---------------------------------------------------------------------------
# JSON handoff
# ---------------------------------------------------------------------------

def write_json_atomic(payload, path: Path, indent: int | None = 2) -> Path:
    """Dump payload next to path and rename it into place."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=indent)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise
    return path


def write_catalog_json(df: pd.DataFrame, path: Path = CATALOG_JSON) -> Path:
    """Write the cleaned records as a JSON array; replaces the file atomically."""
    return write_json_atomic(df[OUTPUT_FIELDS].to_dict("records"), path)


def convert_csv_to_json(csv_path: Path = SOURCE_CSV, json_path: Path = CATALOG_JSON) -> int:
    """Batch step: source CSV → catalogo.json. Returns the row count written."""
    raw = read_source_csv(csv_path)
    clean = clean_records(raw)
    write_catalog_json(clean, json_path)
    return len(clean)


def _records_frame(rows: list) -> pd.DataFrame:
    """Build a catalog frame from arbitrary decoded JSON rows."""
    records = []
    skipped = 0
    for r in rows:
        if not isinstance(r, dict):
            skipped += 1
            continue
        records.append({f: r.get(f) for f in OUTPUT_FIELDS})
    if skipped:
        print(f"  Warning: skipped {skipped:,} non-object catalog entries")

    df = pd.DataFrame(records, columns=OUTPUT_FIELDS)
    for col in OUTPUT_FIELDS:
        df[col] = df[col].where(df[col].notna(), "").astype(str).str.strip()
    return df[df[CATEGORY_FIELD] != ""].reset_index(drop=True)


def load_catalog_json(path: Path = CATALOG_JSON) -> pd.DataFrame:
    """Load the JSON handoff file; anything unusable yields an empty catalog."""
    path = Path(path)
    empty = pd.DataFrame(columns=OUTPUT_FIELDS)
    if not path.exists():
        print(f"  Warning: catalog not found at {path} — starting empty", file=sys.stderr)
        return empty

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        print(f"  Error cargando catálogo: {exc}", file=sys.stderr)
        return empty

    if not isinstance(data, list):
        print(f"  Warning: {path.name} is not a JSON array — starting empty", file=sys.stderr)
        return empty

    return _records_frame(data)
