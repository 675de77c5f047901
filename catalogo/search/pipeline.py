"""
Search pipeline: normalize → filter → group by category → cap for display.
"""
from __future__ import annotations

import pandas as pd

from catalogo.config import (
    CATEGORY_FIELD, CATEGORY_NORM_COL, DEFAULT_DISPLAY_CAP, NO_CATEGORY_LABEL, OUTPUT_FIELDS,
)
from catalogo.data.normalize import normalize_series, normalize_text
from catalogo.data.schemas import Group, Record, SearchResult


# ---------------------------------------------------------------------------
# Filter
# ---------------------------------------------------------------------------

def filter_catalog(df: pd.DataFrame, term: str) -> pd.DataFrame:
    """Rows whose normalized category contains term (plain substring).

    term is expected to be normalized already; an empty term matches nothing.
    """
    if not term or df.empty:
        return df.iloc[0:0]
    if CATEGORY_NORM_COL in df.columns:
        norm = df[CATEGORY_NORM_COL]
    else:
        norm = normalize_series(df[CATEGORY_FIELD])
    mask = norm.str.contains(term, regex=False, na=False)
    return df[mask]


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------

def group_by_category(df: pd.DataFrame) -> list[Group]:
    """Partition rows by original category text in first-seen order."""
    if df.empty:
        return []
    rows = df[OUTPUT_FIELDS].to_dict("records")
    groups: dict[str, Group] = {}
    for row in rows:
        rec = Record.from_dict(row)
        key = rec.category or NO_CATEGORY_LABEL
        if key not in groups:
            groups[key] = Group(category=key)
        groups[key].items.append(rec)
    return list(groups.values())


# ---------------------------------------------------------------------------
# Cap
# ---------------------------------------------------------------------------

def cap_groups(groups: list[Group], max_results: int) -> tuple[list[Group], int]:
    """Keep whole groups in order until max_results records are taken.

    The group that crosses the limit is cut short; later groups are dropped.
    Returns (capped_groups, shown).
    """
    if max_results < 1:
        raise ValueError(f"max_results must be positive, got {max_results}")

    out: list[Group] = []
    count = 0
    for g in groups:
        room = max_results - count
        items = g.items[:room]
        if items:
            out.append(Group(category=g.category, items=list(items)))
            count += len(items)
        if count >= max_results:
            break
    return out, count


# ---------------------------------------------------------------------------
# Full pass
# ---------------------------------------------------------------------------

def run_search(df: pd.DataFrame, query: str, max_results: int = DEFAULT_DISPLAY_CAP) -> SearchResult:
    """Filter, group and cap df for query."""
    if max_results < 1:
        raise ValueError(f"max_results must be positive, got {max_results}")
    raw = "" if query is None else str(query)
    term = normalize_text(raw)
    if not term:
        return SearchResult(query=raw, term="", max_results=max_results)

    matches = filter_catalog(df, term)
    groups, shown = cap_groups(group_by_category(matches), max_results)
    return SearchResult(
        query=raw,
        term=term,
        groups=groups,
        total=len(matches),
        shown=shown,
        max_results=max_results,
    )


def status_message(result: SearchResult) -> str:
    """Human-readable status line for a result."""
    if not result.term:
        return ""
    if result.total == 0:
        return f'No se encontraron resultados para "{result.query.strip()}"'
    msg = f"Encontradas {result.total:,} coincidencias"
    if result.truncated:
        msg += f". Mostrando los primeros {result.shown:,}"
    return msg
