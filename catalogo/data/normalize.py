"""
Accent- and case-insensitive text normalization for catalog matching.
"""
from __future__ import annotations

import re
import unicodedata

import pandas as pd

_COMBINING_RE = re.compile("[\u0300-\u036f]")
_WS_RE = re.compile(r"\s+")


def as_text(value) -> str:
    """Coerce anything to text; None and NaN become ''."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value)


def normalize_text(value) -> str:
    """Lower-case, strip diacritics, collapse whitespace, trim.

    Never raises: missing and non-string values are treated as text first.
    """
    text = as_text(value).lower()
    text = unicodedata.normalize("NFD", text)
    text = _COMBINING_RE.sub("", text)
    text = _WS_RE.sub(" ", text)
    return text.strip()


def normalize_series(series: pd.Series) -> pd.Series:
    """Vectorized normalize_text over a Series of category strings."""
    if series.empty:
        return pd.Series([], index=series.index, dtype=object)
    s = series.map(as_text).str.lower()
    s = s.str.normalize("NFD")
    s = s.str.replace(_COMBINING_RE, "", regex=True)
    s = s.str.replace(_WS_RE, " ", regex=True)
    return s.str.strip()
