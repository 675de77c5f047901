"""
Record, group and search-result schemas.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from catalogo.config import CATEGORY_FIELD, CODE_FIELD, DESCRIPTION_FIELD
from catalogo.data.normalize import as_text


class SearchState(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    SETTLED = "settled"


@dataclass(frozen=True)
class Record:
    """One SCIAN category → BMX activity correspondence."""
    category: str
    code: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, row: dict) -> "Record":
        return cls(
            category=as_text(row.get(CATEGORY_FIELD)),
            code=as_text(row.get(CODE_FIELD)),
            description=as_text(row.get(DESCRIPTION_FIELD)),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            CATEGORY_FIELD: self.category,
            CODE_FIELD: self.code,
            DESCRIPTION_FIELD: self.description,
        }


@dataclass
class Group:
    """Records sharing one category, in first-seen order."""
    category: str
    items: list[Record] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            CATEGORY_FIELD: self.category,
            "items": [r.to_dict() for r in self.items],
        }


@dataclass
class SearchResult:
    """Grouped, capped view of the records matching one query."""
    query: str = ""
    term: str = ""
    groups: list[Group] = field(default_factory=list)
    total: int = 0               # matches before capping
    shown: int = 0               # records in groups
    max_results: int = 0

    @property
    def truncated(self) -> bool:
        return self.total > self.shown

    @property
    def is_empty(self) -> bool:
        return not self.groups

    def codes(self) -> list[str]:
        return [r.code for g in self.groups for r in g.items]

    def to_dict(self) -> dict:
        from catalogo.search.pipeline import status_message
        return {
            "query": self.query,
            "term": self.term,
            "total": self.total,
            "shown": self.shown,
            "max_results": self.max_results,
            "truncated": self.truncated,
            "message": status_message(self),
            "groups": [g.to_dict() for g in self.groups],
        }
