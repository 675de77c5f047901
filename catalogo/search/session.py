"""
SearchSession — per-client query state: debounced search, display cap, copy feedback.
"""
from __future__ import annotations

import asyncio
import sys
from typing import Callable, Optional

from catalogo.config import COPY_FEEDBACK_SECONDS, DEBOUNCE_MS, DEFAULT_DISPLAY_CAP, DISPLAY_CAP_OPTIONS
from catalogo.data.normalize import normalize_text
from catalogo.data.schemas import SearchResult, SearchState
from catalogo.data.store import CatalogStore
from catalogo.search.debounce import Debouncer


def validate_max_results(value) -> int:
    """Coerce a display cap and check it is one of DISPLAY_CAP_OPTIONS."""
    try:
        n = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid max_results: {value!r}")
    if n not in DISPLAY_CAP_OPTIONS:
        raise ValueError(f"max_results must be one of {list(DISPLAY_CAP_OPTIONS)}, got {n}")
    return n


class SearchSession:
    """Single-threaded query/result state driven by input events.

    idle → searching on non-empty input, searching → settled when the debounce
    window closes. Input arriving while searching or settled restarts the
    window; only the latest query is ever computed.
    """

    def __init__(
        self,
        store: CatalogStore,
        on_result: Callable[[SearchResult], None],
        on_state: Optional[Callable[[SearchState], None]] = None,
        on_feedback: Optional[Callable[[Optional[str]], None]] = None,
        delay: float = DEBOUNCE_MS / 1000,
        max_results: int = DEFAULT_DISPLAY_CAP,
        feedback_seconds: float = COPY_FEEDBACK_SECONDS,
    ) -> None:
        self.store = store
        self.on_result = on_result
        self.on_state = on_state
        self.on_feedback = on_feedback
        self.max_results = max_results
        self.feedback_seconds = feedback_seconds

        self.query = ""
        self.debounced_query = ""
        self.state = SearchState.IDLE
        self.result = SearchResult(max_results=max_results)
        self.copied_code: Optional[str] = None

        self._debouncer = Debouncer(self._settle, delay)
        self._feedback_handle: Optional[asyncio.TimerHandle] = None

    # ------------------------------------------------------------------
    # Query input
    # ------------------------------------------------------------------

    def on_input(self, raw: str) -> None:
        """Record a keystroke's worth of query text."""
        self.query = "" if raw is None else str(raw)
        if not normalize_text(self.query):
            self._debouncer.cancel()
            self.debounced_query = self.query
            self.result = SearchResult(query=self.query, max_results=self.max_results)
            self._set_state(SearchState.IDLE)
            self.on_result(self.result)
            return
        self._set_state(SearchState.SEARCHING)
        self._debouncer.trigger(self.query)

    def _settle(self, query: str) -> None:
        self.debounced_query = query
        self.result = self.store.search(query, self.max_results)
        self._set_state(SearchState.SETTLED)
        self.on_result(self.result)

    def set_max_results(self, value) -> int:
        """Change the display cap; a settled result is re-capped right away."""
        self.max_results = validate_max_results(value)
        if self.state == SearchState.SETTLED:
            self._settle(self.debounced_query)
        return self.max_results

    def _set_state(self, state: SearchState) -> None:
        if state == self.state:
            return
        self.state = state
        if self.on_state:
            self.on_state(state)

    # ------------------------------------------------------------------
    # Copy feedback
    # ------------------------------------------------------------------

    def mark_copied(self, code: str, ok: bool = True, error: str | None = None) -> None:
        """Show transient 'copied' feedback for code, cleared after a fixed interval.

        Failures are only logged.
        """
        if not ok:
            print(f"  Error al copiar {code!r}: {error or 'unknown error'}", file=sys.stderr)
            return

        if self._feedback_handle is not None:
            self._feedback_handle.cancel()
        self.copied_code = str(code)
        if self.on_feedback:
            self.on_feedback(self.copied_code)
        loop = asyncio.get_running_loop()
        self._feedback_handle = loop.call_later(self.feedback_seconds, self._clear_feedback)

    def _clear_feedback(self) -> None:
        self._feedback_handle = None
        self.copied_code = None
        if self.on_feedback:
            self.on_feedback(None)

    # ------------------------------------------------------------------

    @property
    def search_pending(self) -> bool:
        return self._debouncer.pending

    def close(self) -> None:
        """Drop any pending search or feedback timer."""
        self._debouncer.cancel()
        if self._feedback_handle is not None:
            self._feedback_handle.cancel()
            self._feedback_handle = None
