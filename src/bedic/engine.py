# bedic/engine.py
from __future__ import annotations

import os
import logging
from typing import List, Optional

from . import config as CFG
from .models import AddResult, Record, SearchResult
from .search import search as prefix_search
from .store import DictionaryStore
from .DB.history import HistoryIndex
from .DB.storage import load_history, append_history, save_history

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the read-only DictionaryStore (two sorted sources, concatenated),
      - prefix search (search.search),
      - the HistoryIndex and its backing file.

    Public API (used by the REPL and Flask):
      * build(source_a, source_b, ...): read sources -> store, load history
      * from_texts(text_a, text_b):      same, from in-memory text
      * search(query):                   (exact, matches)
      * contains / add_to_history / history
      * shutdown()
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.store: Optional[DictionaryStore] = None
        self.history_index: HistoryIndex = HistoryIndex()
        self._history_path: Optional[str] = None

    # /* ~~~ Read both sources and the history file ~~~ */
    def build(
        self,
        source_a=None,
        source_b=None,
        *,
        history_path: Optional[str] = None,   # file to read from / append to
        read_history: bool = True,            # False -> start with empty history, still append
        verbose: bool = False,
    ) -> "Engine":
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)
            os.environ["BEDIC_VERBOSE"] = "1"

        source_a = source_a or CFG.SOURCE_A
        source_b = source_b or CFG.SOURCE_B
        self.store = DictionaryStore.from_files(source_a, source_b)
        self._attach_history(history_path, read_history)
        log.info("Engine build() complete: entries=%d history=%d",
                 len(self.store), len(self.history_index))
        return self

    @classmethod
    def from_texts(
        cls,
        text_a: str,
        text_b: str,
        *,
        history_path: Optional[str] = None,
        read_history: bool = True,
    ) -> "Engine":
        eng = cls()
        eng.store = DictionaryStore.build(text_a, text_b)
        eng._attach_history(history_path, read_history)
        return eng

    # ------------- query -------------

    def search(self, query: str) -> SearchResult:
        return prefix_search(query, self._require_store())

    # ------------- history -------------

    def contains(self, word: str) -> bool:
        return self.history_index.contains(word)

    def add_to_history(self, word: str, translation: str) -> AddResult:
        """
        Bookmark an entry. `translation` is the text currently displayed for
        the selection. New entries are appended to the history file when
        one is configured. A failed file write is logged and the entry stays
        bookmarked for this session only.
        """
        result = self.history_index.insert(word, translation)
        if result is AddResult.ADDED and self._history_path:
            try:
                append_history(self._history_path, Record(word, translation))
            except OSError as exc:
                log.error("Could not write %r to history file %s: %s", word, self._history_path, exc)
        return result

    def history(self, reverse: bool = True) -> List[Record]:
        """Newest first by default."""
        return self.history_index.snapshot_for_display(reverse=reverse)

    def can_show_history(self) -> bool:
        return len(self.history_index) > 0

    def export_history(self, path: str) -> int:
        """Write the whole history, oldest first, to `path`. Returns the count."""
        rows = self.history_index.snapshot_for_display(reverse=False)
        save_history(path, rows)
        log.info("Exported %d history entries to %s", len(rows), path)
        return len(rows)

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.store = None
        self.history_index = HistoryIndex()
        self._history_path = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _attach_history(self, history_path: Optional[str], read_history: bool) -> None:
        self._history_path = str(history_path) if history_path else None
        if self._history_path and read_history:
            self.history_index = HistoryIndex.from_records(load_history(self._history_path))
        else:
            log.debug("Do not read history file.")
            self.history_index = HistoryIndex()

    def _require_store(self) -> DictionaryStore:
        if self.store is None:
            raise RuntimeError("Engine not initialized. Call build() or from_texts() first.")
        return self.store
