# bedic/DB/history.py
from __future__ import annotations
import logging
import threading
from typing import Iterable, List, Optional

from ..models import AddResult, Record
from ..search import lower_bound

log = logging.getLogger(__name__)


class HistoryIndex:
    """
    Bookmarked entries held in two views of the same multiset:
      - sorted:        headword order, for binary-search duplicate checks
      - chronological: insertion order, for display

    Neither list is exposed. Each view has its own lock; an operation that
    needs both takes them in the fixed order sorted -> chronological.
    Entries are only ever appended.
    """

    def __init__(self) -> None:
        self._sorted: List[Record] = []
        self._chronological: List[Record] = []
        self._sorted_lock = threading.Lock()
        self._chrono_lock = threading.Lock()

    @classmethod
    def from_records(cls, records: Iterable[Record]) -> "HistoryIndex":
        """
        Seed both views; `records` is taken as chronological order. Only the
        first entry per headword is kept.
        """
        inst = cls()
        seen: set[Record] = set()
        for rec in records:
            if rec in seen:
                log.warning("history: dropping repeated entry %r", rec.headword)
                continue
            seen.add(rec)
            inst._chronological.append(rec)
        inst._sorted = sorted(inst._chronological)
        return inst

    # ---- Query ----
    def _find(self, word: str) -> tuple[bool, int]:
        # caller holds _sorted_lock
        return lower_bound(self._sorted, Record.probe(word))

    def contains(self, word: str) -> bool:
        with self._sorted_lock:
            found, _ = self._find(word)
        return found

    def lookup(self, word: str) -> Optional[Record]:
        """The stored entry for `word`, or None."""
        with self._sorted_lock:
            found, i = self._find(word)
            return self._sorted[i] if found else None

    def snapshot_for_display(self, reverse: bool = False) -> List[Record]:
        with self._chrono_lock:
            out = list(self._chronological)
        if reverse:
            out.reverse()
        return out

    # ---- Mutation ----
    def insert(self, word: str, translation: str) -> AddResult:
        """
        Append {word, translation} to both views unless the headword is
        already present. The presence check and the append happen under
        the same locks, so two callers cannot both add the same word.
        """
        with self._sorted_lock, self._chrono_lock:
            found, _ = self._find(word)
            if found:
                log.debug("history insert skipped, duplicate: %r", word)
                return AddResult.DUPLICATE
            rec = Record(word, translation)
            self._chronological.append(rec)
            self._sorted.append(rec)
            self._sorted.sort()
            log.debug("history insert: %r (size=%d)", word, len(self._sorted))
            return AddResult.ADDED

    def __len__(self) -> int:
        with self._sorted_lock:
            return len(self._sorted)
