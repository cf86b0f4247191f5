from __future__ import annotations
import logging
from typing import List, Sequence, Tuple

from .config import PREFIX_WINDOW, MAX_QUERY_LEN
from .models import Record, SearchResult

log = logging.getLogger(__name__)


def lower_bound(seq: Sequence[Record], probe: Record) -> Tuple[bool, int]:
    """
    Return (found, i) where i is the smallest index with seq[i] >= probe
    and found tells whether seq[i] == probe. Empty input -> (False, 0).

    Halves the active range until one element is left, keeping the upper
    half whenever its first element is still below the probe, then
    resolves that last element. `seq` must be sorted.
    """
    size = len(seq)
    if size == 0:
        return False, 0
    base = 0
    while size > 1:
        half = size // 2
        mid = base + half
        # base stays on the last element known to be < probe (or on 0)
        if seq[mid] < probe:
            base = mid
        size -= half
    if seq[base] < probe:
        base += 1
    found = base < len(seq) and seq[base] == probe
    return found, base


def is_searchable(query: str) -> bool:
    """Queries the interactive front-ends are willing to run."""
    return 0 < len(query) <= MAX_QUERY_LEN


def search(query: str, store: Sequence[Record], *, window: int = PREFIX_WINDOW) -> SearchResult:
    """
    Prefix lookup over a headword-sorted sequence.

    The query is upper-cased; stored headwords are compared as stored.
    At most `window` elements after the lower bound are inspected, so a
    longer run of prefix matches is truncated to its first `window`
    entries. The scan stops at the first miss once the run has started.
    """
    probe = Record.probe(query.upper())
    exact, start = lower_bound(store, probe)

    prefix = probe.headword
    matches: List[Record] = []
    end = min(start + window, len(store))
    for i in range(start, end):
        rec = store[i]
        if rec.headword.startswith(prefix):
            matches.append(rec)
        elif matches:
            break

    log.debug("search %r: exact=%s matches=%d start=%d", prefix, exact, len(matches), start)
    return SearchResult(exact, matches)
