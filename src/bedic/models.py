# src/bedic/models.py
"""
Data models for the dictionary engine.

- Record: one dictionary (or history) entry, ordered by headword only.
- SearchResult: what a prefix lookup returns.
- AddResult: outcome of a history insert.

These classes carry no business logic beyond ordering.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple


@dataclass(frozen=True, order=True, slots=True)
class Record:
    """
    A (headword, translation block) pair.

    Attributes
    ----------
    headword : str
        The lookup key, stored exactly as found in the source text.
    translation : str
        The full displayed text. For dictionary records this is the whole
        raw block, headword line included.

    Equality, ordering and hashing use the headword alone, so a probe
    carrying a dummy translation compares equal to the real entry.
    """
    headword: str
    translation: str = field(default="", compare=False)

    @classmethod
    def probe(cls, headword: str) -> "Record":
        return cls(headword, "_")


class SearchResult(NamedTuple):
    """
    exact_match is a signal for the caller (exact hit vs. prefix-only),
    not an error channel. Both branches carry the matching run.
    """
    exact_match: bool
    matches: List[Record]

    @property
    def has_matches(self) -> bool:
        return bool(self.matches)


class AddResult(Enum):
    ADDED = "added"
    DUPLICATE = "duplicate"
