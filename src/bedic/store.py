from __future__ import annotations
import logging
from typing import Iterator, Sequence, Tuple, overload

from . import config as CFG
from .errors import StoreOrderError
from .models import Record
from .parser import parse, read_source

log = logging.getLogger(__name__)


class DictionaryStore(Sequence[Record]):
    """
    Read-only concatenation of two independently sorted sources.

    Searching the concatenation as one sorted sequence is only valid when
    the two sources occupy disjoint headword ranges with A first: every
    headword of A strictly below every headword of B. The English and
    Bulgarian sources satisfy this because Latin code points sort before
    Cyrillic ones. check_disjoint() verifies the contract.

    Built once at startup, never mutated, safe to share between threads.
    """

    def __init__(self, part_a: Sequence[Record], part_b: Sequence[Record]) -> None:
        self._split = len(part_a)
        self._records: Tuple[Record, ...] = tuple(part_a) + tuple(part_b)

    # ------------- construction -------------

    @classmethod
    def build(cls, text_a: str, text_b: str, *, check: bool | None = None) -> "DictionaryStore":
        part_a = sorted(parse(text_a))  # sorted() is stable
        log.info("Parsed source A: %d entries", len(part_a))
        part_b = sorted(parse(text_b))
        log.info("Parsed source B: %d entries", len(part_b))

        store = cls(part_a, part_b)
        if not store.check_disjoint():
            if CFG.CHECK_DISJOINT if check is None else check:
                raise StoreOrderError("dictionary sources overlap; prefix search would be unreliable")
            log.warning("Dictionary sources overlap in headword order; search results may be incomplete")
        log.info("This database contains %d elements", len(store))
        return store

    @classmethod
    def from_files(cls, path_a, path_b, *, check: bool | None = None) -> "DictionaryStore":
        """Read both sources fully, then build. Raises DictionaryLoadError."""
        log.info("Loading dictionaries")
        text_a = read_source(path_a)
        text_b = read_source(path_b)
        return cls.build(text_a, text_b, check=check)

    # ------------- contract -------------

    def check_disjoint(self) -> bool:
        a = self._records[:self._split]
        b = self._records[self._split:]
        if not a or not b:
            return True
        # each part is sorted, so a[-1] is max(A) and b[0] is min(B)
        return a[-1] < b[0]

    # ------------- read-only sequence -------------

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    @overload
    def __getitem__(self, i: int) -> Record: ...
    @overload
    def __getitem__(self, i: slice) -> Tuple[Record, ...]: ...

    def __getitem__(self, i):
        return self._records[i]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)
