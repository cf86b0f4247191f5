from __future__ import annotations
import logging
import re
from typing import List

from .config import RECORD_DELIMITER, HISTORY_DELIMITER
from .errors import DictionaryLoadError
from .models import Record

log = logging.getLogger(__name__)

# first line, then a newline, then anything (the rest of the block)
_ITEM = re.compile(r"^(.*)\n")


def read_source(path) -> str:
    """Read a whole dictionary source into memory."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryLoadError(path, str(exc)) from exc


def parse(text: str, delimiter: str = RECORD_DELIMITER) -> List[Record]:
    """
    Split `text` on `delimiter` and turn each block into a Record.

    The headword is the block's first line, verbatim. The translation is
    the whole block, headword line included. Blocks with no newline after
    the first line are skipped. Output keeps source order.
    """
    records: List[Record] = []
    skipped = 0
    for block in text.split(delimiter):
        m = _ITEM.match(block)
        if m is None:
            skipped += 1
            continue
        records.append(Record(m.group(1), block))
    if skipped:
        log.debug("parse: skipped %d malformed blocks", skipped)
    return records


def parse_history(text: str) -> List[Record]:
    """
    Parse a history file: blocks separated by a line of dashes, each block
    being the translation text as it was displayed. The writer ends every
    block with one extra newline; that newline is dropped here.
    """
    records: List[Record] = []
    for block in text.split(HISTORY_DELIMITER + "\n"):
        if block.endswith("\n"):
            block = block[:-1]
        m = _ITEM.match(block)
        if m is None:
            continue
        records.append(Record(m.group(1), block))
    return records
