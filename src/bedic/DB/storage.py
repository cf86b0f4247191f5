from __future__ import annotations
import logging
import os
from typing import Iterable, List

from ..config import HISTORY_DELIMITER
from ..models import Record
from ..parser import parse_history

log = logging.getLogger(__name__)


def _format(rec: Record) -> str:
    # the reader takes the first line as the headword
    text = rec.translation
    if not text.startswith(rec.headword + "\n"):
        text = f"{rec.headword}\n{text}"
    return f"{HISTORY_DELIMITER}\n{text}\n"


def load_history(path: str) -> List[Record]:
    """Records in file order. A missing file is an empty history."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError:
        log.info("History file %s not found; starting empty", path)
        return []
    records = parse_history(text)
    log.info("Loaded %d history entries from %s", len(records), path)
    return records


def append_history(path: str, rec: Record) -> None:
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(_format(rec))


def save_history(path: str, records: Iterable[Record]) -> None:
    """Rewrite the whole file."""
    tmp = f"{path}.tmp"
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(tmp, "w", encoding="utf-8") as f:
        for rec in records:
            f.write(_format(rec))
    os.replace(tmp, path)
