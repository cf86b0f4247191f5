"""
Two-way English/Bulgarian dictionary engine.

Loads two delimited word lists into one headword-sorted store and answers
prefix queries quickly enough for per-keystroke lookup. Also keeps a small
history of bookmarked entries with duplicate detection.

Example Usage:
    from bedic import Engine

    eng = Engine().build("en_bg-utf8.dat", "bg_en-utf8.dat",
                         history_path="~/new_words.txt")
    exact, matches = eng.search("hou")
    for rec in matches:
        print(rec.headword)
"""

# src/bedic/__init__.py
from .engine import Engine
from .models import AddResult, Record, SearchResult
from .errors import BedicError, DictionaryLoadError, StoreOrderError

__version__ = "0.3.0"
__all__ = [
    "Engine",
    "Record",
    "SearchResult",
    "AddResult",
    "BedicError",
    "DictionaryLoadError",
    "StoreOrderError",
]
