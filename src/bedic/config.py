from __future__ import annotations
import os
from pathlib import Path

# where the two dictionary sources live
DATA_DIR = Path(os.environ.get("BEDIC_DATA_DIR", "/usr/local/share/bedic"))

# source A (English -> Bulgarian) and source B (Bulgarian -> English)
SOURCE_A = DATA_DIR / "en_bg-utf8.dat"
SOURCE_B = DATA_DIR / "bg_en-utf8.dat"

# bookmarked words; one record per entry, see HISTORY_DELIMITER
HISTORY_FILE = Path(os.environ.get("BEDIC_HISTORY", "~/new_words.txt")).expanduser()

# record separators
RECORD_DELIMITER: str = "^;"
HISTORY_DELIMITER: str = "-" * 78

# /* ~~~ hard cap on the forward scan after the binary search ~~~ */
PREFIX_WINDOW: int = 200

# queries longer than this are not searched (interactive guard)
MAX_QUERY_LEN: int = 50

# raise instead of warn when the two sources interleave
CHECK_DISJOINT: bool = os.environ.get("BEDIC_CHECK_DISJOINT") == "1"

# Progress logging (set BEDIC_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("BEDIC_VERBOSE") == "1"
