from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from .DB.history import HistoryIndex
from .models import Record, SearchResult

log = logging.getLogger(__name__)


class SelectionState(Enum):
    IDLE = "idle"                              # nothing listed
    ACTIVE = "active"                          # a result list is shown, selections are handled
    PENDING_SUPPRESSED = "pending_suppressed"  # swallow the next selection callback


@dataclass(frozen=True)
class Selection:
    headword: str
    translation: str
    can_add: bool       # "add to history" should be enabled


class SelectionTracker:
    """
    Connects two phases of one user action: a result list being shown and
    a row of it being selected.

    on_results() caches headword -> translation for the rows on screen.
    on_selected() turns a selected headword into the text to display and
    the add-button state. After on_added(word) the next selection of that
    same word is swallowed: re-listing after an insert re-selects the row,
    and that callback is not a user choice.
    """

    def __init__(self, history: HistoryIndex) -> None:
        self._history = history
        self._shown: Dict[str, str] = {}
        self._history_mode = False
        self._echo: Optional[str] = None
        self.state = SelectionState.IDLE

    def on_results(self, result: SearchResult | List[Record], *, history_mode: bool = False) -> None:
        rows = result.matches if isinstance(result, SearchResult) else result
        self._shown = {r.headword: r.translation for r in rows}
        self._history_mode = history_mode
        self.state = SelectionState.ACTIVE if rows else SelectionState.IDLE

    def on_added(self, headword: str) -> None:
        self._echo = headword
        self.state = SelectionState.PENDING_SUPPRESSED

    def on_selected(self, headword: str) -> Optional[Selection]:
        if self.state is SelectionState.PENDING_SUPPRESSED:
            echo, self._echo = self._echo, None
            self.state = SelectionState.ACTIVE
            if headword == echo:
                log.debug("selection of %r suppressed after insert", headword)
                return None
        if self.state is SelectionState.IDLE:
            return None

        if self._history_mode:
            translation = self._shown.get(headword, "")
            return Selection(headword, translation, can_add=False)

        stored = self._history.lookup(headword)
        if stored is not None:
            # already bookmarked: show what was saved
            return Selection(headword, stored.translation, can_add=False)
        translation = self._shown.get(headword)
        if translation is None:
            return Selection(headword, "", can_add=False)
        return Selection(headword, translation, can_add=True)
