from .history import HistoryIndex
from .storage import load_history, append_history, save_history

__all__ = ["HistoryIndex", "load_history", "append_history", "save_history"]
