from __future__ import annotations


class BedicError(Exception):
    """Base class for dictionary engine errors."""


class DictionaryLoadError(BedicError):
    """A dictionary source could not be read. Fatal at startup."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = str(path)
        self.reason = reason
        msg = f"Unable to read dictionary file {self.path}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class StoreOrderError(BedicError):
    """The two sources of a DictionaryStore overlap in headword order."""
