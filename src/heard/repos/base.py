"""Defines the API for reading and writing the note store.

The most important class is :class:`Repo`.
"""

from typing import List

from heard.models import Note, StoreContents


class StoreWriteError(Exception):
    """Raised when the store cannot be saved, e.g. due to permissions or a full disk."""
    def __init__(self, message: str, path: str, cause: BaseException = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.cause = cause


class Repo:
    """Base class for repos, which are responsible for loading and saving the whole list of notes.

    There is no partial or incremental access: every read returns the full list, and every write replaces it.
    """
    def load(self) -> StoreContents:
        """Returns the notes in the store, along with whether the store was missing, corrupt, or loaded.

        Never raises for a missing or undecodable store; in those cases the returned notes list is empty.
        """
        raise NotImplementedError()

    def write_all(self, notes: List[Note]) -> None:
        """Replaces the contents of the store with the given notes.

        May raise :exc:`StoreWriteError`.
        """
        raise NotImplementedError()

    def read_all(self) -> List[Note]:
        """Convenience method equivalent to ``load().notes``"""
        return self.load().notes
