"""Defines classes for representing notes and the state of the note store.

The most important class is :class:`Note`.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List


@dataclass
class Note:
    """A single note. Notes have no identifier; they are addressed by their position in the store."""

    text: str
    """The body of the note. This is not validated and may be empty."""

    category: str
    """A free-form label, such as "work" or "shopping". Used for filtering and for choosing an icon."""

    def as_json(self) -> dict:
        """Returns a dict representing the instance, suitable for serializing as json."""
        return {
            'text': self.text,
            'category': self.category,
        }

    @classmethod
    def from_json(cls, obj: dict) -> Note:
        """Builds an instance from a dict like the ones returned by :meth:`as_json`.

        Raises :exc:`KeyError` if a field is missing, or :exc:`TypeError` if a field is not a string.
        Any keys other than ``text`` and ``category`` are ignored.
        """
        text = obj['text']
        category = obj['category']
        if not isinstance(text, str) or not isinstance(category, str):
            raise TypeError('Note text and category must be strings')
        return cls(text, category)


class StoreState(Enum):
    """Describes what was found when loading the store."""

    ABSENT = 'absent'
    """No file exists at the store path."""

    CORRUPT = 'corrupt'
    """A file exists but could not be read or decoded."""

    LOADED = 'loaded'


@dataclass
class StoreContents:
    """The result of :meth:`heard.repos.base.Repo.load`.

    For both :attr:`StoreState.ABSENT` and :attr:`StoreState.CORRUPT`, :attr:`notes` is empty.
    """

    notes: List[Note] = field(default_factory=list)
    state: StoreState = StoreState.LOADED
