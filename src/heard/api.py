"""Provides the note operations, and the main entry point for using them, :class:`Heard`.

The module-level functions work on an in-memory list of notes. :class:`Heard` wraps each of them in a
load-change-save cycle against a :class:`heard.repos.base.Repo`.
"""

from __future__ import annotations
import logging
from typing import Iterator, List, Optional, Tuple

from heard.conf import HeardConf
from heard.models import Note


log = logging.getLogger(__name__)


class Error(Exception):
    pass


class IndexOutOfRangeError(Error):
    """Raised when an edit or removal refers to a position that is not in the store."""
    def __init__(self, index: int, size: int):
        super().__init__(f'Index {index} is out of range for {size} notes')
        self.index = index
        self.size = size


class NoteListing:
    """An iterable of ``(number, note)`` pairs for the notes in a list, optionally limited to one category.

    Numbers start at 1 and count only the notes that pass the filter. So when a category is given, the number
    shown for a note is generally *not* its position in the full store, and cannot be passed to
    :func:`edit_note` or :func:`remove_note` as-is.

    Iteration is lazy and may be repeated; each pass reflects the current contents of :attr:`notes`.

    .. attribute:: notes
       :type: List[Note]

       The full, unfiltered list.

    .. attribute:: category
       :type: Optional[str]
    """
    def __init__(self, notes: List[Note], category: Optional[str] = None):
        self.notes = notes
        self.category = category

    def __iter__(self) -> Iterator[Tuple[int, Note]]:
        matches = (n for n in self.notes if self.category is None or n.category == self.category)
        return enumerate(matches, start=1)


def add_note(notes: List[Note], text: str, category: str) -> Note:
    """Appends a new note to the end of the list and returns it."""
    note = Note(text, category)
    notes.append(note)
    return note


def list_notes(notes: List[Note], category: Optional[str] = None) -> NoteListing:
    """Returns the notes whose category exactly equals the given one, or all notes if category is None."""
    return NoteListing(notes, category)


def _check_index(notes: List[Note], index: int) -> None:
    if not 0 <= index < len(notes):
        raise IndexOutOfRangeError(index, len(notes))


def edit_note(notes: List[Note], index: int, text: str, category: str) -> Note:
    """Replaces the text and category of the note at the given 0-based index, keeping its position.

    Raises :exc:`IndexOutOfRangeError` without changing anything if there is no such note.
    """
    _check_index(notes, index)
    note = notes[index]
    note.text = text
    note.category = category
    return note


def remove_note(notes: List[Note], index: int) -> Note:
    """Deletes and returns the note at the given 0-based index. Later notes move up by one position.

    Raises :exc:`IndexOutOfRangeError` without changing anything if there is no such note.
    """
    _check_index(notes, index)
    return notes.pop(index)


class Heard:
    """Main entry point for working programmatically with your notes.

    Generally, you should get an instance using :meth:`Heard.for_user`. Each method loads the store fresh,
    and the methods that change notes save the whole store before returning. Nothing is cached between calls.

    .. attribute:: conf
       :type: heard.conf.HeardConf

    .. attribute:: repo
       :type: heard.repos.base.Repo

    Here's an example that moves every "todo" note into the "work" category:

    .. code-block:: python

       from heard.api import Heard
       heard = Heard.for_user()
       for number, note in list(heard.list()):
           if note.category == 'todo':
               heard.edit(number - 1, note.text, 'work')
    """

    @staticmethod
    def for_user() -> Heard:
        """Creates an instance using the store in the user's home directory.

        Raises :exc:`heard.conf.ConfError` if the store directory cannot be resolved or created.
        """
        return HeardConf.for_user().instantiate()

    def __init__(self, conf: HeardConf):
        self.conf = conf
        self.repo = conf.instantiate_repo()

    def add(self, text: str, category: str) -> Note:
        """Appends a note and saves the store.

        May raise :exc:`heard.repos.base.StoreWriteError`.
        """
        notes = self.repo.read_all()
        note = add_note(notes, text, category)
        self.repo.write_all(notes)
        log.debug('Added note %d in category %r', len(notes), category)
        return note

    def list(self, category: Optional[str] = None) -> NoteListing:
        """Loads the store and returns a :class:`NoteListing` for it. Does not write anything."""
        return list_notes(self.repo.read_all(), category)

    def edit(self, index: int, text: str, category: str) -> Note:
        """Changes the note at the given 0-based index and saves the store.

        May raise :exc:`IndexOutOfRangeError` (in which case nothing is saved)
        or :exc:`heard.repos.base.StoreWriteError`.
        """
        notes = self.repo.read_all()
        note = edit_note(notes, index, text, category)
        self.repo.write_all(notes)
        log.debug('Edited note at index %d', index)
        return note

    def remove(self, index: int) -> Note:
        """Removes the note at the given 0-based index and saves the store.

        May raise :exc:`IndexOutOfRangeError` (in which case nothing is saved)
        or :exc:`heard.repos.base.StoreWriteError`.
        """
        notes = self.repo.read_all()
        note = remove_note(notes, index)
        self.repo.write_all(notes)
        log.debug('Removed note at index %d', index)
        return note
