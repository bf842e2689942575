"""Provides the :class:`FileRepo` class."""

import logging
import os.path
from typing import List

from heard.codec import DecodeError, decode, encode
from heard.models import Note, StoreContents, StoreState
from heard.repos.base import Repo, StoreWriteError


log = logging.getLogger(__name__)


class FileRepo(Repo):
    """Stores notes in a single JSON file.

    The file is read in full on every load and truncated and rewritten on every write. There is no locking,
    so if two processes write at the same time, the last one to finish wins.

    .. attribute:: path
       :type: str
    """
    def __init__(self, path: str):
        self.path = path

    def load(self) -> StoreContents:
        if not os.path.exists(self.path):
            log.debug('No store at %s', self.path)
            return StoreContents(state=StoreState.ABSENT)
        try:
            with open(self.path, 'r', encoding='utf-8') as file:
                blob = file.read()
        except (OSError, UnicodeDecodeError) as e:
            log.debug('Could not read store at %s: %s', self.path, e)
            return StoreContents(state=StoreState.CORRUPT)
        try:
            notes = decode(blob)
        except DecodeError as e:
            log.debug('Could not decode store at %s: %s', self.path, e.message)
            return StoreContents(state=StoreState.CORRUPT)
        log.debug('Loaded %d notes from %s', len(notes), self.path)
        return StoreContents(notes, StoreState.LOADED)

    def write_all(self, notes: List[Note]) -> None:
        contents = encode(notes)
        try:
            with open(self.path, 'w', encoding='utf-8') as file:
                file.write(contents)
        except OSError as e:
            raise StoreWriteError(f'Could not write store: {e}', self.path, e)
        log.debug('Wrote %d notes to %s', len(notes), self.path)
