"""Converts the list of notes to and from the text stored on disk.

The format is a pretty-printed JSON array of ``{"text": ..., "category": ...}`` objects, so that the store
can be inspected or fixed up by hand.
"""

import json
from typing import List

from heard.models import Note


class DecodeError(Exception):
    """Raised when text cannot be decoded as a list of notes."""
    def __init__(self, message: str, cause: BaseException = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


def encode(notes: List[Note]) -> str:
    return json.dumps([n.as_json() for n in notes], indent=2, ensure_ascii=False)


def decode(blob: str) -> List[Note]:
    """Parses text produced by :func:`encode`.

    Raises :exc:`DecodeError` if the text is not valid JSON (an empty string included), is not an array,
    or contains anything other than objects with string ``text`` and ``category`` fields.
    """
    try:
        parsed = json.loads(blob)
    except (ValueError, RecursionError) as e:
        raise DecodeError('Store is not valid JSON', e)
    if not isinstance(parsed, list):
        raise DecodeError(f'Expected a JSON array, found {type(parsed).__name__}')
    notes = []
    for i, obj in enumerate(parsed):
        if not isinstance(obj, dict):
            raise DecodeError(f'Element {i} is not an object')
        try:
            notes.append(Note.from_json(obj))
        except (KeyError, TypeError) as e:
            raise DecodeError(f'Element {i} is not a valid note', e)
    return notes
