"""Command-line interface for heard.

The first argument picks the command; everything after it is read by position, so note text and categories
may start with ``-``.
"""


import logging
import re
import sys
from typing import List, Optional
from rich.console import Console
from rich.text import Text
from heard.api import Heard, IndexOutOfRangeError
from heard.conf import ConfError, HeardConf
from heard.models import Note
from heard.repos.base import StoreWriteError


log = logging.getLogger(__name__)

SEPARATOR = ':'

USAGE_ADD = 'Usage: heard "note text" : category'
USAGE_EDIT = 'Usage: heard --edit INDEX "new text" : category'
USAGE_REMOVE = 'Usage: heard --remove INDEX'

_INDEX_PATTERN = re.compile(r'\+?[0-9]+')


def _print_usage(err: Console) -> None:
    err.print(Text('Usage: heard [options]', style='bold red'))
    err.print(Text('Options:'))
    err.print(Text('  heard "note text" : category                Add a new note'))
    err.print(Text('  heard --list [category]                     List notes'))
    err.print(Text('  heard --edit INDEX "new text" : category    Edit a note'))
    err.print(Text('  heard --remove or --r INDEX                 Remove a note'))
    err.print(Text('INDEX is the number shown by an unfiltered --list.'))


def _unquote(text: str) -> str:
    return text.strip('"')


def _parse_index(value: str) -> Optional[int]:
    """Returns the 1-based index, or None unless value is a positive integer in plain ASCII digits."""
    if not _INDEX_PATTERN.fullmatch(value):
        return None
    index = int(value)
    return index if index > 0 else None


def _note_line(conf: HeardConf, number: int, note: Note) -> Text:
    return Text.assemble(
        (f'{number:>2}.', 'bold cyan'),
        ' ',
        conf.icon_for(note.category),
        ' ',
        (f'[{note.category}]', 'blue'),
        ' ',
        (note.text, 'white'))


def _add(args: List[str], heard: Heard, out: Console, err: Console) -> int:
    if len(args) < 3 or not args[1] == SEPARATOR:
        err.print(Text(USAGE_ADD, style='yellow'))
        return 0
    try:
        heard.add(_unquote(args[0]), args[2])
    except StoreWriteError as e:
        log.debug('Save failed: %s', e.message)
        err.print(Text('Failed to save note.', style='red'))
        return 0
    out.print(Text('Note saved successfully!', style='green'))
    return 0


def _list(args: List[str], heard: Heard, out: Console, err: Console) -> int:
    category = args[1] if len(args) > 1 else None
    listing = heard.list(category)
    if not listing.notes:
        out.print(Text('No notes found.', style='bold red'))
        return 0
    lines = [_note_line(heard.conf, number, note) for number, note in listing]
    if not lines:
        out.print(Text(f'No notes found for the category: {category}', style='yellow'))
        return 0
    out.print(Text('Notes:', style='bold green'))
    for line in lines:
        out.print(line)
    return 0


def _edit(args: List[str], heard: Heard, out: Console, err: Console) -> int:
    if len(args) < 5 or not args[3] == SEPARATOR:
        err.print(Text(USAGE_EDIT, style='yellow'))
        return 0
    index = _parse_index(args[1])
    if index is None:
        err.print(Text('Invalid index for edit.', style='red'))
        return 1
    try:
        heard.edit(index - 1, _unquote(args[2]), args[4])
    except IndexOutOfRangeError:
        err.print(Text('Invalid index. Note does not exist.', style='red'))
        return 0
    except StoreWriteError as e:
        log.debug('Save failed: %s', e.message)
        err.print(Text('Failed to update note.', style='red'))
        return 0
    out.print(Text('Note updated successfully!', style='green'))
    return 0


def _remove(args: List[str], heard: Heard, out: Console, err: Console) -> int:
    if len(args) < 2:
        err.print(Text(USAGE_REMOVE, style='yellow'))
        return 0
    index = _parse_index(args[1])
    if index is None:
        err.print(Text('Invalid index for removal.', style='red'))
        return 1
    try:
        heard.remove(index - 1)
    except IndexOutOfRangeError:
        err.print(Text('Invalid index. Note does not exist.', style='red'))
        return 0
    except StoreWriteError as e:
        log.debug('Save failed: %s', e.message)
        err.print(Text('Failed to remove note.', style='red'))
        return 0
    out.print(Text('Note removed successfully!', style='green'))
    return 0


COMMANDS = {
    '--list': _list,
    '-l': _list,
    '--edit': _edit,
    '--remove': _remove,
    '--r': _remove,
}
"""Handlers keyed by first argument. Anything else is treated as note text for :func:`_add`."""


def main(args: List[str] = None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    logging.basicConfig(level=logging.WARNING, format='%(name)s: %(message)s')
    out = Console(highlight=False, soft_wrap=True)
    err = Console(stderr=True, highlight=False, soft_wrap=True)

    if args is None:
        args = sys.argv[1:]
    if not args:
        _print_usage(err)
        return 0
    func = COMMANDS.get(args[0], _add)

    try:
        heard = Heard.for_user()
    except ConfError as e:
        err.print(Text(str(e), style='bold red'))
        return 1
    log.debug('Using store %s', heard.conf.store_path)
    return func(args, heard, out, err)
