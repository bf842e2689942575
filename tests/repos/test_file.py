from pathlib import Path
import pytest

from heard.models import Note, StoreState
from heard.repos.base import StoreWriteError
from heard.repos.file import FileRepo


def test_load_absent(fs):
    fs.create_dir('/home/.heard')
    contents = FileRepo('/home/.heard/notes.json').load()
    assert contents.notes == []
    assert contents.state == StoreState.ABSENT


def test_write_then_load(fs):
    fs.create_dir('/home/.heard')
    repo = FileRepo('/home/.heard/notes.json')
    notes = [Note('Buy milk', 'shopping'), Note('Finish report', 'work')]
    repo.write_all(notes)
    contents = repo.load()
    assert contents.notes == notes
    assert contents.state == StoreState.LOADED
    assert repo.read_all() == notes


def test_write_format(fs):
    fs.create_dir('/home/.heard')
    repo = FileRepo('/home/.heard/notes.json')
    repo.write_all([Note('Buy milk', 'shopping')])
    assert Path('/home/.heard/notes.json').read_text(encoding='utf-8') == """[
  {
    "text": "Buy milk",
    "category": "shopping"
  }
]"""


def test_write_truncates(fs):
    fs.create_file('/home/.heard/notes.json', contents='x' * 1000)
    repo = FileRepo('/home/.heard/notes.json')
    repo.write_all([])
    assert Path('/home/.heard/notes.json').read_text() == '[]'


@pytest.mark.parametrize('contents', ['', 'garbage', '[{"text": "half', '{"text": "x", "category": "y"}', '[' * 100000])
def test_load_corrupt(fs, contents):
    fs.create_file('/home/.heard/notes.json', contents=contents)
    repo = FileRepo('/home/.heard/notes.json')
    loaded = repo.load()
    assert loaded.notes == []
    assert loaded.state == StoreState.CORRUPT
    assert repo.read_all() == []


def test_load_binary_garbage(fs):
    fs.create_file('/home/.heard/notes.json')
    Path('/home/.heard/notes.json').write_bytes(b'\xff\xfe\x00\x9c\x80garbage')
    loaded = FileRepo('/home/.heard/notes.json').load()
    assert loaded.notes == []
    assert loaded.state == StoreState.CORRUPT


def test_load_unreadable(fs):
    fs.create_dir('/home/.heard/notes.json')
    loaded = FileRepo('/home/.heard/notes.json').load()
    assert loaded.notes == []
    assert loaded.state == StoreState.CORRUPT


def test_write_failure(fs):
    fs.create_dir('/home/.heard/notes.json')
    repo = FileRepo('/home/.heard/notes.json')
    with pytest.raises(StoreWriteError) as excinfo:
        repo.write_all([Note('Buy milk', 'shopping')])
    assert excinfo.value.path == '/home/.heard/notes.json'
    assert isinstance(excinfo.value.cause, OSError)


def test_write_unicode(fs):
    fs.create_dir('/home/.heard')
    repo = FileRepo('/home/.heard/notes.json')
    notes = [Note('café \U0001f600', '学習')]
    repo.write_all(notes)
    assert repo.read_all() == notes
