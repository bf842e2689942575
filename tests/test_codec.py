import pytest

from heard.codec import DecodeError, decode, encode
from heard.models import Note


def test_encode_is_pretty():
    assert encode([Note('Buy milk', 'shopping')]) == """[
  {
    "text": "Buy milk",
    "category": "shopping"
  }
]"""


def test_encode_empty():
    assert encode([]) == '[]'


def test_encode_keeps_unicode():
    assert '"café \U0001f600"' in encode([Note('café \U0001f600', 'x')])


def test_round_trip():
    notes = [
        Note('Buy milk', 'shopping'),
        Note('Finish report', 'work'),
        Note('日本語 "quoted"\nsecond line', ''),
        Note('', 'Work'),
    ]
    assert decode(encode(notes)) == notes
    assert decode(encode([])) == []


def test_decode_hand_edited():
    blob = '[{"category": "work", "text": "Compact"}, {"text": "b", "category": "c", "extra": null}]'
    assert decode(blob) == [Note('Compact', 'work'), Note('b', 'c')]


@pytest.mark.parametrize('blob', [
    '',
    '   \n',
    'not json at all',
    '[{"text": "truncated", "categ',
    '{"text": "x", "category": "y"}',
    '"just a string"',
    'null',
    '[1, 2]',
    '[{"text": "no category"}]',
    '[{"text": ["x"], "category": "y"}]',
    '[{"text": "x", "category": "y"}, null]',
    '[' * 100000,
    '[' * 100000 + ']' * 100000,
])
def test_decode_rejects(blob):
    with pytest.raises(DecodeError):
        decode(blob)


def test_decode_error_keeps_cause():
    with pytest.raises(DecodeError) as excinfo:
        decode('[{"text": "x"}]')
    assert excinfo.value.message == 'Element 0 is not a valid note'
    assert isinstance(excinfo.value.cause, KeyError)
