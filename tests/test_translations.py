import os
import sys

sys.path.insert(0, os.getcwd())

import pytest

from errors import MalformedKeyCell
from translations import Translation, extract_translations


def test_skips_header_and_empty_values():
    rows = [['id', 'en'], ['k1', 'v1'], ['k2', '']]
    assert extract_translations(rows, 0, 1, rows_to_skip=1) == [Translation('k1', 'v1')]


def test_header_is_read_without_skip():
    rows = [['id', 'en'], ['k1', 'v1']]
    result = extract_translations(rows, 0, 1)
    assert [t.key for t in result] == ['id', 'k1']


def test_short_rows_are_skipped():
    rows = [['k1'], [], ['k2', 'en2', 'de2'], ['k3', 'en3']]
    result = extract_translations(rows, 0, 2)
    assert result == [Translation('k2', 'de2')]


def test_keeps_row_order():
    rows = [['b', '2'], ['a', '1'], ['c', '3']]
    assert [t.key for t in extract_translations(rows, 0, 1)] == ['b', 'a', 'c']


def test_key_column_after_locale_column():
    rows = [['hello', 'greeting.hi']]
    assert extract_translations(rows, 1, 0) == [Translation('greeting.hi', 'hello')]


def test_non_string_value_is_skipped():
    rows = [['k1', None], ['k2', 5], ['k3', 'v3']]
    assert extract_translations(rows, 0, 1) == [Translation('k3', 'v3')]


def test_empty_key_is_skipped():
    rows = [['', 'orphan'], ['k', 'v']]
    assert extract_translations(rows, 0, 1) == [Translation('k', 'v')]


def test_non_string_key_raises():
    rows = [['id', 'en'], [42, 'v1']]
    with pytest.raises(MalformedKeyCell) as e:
        extract_translations(rows, 0, 1, rows_to_skip=1)
    assert e.value.row == 2
    assert e.value.value == 42
    assert 'row 2' in str(e.value)


def test_skip_beyond_rows_returns_nothing():
    rows = [['k', 'v']]
    assert extract_translations(rows, 0, 1, rows_to_skip=5) == []
