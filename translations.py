import logging
from typing import List, Sequence

from errors import MalformedKeyCell


class Translation:
    """A single key/value pair taken from one sheet row for one locale."""

    def __init__(self, key: str, value: str):
        self.key = key
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, Translation):
            return NotImplemented
        return (self.key, self.value) == (other.key, other.value)

    def __repr__(self):
        return f"Translation(key={self.key!r}, value={self.value!r})"


def key_cell_to_str(cell, row_number: int) -> str:
    """Return a key cell as a string or raise MalformedKeyCell."""
    if not isinstance(cell, str):
        raise MalformedKeyCell(row_number, cell)
    return cell


def extract_translations(
    rows: Sequence[Sequence],
    key_index: int,
    locale_index: int,
    rows_to_skip: int = 0,
) -> List[Translation]:
    """
    Pair each row's key cell with its locale cell, keeping sheet order.

    Rows before 'rows_to_skip' are never read. Rows too short to hold both
    columns, rows whose locale cell is not a non-empty string and rows with
    an empty key are skipped. A key cell that is not a string raises
    MalformedKeyCell and aborts the extraction.
    """
    translations = []
    for i in range(rows_to_skip, len(rows)):
        row = rows[i]
        if len(row) <= key_index or len(row) <= locale_index:
            continue

        value = row[locale_index]
        if not isinstance(value, str) or value == '':
            continue

        key = key_cell_to_str(row[key_index], i + 1)
        if key == '':
            logging.debug('Skipping row %d: empty key for value %r', i + 1, value)
            continue

        translations.append(Translation(key, value))
    return translations
