"""
Display width calculations for monospace rendering of text.

Widths are measured in terminal columns using Unicode East Asian Width rules via :func:`wcwidth.wcwidth`: wide and
fullwidth characters occupy 2 columns, combining marks and other zero-width characters occupy none, and everything else
occupies 1.  Characters that ``wcwidth`` considers non-printable (control characters) are treated as zero-width so that
width calculation never fails.  Text is normalized to NFC before it is measured, but cells keep the original text.

:author: Doug Skrypa
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional
from unicodedata import normalize

from wcwidth import wcwidth

__all__ = [
    'char_width', 'text_width', 'cell_width', 'split_cells', 'is_zero_width_row', 'row_width', 'concat_rows',
    'Cell', 'Row',
]

Cell = Optional[str]
Row = tuple[Cell, ...]


@lru_cache(maxsize=4096)
def char_width(char: str) -> int:
    return max(wcwidth(char), 0)


def text_width(text: str) -> int:
    return sum(map(char_width, normalize('NFC', text)))


def cell_width(cell: Cell) -> int:
    return 0 if cell is None else text_width(cell)


def split_cells(text: str) -> Row:
    """
    Split a single line of text into display columns.

    Each character with a non-zero width starts a new cell, and any zero-width characters are attached to the cell
    that precedes them (or to the first cell, if they lead the line).  The second column occupied by a wide character
    is represented by ``None``, so the length of the returned tuple is always equal to the display width of the text.

    A line that consists only of zero-width characters is returned as a single entry that occupies no columns.  Such
    an entry is merged into a neighboring cell by :func:`concat_rows` once the row gains columns.
    """
    columns = []
    cell = pending = ''
    width = 0
    for char in text:
        if not (char_w := char_width(char)):
            if cell:
                cell += char
            else:
                pending += char
            continue

        if cell:
            _append_cell(columns, cell, width)
        cell, width = pending + char, char_w
        pending = ''

    if cell:
        _append_cell(columns, cell, width)
    elif pending:
        return (pending,)

    return tuple(columns)


def _append_cell(columns: list[Cell], cell: str, width: int):
    columns.append(cell)
    columns.extend(None for _ in range(width - 1))


def is_zero_width_row(row: Row) -> bool:
    return len(row) == 1 and row[0] is not None and not text_width(row[0])


def row_width(row: Row) -> int:
    return 0 if is_zero_width_row(row) else len(row)


def concat_rows(*parts: Row) -> Row:
    """
    Concatenate the given row segments from left to right.  Segments that occupy no columns are merged into the first
    cell that follows them, or into the last cell of the row if nothing follows them.
    """
    row = ()
    carry = ''
    for part in parts:
        if not part:
            continue
        elif is_zero_width_row(part):
            carry += part[0]
            continue
        elif carry:
            part = (carry + part[0], *part[1:])
            carry = ''
        row += part

    if not carry:
        return row
    elif not row:
        return (carry,)

    last = max(i for i, cell in enumerate(row) if cell is not None)
    return (*row[:last], row[last] + carry, *row[last + 1:])
