"""
Immutable rectangular blocks of text that can be padded, joined, and overlaid to build larger layouts.

:author: Doug Skrypa
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Iterable, Iterator

from .constants import DEFAULT_FILL, LINE_BREAK_PATTERN
from .enums import Align, Side
from .exceptions import InvalidDimension, InvalidFill
from .geometry import Padding, Sized
from .width import cell_width, char_width, concat_rows, row_width, split_cells

if TYPE_CHECKING:
    from .width import Row

__all__ = ['Block']
log = logging.getLogger(__name__)

_line_break = re.compile(LINE_BREAK_PATTERN)


class Block(Sized):
    """
    A rectangular grid of display cells.

    Blocks are immutable - every operation returns a new Block, and rows are shared between a Block and the Blocks
    derived from it where possible.  Every row contains exactly :attr:`width` columns, where the second column of a
    double-width character is represented by ``None``.  Text that occupies no columns, such as a line made only of
    zero-width characters, is attached to a neighboring cell, or kept as the sole entry of a row with no columns.

    Blocks are not intended to be initialized directly; use :meth:`of`, :meth:`of_text`, or :meth:`empty` instead.
    """

    __slots__ = ('_rows', '_width', '_fill')
    _rows: tuple[Row, ...]
    _width: int
    _fill: str

    def __init__(self, rows: tuple[Row, ...], width: int, fill: str = DEFAULT_FILL):
        self._rows = rows
        self._width = width
        self._fill = fill

    # region Construction

    @classmethod
    def of(cls, value: Any, fill: str = DEFAULT_FILL) -> Block:
        """
        Create a Block containing the string representation of the given value.  Multi-line text results in one row
        per line, with shorter lines padded on the right to the width of the widest line.

        If the given value is already a Block, then it is returned as-is, and the given fill character is ignored.
        """
        if isinstance(value, cls):
            return value
        return cls.of_text(str(value), fill)

    @classmethod
    def of_text(cls, text: str, fill: str = DEFAULT_FILL) -> Block:
        return cls.empty(0, 0, fill)._add_lines(_split_lines(text))

    @classmethod
    def empty(cls, width: int = 0, height: int = 0, fill: str = DEFAULT_FILL) -> Block:
        _validate_dimension('width', width)
        _validate_dimension('height', height)
        _validate_fill(fill)
        return cls(((fill,) * width,) * height, width, fill)

    @classmethod
    def of_width(cls, width: int, fill: str = DEFAULT_FILL) -> Block:
        """Create a Block with the given width and a height of 0"""
        return cls.empty(width, 0, fill)

    @classmethod
    def of_height(cls, height: int, fill: str = DEFAULT_FILL) -> Block:
        """Create a Block with the given height and a width of 0"""
        return cls.empty(0, height, fill)

    def add_text(self, text: Any) -> Block:
        return self.add_multiple_texts((text,))

    def add_multiple_texts(self, lines: Iterable[Any]) -> Block:
        """
        Add the given lines as new rows at the bottom of this Block.  Values that are not strings are converted to
        their string representation, and text containing line breaks results in one new row per line.

        If any new line is wider than this Block, then all existing rows are padded on the right to the new width.
        This Block's fill character is used for all padding.
        """
        if isinstance(lines, str):
            lines = (lines,)
        return self._add_lines(line for text in lines for line in _split_lines(str(text)))

    def _add_lines(self, lines: Iterable[str]) -> Block:
        new_rows = [split_cells(line) for line in lines]
        width = max(self._width, max(map(row_width, new_rows), default=0))
        fill = self._fill
        rows = self._rows
        if width > self._width and rows:
            log.debug(f'Expanding {len(rows)} existing rows from width={self._width} to {width=}')
            rows = tuple(concat_rows(row, (fill,) * (width - self._width)) for row in rows)

        rows += tuple(concat_rows(row, (fill,) * (width - row_width(row))) for row in new_rows)
        return self.__class__(rows, width, fill)

    # endregion

    # region Introspection

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def fill(self) -> str:
        return self._fill

    @property
    def rows(self) -> tuple[Row, ...]:
        return self._rows

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__}[{self.size_str}]>'

    def __eq__(self, other: Block) -> bool:
        if not isinstance(other, Block):
            return NotImplemented
        return self._width == other._width and self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self.__class__) ^ hash(self._width) ^ hash(self._rows)

    # endregion

    # region Rendering

    def to_lines(self) -> list[str]:
        return [''.join(cell for cell in row if cell is not None) for row in self._rows]

    def to_string(self) -> str:
        return '\n'.join(self.to_lines())

    def __str__(self) -> str:
        return self.to_string()

    def __iter__(self) -> Iterator[str]:
        yield from self.to_lines()

    # endregion

    # region Padding

    def pad(self, side: Side | str, amount: int, fill: str = DEFAULT_FILL) -> Block:
        """
        Add the given number of columns (for the left/right sides) or rows (for the top/bottom sides) of the given fill
        character on the given side of this Block.
        """
        side = Side(side)
        _validate_dimension('amount', amount)
        if not amount:
            return self

        _validate_fill(fill)

        if side.is_horizontal:
            padding = (fill,) * amount
            if side is Side.LEFT:
                rows = tuple(concat_rows(padding, row) for row in self._rows)
            else:
                rows = tuple(concat_rows(row, padding) for row in self._rows)
            return self.__class__(rows, self._width + amount, self._fill)

        padding = ((fill,) * self._width,) * amount
        rows = padding + self._rows if side is Side.TOP else self._rows + padding
        return self.__class__(rows, self._width, self._fill)

    def pad_top(self, amount: int, fill: str = DEFAULT_FILL) -> Block:
        return self.pad(Side.TOP, amount, fill)

    def pad_bottom(self, amount: int, fill: str = DEFAULT_FILL) -> Block:
        return self.pad(Side.BOTTOM, amount, fill)

    def pad_left(self, amount: int, fill: str = DEFAULT_FILL) -> Block:
        return self.pad(Side.LEFT, amount, fill)

    def pad_right(self, amount: int, fill: str = DEFAULT_FILL) -> Block:
        return self.pad(Side.RIGHT, amount, fill)

    def padded(self, padding: Padding | tuple[int, ...] | int, fill: str = DEFAULT_FILL) -> Block:
        """
        :param padding: A :class:`.Padding` object, or the 1-4 integers that should be used to initialize one, with
          the same meaning as CSS padding (top, right, bottom, left)
        :param fill: The character to use for the added rows / columns
        :return: A new Block with the given padding applied on all sides
        """
        if not isinstance(padding, Padding):
            padding = Padding(*padding) if isinstance(padding, tuple) else Padding(padding)
        for side, amount in padding.items():
            _validate_dimension(f'padding.{side.value}', amount)

        block = self
        for side, amount in padding.items():
            block = block.pad(side, amount, fill)
        return block

    def pad_to_width(self, width: int, side: Side | str = Side.RIGHT, fill: str = DEFAULT_FILL) -> Block:
        """Pad the given side so that this Block reaches the given width.  Wider Blocks are returned unchanged."""
        if not (side := Side(side)).is_horizontal:
            raise ValueError(f'Invalid {side=} for padding to a width - expected left or right')
        _validate_dimension('width', width)
        return self.pad(side, max(width - self._width, 0), fill)

    def pad_to_height(self, height: int, side: Side | str = Side.BOTTOM, fill: str = DEFAULT_FILL) -> Block:
        """Pad the given side so that this Block reaches the given height.  Taller Blocks are returned unchanged."""
        if (side := Side(side)).is_horizontal:
            raise ValueError(f'Invalid {side=} for padding to a height - expected top or bottom')
        _validate_dimension('height', height)
        return self.pad(side, max(height - self.height, 0), fill)

    def pad_to_width_left(self, width: int, fill: str = DEFAULT_FILL) -> Block:
        return self.pad_to_width(width, Side.LEFT, fill)

    def pad_to_width_right(self, width: int, fill: str = DEFAULT_FILL) -> Block:
        return self.pad_to_width(width, Side.RIGHT, fill)

    def pad_to_height_top(self, height: int, fill: str = DEFAULT_FILL) -> Block:
        return self.pad_to_height(height, Side.TOP, fill)

    def pad_to_height_bottom(self, height: int, fill: str = DEFAULT_FILL) -> Block:
        return self.pad_to_height(height, Side.BOTTOM, fill)

    # endregion

    # region Join

    def beside(self, other: Block, align: Align | str = Align.START, fill: str = DEFAULT_FILL) -> Block:
        """
        Join this Block with the given Block horizontally, with this Block on the left.  If their heights differ, then
        the shorter Block is padded with rows of the given fill character based on the given alignment.
        """
        align = Align(align)
        height = max(self.height, other.height)
        left, right = self._rows_for_height(height, align, fill), other._rows_for_height(height, align, fill)
        rows = tuple(concat_rows(a, b) for a, b in zip(left, right))
        return self.__class__(rows, self._width + other._width, self._fill)

    def stack(self, other: Block, align: Align | str = Align.START, fill: str = DEFAULT_FILL) -> Block:
        """
        Join this Block with the given Block vertically, with this Block on top.  If their widths differ, then the
        narrower Block is padded with columns of the given fill character based on the given alignment.
        """
        align = Align(align)
        width = max(self._width, other._width)
        rows = self._rows_for_width(width, align, fill) + other._rows_for_width(width, align, fill)
        return self.__class__(rows, width, self._fill)

    def beside_top(self, other: Block, fill: str = DEFAULT_FILL) -> Block:
        return self.beside(other, Align.START, fill)

    def beside_bottom(self, other: Block, fill: str = DEFAULT_FILL) -> Block:
        return self.beside(other, Align.END, fill)

    def beside_center_top(self, other: Block, fill: str = DEFAULT_FILL) -> Block:
        return self.beside(other, Align.CENTER_START, fill)

    def beside_center_bottom(self, other: Block, fill: str = DEFAULT_FILL) -> Block:
        return self.beside(other, Align.CENTER_END, fill)

    def stack_left(self, other: Block, fill: str = DEFAULT_FILL) -> Block:
        return self.stack(other, Align.START, fill)

    def stack_right(self, other: Block, fill: str = DEFAULT_FILL) -> Block:
        return self.stack(other, Align.END, fill)

    def stack_center_left(self, other: Block, fill: str = DEFAULT_FILL) -> Block:
        return self.stack(other, Align.CENTER_START, fill)

    def stack_center_right(self, other: Block, fill: str = DEFAULT_FILL) -> Block:
        return self.stack(other, Align.CENTER_END, fill)

    def _rows_for_height(self, height: int, align: Align, fill: str) -> tuple[Row, ...]:
        before, after = align.split(height - self.height)
        if not before and not after:
            return self._rows
        _validate_fill(fill)
        blank = ((fill,) * self._width,)
        return blank * before + self._rows + blank * after

    def _rows_for_width(self, width: int, align: Align, fill: str) -> tuple[Row, ...]:
        before, after = align.split(width - self._width)
        if not before and not after:
            return self._rows
        _validate_fill(fill)
        prefix, suffix = (fill,) * before, (fill,) * after
        return tuple(concat_rows(prefix, row, suffix) for row in self._rows)

    # endregion

    # region Overlay

    def in_front_of(self, background: Block, transparent: str = DEFAULT_FILL) -> Block:
        """
        Overlay this Block on top of the given background Block.  Both Blocks are anchored at their top-left corners,
        and the result is large enough to contain both of them.  Each Block is extended to the resulting size using its
        own fill character.

        Cells in this Block that contain the given transparent character reveal the background's cell in the same
        position.  All other cells hide the background.  If a double-width character would be partially hidden, then
        its visible column is replaced by the fill character of the Block it came from.
        """
        width, height = max(self._width, background._width), max(self.height, background.height)
        fg_rows, bg_rows = self._rows_for_size(width, height), background._rows_for_size(width, height)
        fills = (self._fill, background._fill)
        if not width:  # Rows without columns can only hold zero-width text
            rows = tuple(fg or bg for fg, bg in zip(fg_rows, bg_rows))
        else:
            rows = tuple(_composite_row(fg, bg, transparent, fills) for fg, bg in zip(fg_rows, bg_rows))
        return self.__class__(rows, width, self._fill)

    def _rows_for_size(self, width: int, height: int) -> tuple[Row, ...]:
        fill = self._fill
        rows = self._rows_for_width(width, Align.START, fill)
        return rows + ((fill,) * width,) * (height - self.height)

    # endregion


def _composite_row(fg: Row, bg: Row, transparent: str, fills: tuple[str, str]) -> Row:
    picked = []  # (source, cell) where source 0 = foreground, 1 = background
    see_through = False
    for fg_cell, bg_cell in zip(fg, bg):
        if fg_cell is not None:
            see_through = fg_cell == transparent
        picked.append((1, bg_cell) if see_through else (0, fg_cell))

    if None not in fg and None not in bg:
        return tuple(cell for _, cell in picked)

    row = []
    remaining = 0
    for i, (source, cell) in enumerate(picked):
        if cell is None:
            if remaining:
                remaining -= 1
                row.append(None)
            else:  # The wide character that this column belonged to was hidden
                row.append(fills[source])
        elif (span := cell_width(cell)) > 1 and picked[i + 1:i + span] != [(source, None)] * (span - 1):
            row.append(fills[source])
            remaining = 0
        else:
            row.append(cell)
            remaining = span - 1

    return tuple(row)


def _split_lines(text: str) -> list[str]:
    return _line_break.split(text)


def _validate_dimension(name: str, value: int):
    if value < 0:
        raise InvalidDimension(name, value)


def _validate_fill(fill: str, name: str = 'fill'):
    if not isinstance(fill, str) or len(fill) != 1 or char_width(fill) != 1:
        raise InvalidFill(name, fill)
