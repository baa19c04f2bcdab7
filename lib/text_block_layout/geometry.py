"""
Basic geometry classes for text blocks.

Sizes are measured in display columns (width) and rows (height).  The :class:`Padding` class represents edge spacing
around rectangular content, following the same model as the CSS Box Model:

┌──────────────────────┐
│       Padding        │
│  ┌────────────────┐  │
│  │    Content     │  │
│  └────────────────┘  │
└──────────────────────┘

:author: Doug Skrypa
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, NamedTuple, overload

from .enums import Side

__all__ = ['Size', 'Padding', 'Sized']

X = Y = int


class Size(NamedTuple):
    width: X
    height: Y

    def __str__(self) -> str:
        return f'{self.width} x {self.height}'


class Padding:
    """
    Padding to be applied around text blocks.  May be initialized similarly to the way that
    `padding is defined in CSS <https://www.w3schools.com/Css/css_padding.asp>`__, with amounts for the top, right,
    bottom, and left sides, in that order.
    """

    __slots__ = ('top', 'right', 'bottom', 'left')
    top: Y
    right: X
    bottom: Y
    left: X

    # region Init

    @overload
    def __init__(self, /, top: Y, right: X, bottom: Y, left: X): ...

    @overload
    def __init__(self, /, top: Y, right_and_left: X, bottom: Y): ...

    @overload
    def __init__(self, /, top_and_bottom: Y, right_and_left: X): ...

    @overload
    def __init__(self, /, all_sides: int): ...

    def __init__(self, *args):
        n_args = len(args)
        if not args or n_args > 4:
            raise ValueError(f'Padding may be initialized with 1 to 4 integers; found {n_args} args')
        elif not all(isinstance(a, int) for a in args):
            raise TypeError('Padding may be initialized with 1 to 4 integers; found invalid types')

        if n_args == 4:
            self.top, self.right, self.bottom, self.left = args
        elif n_args == 3:
            self.top, self.right, self.bottom = args
            self.left = self.right
        elif n_args == 2:
            self.top, self.right = self.bottom, self.left = args
        else:
            self.top = self.right = self.bottom = self.left = args[0]

    # endregion

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.top}, {self.right}, {self.bottom}, {self.left})'

    def __eq__(self, op: Padding) -> bool:
        if not isinstance(op, Padding):
            return NotImplemented
        return self.top == op.top and self.right == op.right and self.bottom == op.bottom and self.left == op.left

    def items(self) -> Iterator[tuple[Side, int]]:
        yield Side.TOP, self.top
        yield Side.RIGHT, self.right
        yield Side.BOTTOM, self.bottom
        yield Side.LEFT, self.left


class Sized(ABC):
    __slots__ = ()

    @property
    @abstractmethod
    def width(self) -> X:
        raise NotImplementedError

    @property
    @abstractmethod
    def height(self) -> Y:
        raise NotImplementedError

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def size_str(self) -> str:
        return '{} x {}'.format(*self.size)
