"""
Enums for the text block layout package.

:author: Doug Skrypa
"""

from __future__ import annotations

from enum import Enum
from typing import Type

__all__ = ['Side', 'Align']

# fmt: off
ALIGN_ALIASES = {
    'top': 'START', 'left': 'START', 't': 'START', 'l': 'START',
    'bottom': 'END', 'right': 'END', 'b': 'END', 'r': 'END',
    'center': 'CENTER_START', 'c': 'CENTER_START',
}
# fmt: on


class MissingMixin:
    __aliases = None

    def __init_subclass__(cls, aliases: dict[str, str] = None):
        cls.__aliases = aliases

    @classmethod
    def _missing_(cls: Type[Enum], value: str):
        if not isinstance(value, str):
            return None
        if aliases := cls.__aliases:  # noqa
            try:
                return cls[aliases[value.lower()]]
            except KeyError:
                pass
        try:
            return cls[value.upper().replace(' ', '_').replace('-', '_')]
        except KeyError:
            return None  # This is what the default implementation does to signal an exception should be raised


class Side(MissingMixin, Enum, aliases={'l': 'LEFT', 'r': 'RIGHT', 't': 'TOP', 'b': 'BOTTOM'}):
    TOP = 'top'
    BOTTOM = 'bottom'
    LEFT = 'left'
    RIGHT = 'right'

    @property
    def is_horizontal(self) -> bool:
        """True for sides that add columns (left/right), False for sides that add rows (top/bottom)"""
        return self is Side.LEFT or self is Side.RIGHT


class Align(MissingMixin, Enum, aliases=ALIGN_ALIASES):
    """
    The edge that is kept flush when joining blocks that differ in their cross dimension.

    START keeps the top (beside) or left (stack) edges aligned, and END keeps the bottom / right edges aligned.  The
    CENTER variants split the padding evenly; when the difference is odd, CENTER_START leans toward the start edge (the
    extra row / column is placed after the content) and CENTER_END leans toward the end edge.
    """

    START = 'start'
    CENTER_START = 'center_start'
    CENTER_END = 'center_end'
    END = 'end'

    def split(self, amount: int) -> tuple[int, int]:
        """
        :param amount: The total number of rows / columns of padding to distribute
        :return: Tuple of (before, after) padding amounts
        """
        if self is Align.START:
            return 0, amount
        elif self is Align.END:
            return amount, 0
        half, extra = divmod(amount, 2)
        if self is Align.CENTER_START:
            return half, half + extra
        return half + extra, half
