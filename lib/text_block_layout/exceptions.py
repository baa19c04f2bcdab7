"""
Text Block Layout Exceptions

:author: Doug Skrypa
"""

from __future__ import annotations

from typing import Any

__all__ = ['TextBlockError', 'InvalidDimension', 'InvalidFill']


class TextBlockError(Exception):
    """Base exception for errors in text block layout"""


class InvalidDimension(TextBlockError):
    """Raised when a negative width, height, or padding amount is requested"""

    def __init__(self, name: str, value: Any):
        self.name = name
        self.value = value

    def __str__(self) -> str:
        return f'Invalid {self.name}={self.value!r} - expected a non-negative integer'


class InvalidFill(InvalidDimension):
    """Raised when a fill character would not occupy exactly one display column"""

    def __str__(self) -> str:
        return f'Invalid {self.name}={self.value!r} - expected a single character with a display width of 1'
