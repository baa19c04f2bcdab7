from .block import Block
from .constants import DEFAULT_FILL
from .enums import Align, Side
from .exceptions import TextBlockError, InvalidDimension, InvalidFill
from .geometry import Padding, Size
from .width import text_width, char_width
