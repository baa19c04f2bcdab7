#!/usr/bin/env python

import logging

from cli_command_parser import Command, Counter, Option, main

from text_block_layout import Block

log = logging.getLogger(__name__)


class OverlappingBoxes(Command):
    """Demonstrates overlaying blocks, with transparency"""

    verbose = Counter('-v', help='Increase logging verbosity (can specify multiple times)')
    front = Option('-f', default='O', help='The border character to use for the box in front')
    back = Option('-b', default='*', help='The border character to use for the box in the back')
    size = Option('-s', type=int, default=5, help='The width/height of the box in front (min: 2)')

    def _init_command_(self):
        log_fmt = '%(asctime)s %(levelname)s %(name)s %(lineno)d %(message)s' if self.verbose > 1 else '%(message)s'
        logging.basicConfig(level=logging.DEBUG if self.verbose else logging.INFO, format=log_fmt)

    def main(self):
        front = square(self.front, max(self.size, 2))
        back = square(self.back, max(self.size, 2) + 2, offset_left=2, offset_top=2)
        print('Blocks can be put on top of each other, with transparency!\n')
        print(front.in_front_of(back))


def square(border: str, width: int, offset_left: int = 0, offset_top: int = 0) -> Block:
    edge = Block.of_height(1).pad_right(width, border)
    middle = Block.of_height(width - 2).pad_right(1, border).pad_right(width - 2).pad_right(1, border)
    return edge.stack_left(middle).stack_left(edge).pad_left(offset_left).pad_top(offset_top)


if __name__ == '__main__':
    main()
