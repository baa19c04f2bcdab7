#!/usr/bin/env python

from __future__ import annotations

import logging

from cli_command_parser import Command, Counter, main

from text_block_layout import Block

log = logging.getLogger(__name__)


class MathExpressions(Command):
    """Renders the steps of an integral calculation using text blocks"""

    verbose = Counter('-v', help='Increase logging verbosity (can specify multiple times)')

    def _init_command_(self):
        log_fmt = '%(asctime)s %(levelname)s %(name)s %(lineno)d %(message)s' if self.verbose > 1 else '%(message)s'
        logging.basicConfig(level=logging.DEBUG if self.verbose else logging.INFO, format=log_fmt)

    def main(self):
        expr_1 = integral(func(pow2(Block.of('cos')), Block.of('x')), 'dx')
        expr_2 = integral(pow2(paren(div(add(pow_(e(), 'ix'), pow_(e(), '-ix')), Block.of(2)))), 'dx')
        expr_3 = mult(
            div(Block.of(1), Block.of(4)),
            integral(paren(add(pow_(e(), '2ix'), add(Block.of(2), pow_(e(), '-2ix')))), 'dx'),
        )
        expr_4 = add(
            mult(div(Block.of(1), Block.of(4)), paren(add(Block.of('2x'), func(Block.of('sin'), Block.of('2x'))))),
            Block.of('C'),
        )

        left_column = Block.of_width(expr_1.width)
        lines = (equals(expr_1, expr_2), equals(left_column, expr_3), equals(left_column, expr_4))
        calculation = lines[0]
        for line in lines[1:]:
            calculation = calculation.pad_bottom(2).stack_left(line)

        log.debug(f'Rendering calculation with size={calculation.size}')
        print(calculation)


def e() -> Block:
    return Block.of('e')


def add(a: Block, b: Block) -> Block:
    return a.beside_center_bottom(Block.of(' + ')).beside_center_bottom(b)


def pow_(base: Block, exponent: Block | str) -> Block:
    exponent = Block.of(exponent)
    return base.pad_top(exponent.height).beside_top(exponent)


def pow2(base: Block) -> Block:
    return pow_(base, Block.of(2))


def mult(a: Block, b: Block) -> Block:
    return a.pad_right(1).beside_center_bottom(b)


def div(dividend: Block, divisor: Block) -> Block:
    bar = Block.of_width(max(dividend.width, divisor.width)).pad_bottom(1, '─')
    return dividend.stack_center_right(bar).stack_center_right(divisor)


def func(name: Block, argument: Block) -> Block:
    return name.beside_center_bottom(paren(argument))


def equals(left: Block, right: Block) -> Block:
    return left.beside_center_bottom(Block.of('  =  ')).beside_center_bottom(right)


def growing_middle_stack(height: int, top: str, middle: str, bottom: str) -> Block:
    return Block.of(top).stack_left(Block.of_width(1).pad_bottom(height - 2, middle)).stack_left(Block.of(bottom))


def paren(expr: Block) -> Block:
    if expr.height <= 1:
        left, right = Block.of('('), Block.of(')')
    else:
        left = growing_middle_stack(expr.height, '⎛', '⎜', '⎝')
        right = growing_middle_stack(expr.height, '⎞', '⎟', '⎠')
    return left.beside_center_bottom(expr).beside_center_bottom(right)


def integral(expr: Block, differential: str) -> Block:
    symbol = Block.of('⌠').add_multiple_texts(['⎮', '⌡'])
    return symbol.pad_right(1).beside_center_top(expr).pad_right(1).beside_center_top(Block.of(differential))


if __name__ == '__main__':
    main()
