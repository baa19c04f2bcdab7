#!/usr/bin/env python

from unittest import TestCase, main

from text_block_layout import Block
from text_block_layout.width import text_width


class OverlayTest(TestCase):
    def test_transparent_cell_reveals_background(self):
        block = Block.of_text('O*').in_front_of(Block.of_text('XY'), '*')
        self.assertEqual(['OY'], block.to_lines())

    def test_default_transparent_is_space(self):
        block = Block.of_text('a b').in_front_of(Block.of_text('123\n456'))
        self.assertEqual(['a2b', '456'], block.to_lines())

    def test_union_size(self):
        cases = [
            (Block.of_text('ab'), Block.of_text('123\n456'), (3, 2)),
            (Block.of_text('abcd\ne'), Block.of_text('1'), (4, 2)),
            (Block.empty(), Block.of_text('1\n2\n3'), (1, 3)),
            (Block.of_width(5), Block.of_height(2), (5, 2)),
        ]
        for fg, bg, expected in cases:
            with self.subTest(fg=fg, bg=bg):
                block = fg.in_front_of(bg, '*')
                self.assertEqual(expected, block.size)
                self.assertTrue(all(text_width(line) == block.width for line in block.to_lines()))

    def test_foreground_extended_with_own_fill(self):
        block = Block.of_text('a', fill='.').in_front_of(Block.of_text('xyz'))
        self.assertEqual(['a..'], block.to_lines())

    def test_background_extended_with_own_fill(self):
        block = Block.of_text('***\n***').in_front_of(Block.of_text('x', fill='.'), '*')
        self.assertEqual(['x..', '...'], block.to_lines())

    def test_fully_opaque(self):
        fg, bg = Block.of_text('OO\nOO'), Block.of_text('abc\ndef\nghi')
        expected = fg.pad_to_width_right(3).pad_to_height_bottom(3)
        self.assertEqual(expected, fg.in_front_of(bg, '*'))

    def test_fully_transparent(self):
        bg = Block.of_text('abc\ndef\nghi')
        self.assertEqual(bg, Block.empty(2, 2, '*').in_front_of(bg, '*'))

    def test_fully_transparent_larger_foreground(self):
        bg = Block.of_text('ab', fill='.')
        expected = bg.pad_to_width_right(4, '.').pad_to_height_bottom(3, '.')
        self.assertEqual(expected, Block.empty(4, 3, '*').in_front_of(bg, '*'))

    def test_result_uses_foreground_fill(self):
        block = Block.of_text('a', fill='.').in_front_of(Block.of_text('b', fill='#'))
        self.assertEqual('.', block.fill)

    def test_inputs_unchanged(self):
        fg, bg = Block.of_text('a*'), Block.of_text('xyz')
        fg.in_front_of(bg, '*')
        self.assertEqual(['a*'], fg.to_lines())
        self.assertEqual(['xyz'], bg.to_lines())

    def test_zero_width_line_in_front(self):
        block = Block.of_text('\u200b').in_front_of(Block.of_height(1))
        self.assertEqual(['\u200b'], block.to_lines())
        self.assertEqual((0, 1), block.size)

    def test_boxes(self):
        front = Block.of_text('OOO\nO O\nOOO')
        back = Block.of_text('****\n*  *\n*  *\n****').pad_left(1).pad_top(1)
        expected = ['OOO  ', 'O*O**', 'OOO *', ' *  *', ' ****']
        self.assertEqual(expected, front.in_front_of(back).to_lines())


class WideOverlayTest(TestCase):
    def test_wide_foreground(self):
        block = Block.of_text('中').in_front_of(Block.of_text('xyz'))
        self.assertEqual(['中z'], block.to_lines())

    def test_wide_background_revealed(self):
        block = Block.of_text('**a').in_front_of(Block.of_text('中bc'), '*')
        self.assertEqual(['中a '], block.to_lines())

    def test_wide_background_partially_hidden(self):
        for fg, expected in (('*a', '.a'), ('a*', 'a.')):
            with self.subTest(fg=fg):
                block = Block.of_text(fg).in_front_of(Block.of_text('中', fill='.'), '*')
                self.assertEqual([expected], block.to_lines())


if __name__ == '__main__':
    main(verbosity=2)
