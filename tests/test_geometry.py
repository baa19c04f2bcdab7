#!/usr/bin/env python

from unittest import TestCase, main

from text_block_layout import Block
from text_block_layout.enums import Side
from text_block_layout.geometry import Size, Padding


class SizeTest(TestCase):
    def test_size_str(self):
        self.assertEqual('3 x 4', str(Size(3, 4)))

    def test_block_size(self):
        block = Block.of_text('abc\nde')
        self.assertEqual(Size(3, 2), block.size)
        self.assertEqual('3 x 2', block.size_str)
        self.assertEqual('<Block[3 x 2]>', repr(block))

    def test_empty_block_size(self):
        self.assertEqual((0, 0), Block.empty().size)
        self.assertEqual((4, 0), Block.of_width(4).size)


class PaddingTest(TestCase):
    def test_css_style_args(self):
        cases = {
            (1, 2, 3, 4): (1, 2, 3, 4),
            (1, 2, 3): (1, 2, 3, 2),
            (1, 2): (1, 2, 1, 2),
            (1,): (1, 1, 1, 1),
        }
        for args, expected in cases.items():
            with self.subTest(args=args):
                pad = Padding(*args)
                self.assertEqual(expected, (pad.top, pad.right, pad.bottom, pad.left))

    def test_bad_arg_count(self):
        for args in ((), (1, 2, 3, 4, 5)):
            with self.subTest(args=args), self.assertRaises(ValueError):
                Padding(*args)

    def test_bad_arg_type(self):
        with self.assertRaises(TypeError):
            Padding(1, 'a')

    def test_equality(self):
        self.assertEqual(Padding(1, 2), Padding(1, 2, 1, 2))
        self.assertNotEqual(Padding(1), Padding(2))
        self.assertNotEqual(Padding(1), 1)

    def test_repr(self):
        self.assertEqual('Padding(1, 2, 1, 2)', repr(Padding(1, 2)))

    def test_items_follow_css_order(self):
        expected = [(Side.TOP, 1), (Side.RIGHT, 2), (Side.BOTTOM, 3), (Side.LEFT, 4)]
        self.assertEqual(expected, list(Padding(1, 2, 3, 4).items()))

    def test_padded_block_size(self):
        block = Block.of_text('ab').padded(Padding(1, 2, 3, 4))
        self.assertEqual(Size(8, 5), block.size)


if __name__ == '__main__':
    main(verbosity=2)
