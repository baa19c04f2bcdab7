#!/usr/bin/env python

from unittest import TestCase, main

from text_block_layout.width import char_width, text_width, cell_width, split_cells, concat_rows, row_width


class WidthTest(TestCase):
    def test_empty(self):
        self.assertEqual(0, text_width(''))

    def test_ascii(self):
        self.assertEqual(5, text_width('hello'))

    def test_wide_chars(self):
        self.assertEqual(2, char_width('中'))
        self.assertEqual(4, text_width('中文'))
        self.assertEqual(10, text_width('안녕하세요'))

    def test_combining_marks(self):
        self.assertEqual(0, char_width('\u0301'))
        self.assertEqual(1, text_width('e\u0301'))
        self.assertEqual(4, text_width('cafe\u0301'))

    def test_measured_as_nfc(self):
        self.assertEqual(text_width('\uac00'), text_width('\u1100\u1161'))
        self.assertEqual(2, text_width('\u1100\u1161'))

    def test_control_chars_are_zero_width(self):
        self.assertEqual(0, char_width('\x1b'))
        self.assertEqual(2, text_width('a\x07b'))

    def test_cell_width(self):
        self.assertEqual(0, cell_width(None))
        self.assertEqual(1, cell_width('a'))
        self.assertEqual(1, cell_width('e\u0301'))
        self.assertEqual(2, cell_width('中'))


class SplitCellsTest(TestCase):
    def test_empty(self):
        self.assertEqual((), split_cells(''))

    def test_ascii(self):
        self.assertEqual(('a', 'b', 'c'), split_cells('abc'))

    def test_wide_char_continuation(self):
        self.assertEqual(('a', '中', None, 'b'), split_cells('a中b'))

    def test_length_matches_width(self):
        for text in ('abc', '中文', 'e\u0301x', '안녕 hi', ''):
            with self.subTest(text=text):
                self.assertEqual(text_width(text), len(split_cells(text)))

    def test_combining_attached_to_previous(self):
        self.assertEqual(('e\u0301', 'x'), split_cells('e\u0301x'))

    def test_leading_zero_width_attached_to_next(self):
        self.assertEqual(('\u0301a', 'b'), split_cells('\u0301ab'))

    def test_only_zero_width_kept_without_columns(self):
        for text in ('\u0301', '\u200b', '\u200b\u200d'):
            with self.subTest(text=text):
                row = split_cells(text)
                self.assertEqual((text,), row)
                self.assertEqual(0, row_width(row))


class ConcatRowsTest(TestCase):
    def test_plain_rows(self):
        self.assertEqual(('a', '中', None, 'b'), concat_rows(('a',), ('中', None), (), ('b',)))

    def test_zero_width_merged_into_following_cell(self):
        self.assertEqual(('\u200ba', 'b'), concat_rows(('\u200b',), ('a', 'b')))

    def test_zero_width_merged_into_last_cell(self):
        self.assertEqual(('a', '中\u200b', None), concat_rows(('a', '中', None), ('\u200b',)))

    def test_only_zero_width(self):
        self.assertEqual(('\u200b\u200d',), concat_rows(('\u200b',), (), ('\u200d',)))

    def test_row_width(self):
        self.assertEqual(0, row_width(()))
        self.assertEqual(1, row_width((' ',)))
        self.assertEqual(2, row_width(('中', None)))


if __name__ == '__main__':
    main(verbosity=2)
