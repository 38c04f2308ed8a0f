from __future__ import annotations

from tests import path_setup  # noqa: F401

import unittest

from html2plain.render.whitespace import (
    normalize_whitespace,
    remove_line_edge_whitespace,
    remove_unnecessary_empty_lines,
)


class WhitespaceTests(unittest.TestCase):
    def test_line_edges_trimmed(self) -> None:
        self.assertEqual(remove_line_edge_whitespace("a  \n\t b"), "a\nb")
        self.assertEqual(remove_line_edge_whitespace("a \t \n \t\n b"), "a\n\nb")

    def test_spaces_around_tab_collapse(self) -> None:
        self.assertEqual(remove_line_edge_whitespace("a  \t  b"), "a\tb")
        self.assertEqual(remove_line_edge_whitespace("\n\tA\tB"), "\nA\tB")

    def test_blank_lines_collapse(self) -> None:
        self.assertEqual(remove_unnecessary_empty_lines("a\n\n\n\nb"), "a\n\nb")
        self.assertEqual(remove_unnecessary_empty_lines("a\n\nb\nc"), "a\n\nb\nc")

    def test_normalize(self) -> None:
        self.assertEqual(normalize_whitespace("  \n\n a \n\n\n b \n "), "a\n\nb")
        self.assertEqual(normalize_whitespace(" \n\t \n"), "")

    def test_only_ascii_whitespace_is_stripped(self) -> None:
        self.assertEqual(normalize_whitespace("\u3000x\u3000\n"), "\u3000x\u3000")
        self.assertEqual(normalize_whitespace("\v\f x \r\0"), "x")


if __name__ == "__main__":
    unittest.main()
