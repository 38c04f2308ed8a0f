from __future__ import annotations

import re

_LINE_EDGE = re.compile(r"[ \t]*\n[ \t]*")
_AROUND_TAB = re.compile(r" *\t *")
_BLANK_LINES = re.compile(r"\n\n+")


def normalize_whitespace(text: str) -> str:
    text = remove_line_edge_whitespace(text)
    text = remove_unnecessary_empty_lines(text)
    # ASCII whitespace only; U+3000 and friends are content.
    return text.strip(" \t\n\v\f\r\0")


def remove_line_edge_whitespace(text: str) -> str:
    text = _LINE_EDGE.sub("\n", text)
    return _AROUND_TAB.sub("\t", text)


def remove_unnecessary_empty_lines(text: str) -> str:
    # At most one blank line between blocks.
    return _BLANK_LINES.sub("\n\n", text)
