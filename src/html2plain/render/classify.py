from __future__ import annotations

import re

from bs4.element import PageElement, Tag

from html2plain.parse.html import is_element, is_text, tag_name

HORIZONTAL_RULE = "-" * 63
IMAGE_PLACEHOLDER = "[image]"

HEADINGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
SKIPPED_TAGS = frozenset({"style", "head", "title", "meta", "script"})

PREFIXES: dict[str, str] = {
    "hr": HORIZONTAL_RULE + "\n",
    **{name: "\n" for name in HEADINGS},
    "ol": "\n",
    "ul": "\n",
    "tr": "\n",
    "p": "\n",
    "div": "\n",
    "td": "\t",
    "th": "\t",
    "li": "- ",
}

_INLINE_WHITESPACE = re.compile(r"[\t\n\f\r ]+")


def collapse_whitespace(text: str) -> str:
    return _INLINE_WHITESPACE.sub(" ", text)


def next_element_name(node: PageElement) -> str | None:
    """Return the lowercase tag name of the next element sibling of ``node``.

    Text, comment and other non-element siblings are skipped. Returns None when
    no element follows ``node`` under the same parent.
    """
    sibling = node.next_sibling
    while sibling is not None:
        if isinstance(sibling, Tag):
            return tag_name(sibling)
        sibling = sibling.next_sibling
    return None


def prefix_node(node: PageElement) -> tuple[str, bool]:
    """Return the text emitted on entering ``node`` and whether to visit its children."""
    if is_text(node):
        return collapse_whitespace(str(node)), False
    if not is_element(node):
        return "", False

    name = tag_name(node)
    if name == "img":
        return IMAGE_PLACEHOLDER, False
    if name in SKIPPED_TAGS:
        return "", False
    return PREFIXES.get(name, ""), True


def suffix_node(node: PageElement) -> str:
    """Return the text emitted once every child of ``node`` has been processed."""
    if not is_element(node):
        return ""

    name = tag_name(node)
    output = ""
    if name in HEADINGS or name == "li":
        output = "\n"
    elif name in ("p", "br"):
        if next_element_name(node) != "div":
            output = "\n"
    elif name == "div":
        # Consecutive divs share one line break; a trailing div adds none.
        following = next_element_name(node)
        if following is not None and following != "div":
            output = "\n"

    # Links directly before a heading get an extra line.
    if name == "a" and next_element_name(node) in HEADINGS:
        output += "\n"
    return output
