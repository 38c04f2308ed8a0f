from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

# libxml2 closes an open <p> or <li> when the next one starts.
DEFAULT_PARSER = "lxml"


def preprocess(html: str | None) -> str:
    return replace_entities(fix_newlines(html or ""))


def fix_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def replace_entities(text: str) -> str:
    return text.replace("&nbsp;", " ").replace("\u00a0", " ")


def parse_html(html: str, parser: str = DEFAULT_PARSER) -> BeautifulSoup:
    # FeatureNotFound and builder errors propagate to the caller.
    return BeautifulSoup(html, parser)


def is_element(node: PageElement) -> bool:
    return isinstance(node, Tag)


def is_text(node: PageElement) -> bool:
    # Comments, CDATA, doctypes and processing instructions are strings in
    # bs4 but carry no renderable text.
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def tag_name(node: PageElement) -> str:
    if not isinstance(node, Tag):
        return ""
    return (node.name or "").lower()
