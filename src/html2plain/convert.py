from __future__ import annotations

from loguru import logger

from html2plain.parse.html import DEFAULT_PARSER, parse_html, preprocess
from html2plain.render.walker import walk
from html2plain.render.whitespace import normalize_whitespace


def convert(html: str | None, parser: str = DEFAULT_PARSER) -> str:
    """Convert an HTML document into readable plain text.

    ``parser`` names the BeautifulSoup tree builder used to parse the markup;
    the rendering rules do not depend on it. Empty or missing input yields an
    empty string.
    """
    source = preprocess(html)
    if not source:
        return ""

    document = parse_html(source, parser=parser)
    text = normalize_whitespace(walk(document))
    logger.debug(f"Converted {len(source)} chars of HTML to {len(text)} chars of text")
    return text
