"""Top-level HTML to plain text conversion."""

from __future__ import annotations

import logging
from typing import Optional

from ..models.config import ConversionConfig
from .buffer import OutputBuffer
from .context import FormattingContext
from .converter import NodeConverter
from .parser import SoupDocumentParser
from .protocols import DocumentParser
from .tags import ASCII_WHITESPACE, CARRIAGE_RETURN_PATTERN, HTML_PATTERN, NEWLINE

logger = logging.getLogger(__name__)


class HtmlToPlainText:
    """
    Converts HTML to a readable plain text approximation.

    Paragraphs, blocks, lists, tables, links, rules and line breaks are
    rendered with whitespace and ASCII punctuation only.

    Example:
        converter = HtmlToPlainText(ConversionConfig(show_links=False))
        text = converter.convert("<p>Hello <b>world</b></p>")  # "Hello world"
    """

    def __init__(
        self,
        config: Optional[ConversionConfig] = None,
        parser: Optional[DocumentParser] = None,
    ):
        """
        Initialize the converter.

        Args:
            config: Conversion options (defaults if None)
            parser: Document parser (a SoupDocumentParser for config.parser if None)
        """
        self.config = config or ConversionConfig()
        self._parser = parser or SoupDocumentParser(self.config.parser)
        self._converter = NodeConverter()

    def convert(self, html: Optional[str]) -> Optional[str]:
        """
        Convert HTML to plain text.

        Args:
            html: HTML content string

        Returns:
            Plain text, the input itself when it holds no markup, or None
            when the input is None or the document has no body
        """
        if html is None:
            return None
        if not HTML_PATTERN.search(html):
            logger.debug("No markup found, returning input unchanged")
            return html

        body = self._parser.find_body(html)
        if body is None:
            return None

        context = FormattingContext(show_links=self.config.show_links)
        out = self._converter.convert(body, OutputBuffer(), context)
        text = CARRIAGE_RETURN_PATTERN.sub(NEWLINE, out.getvalue().strip(ASCII_WHITESPACE))

        logger.debug(f"Converted {len(html)} characters of HTML to {len(text)} characters of text")
        return text


def plain_text(
    html: Optional[str],
    show_links: bool = True,
    parser: str = "lxml",
) -> Optional[str]:
    """
    Convert some HTML into a plain text approximation.

    Args:
        html: HTML content string, or None
        show_links: Append the URL after links to absolute URLs
        parser: BeautifulSoup tree builder name

    Returns:
        Plain text, or None when there is nothing to convert
    """
    config = ConversionConfig(show_links=show_links, parser=parser)
    return HtmlToPlainText(config).convert(html)
