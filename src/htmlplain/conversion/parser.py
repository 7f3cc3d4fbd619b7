"""BeautifulSoup-backed document parser."""

import logging
from typing import Optional

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

DEFAULT_PARSER = "lxml"
SUPPORTED_PARSERS = ("lxml", "html5lib", "html.parser")


class SoupDocumentParser:
    """
    Parses markup with BeautifulSoup and finds ``/html/body``.

    ``lxml`` and ``html5lib`` always build an html/body skeleton around the
    content. ``html.parser`` keeps the markup as written, so fragments
    without explicit html and body tags have no body.

    Example:
        parser = SoupDocumentParser("html5lib")
        body = parser.find_body("<p>Hello</p>")
    """

    def __init__(self, builder: str = DEFAULT_PARSER):
        """
        Initialize the parser.

        Args:
            builder: BeautifulSoup tree builder name

        Raises:
            ValueError: If the builder is not one of SUPPORTED_PARSERS
        """
        if builder not in SUPPORTED_PARSERS:
            raise ValueError(f"Unsupported parser: {builder}. Use one of {', '.join(SUPPORTED_PARSERS)}.")
        self.builder = builder

    def parse(self, html: str) -> BeautifulSoup:
        """Parse markup into a BeautifulSoup document."""
        return BeautifulSoup(html, self.builder)

    def find_body(self, html: str) -> Optional[Tag]:
        """Return the body element that is a direct child of the root html element."""
        soup = self.parse(html)
        root = soup.find("html", recursive=False)
        if not isinstance(root, Tag):
            logger.debug("Document has no root <html> element")
            return None
        body = root.find("body", recursive=False)
        if not isinstance(body, Tag):
            logger.debug("Document has no <body> element")
            return None
        return body
