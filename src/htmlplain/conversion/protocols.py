"""Protocol definitions for plain text conversion."""

from typing import Optional, Protocol

from bs4 import Tag


class DocumentParser(Protocol):
    """
    Protocol for the HTML parser collaborator.

    Implementations turn markup into a node tree and hand back the
    document's ``/html/body`` element.
    """

    def find_body(self, html: str) -> Optional[Tag]:
        """
        Parse HTML and locate the body element.

        Args:
            html: Raw HTML markup

        Returns:
            The body element, or None if the document has none
        """
        ...


class PlainTextConverter(Protocol):
    """
    Protocol for converting HTML to plain text.
    """

    def convert(self, html: Optional[str]) -> Optional[str]:
        """
        Convert HTML to plain text.

        Args:
            html: HTML content string, or None

        Returns:
            Plain text, or None when there is nothing to convert
        """
        ...
