"""
htmlplain - Convert HTML into a readable plain text approximation.

Usage:
    from htmlplain import plain_text, HtmlToPlainText, ConversionConfig

    text = plain_text("<p>Hello <b>world</b></p>")

    converter = HtmlToPlainText(ConversionConfig(show_links=False))
    text = converter.convert(html)
"""

__version__ = "1.0.0"

from .conversion import HtmlToPlainText, SoupDocumentParser, plain_text
from .models.config import ConversionConfig, HtmlPlainConfig

__all__ = [
    "__version__",
    # Core
    "HtmlToPlainText",
    "SoupDocumentParser",
    "plain_text",
    # Config
    "ConversionConfig",
    "HtmlPlainConfig",
]
