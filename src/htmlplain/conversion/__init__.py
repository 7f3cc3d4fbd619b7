"""Content conversion for htmlplain (HTML tree to plain text)."""

from .buffer import OutputBuffer
from .context import FormattingContext, ListKind, NumberingCounter, derive_child_context
from .converter import NodeConverter
from .parser import SoupDocumentParser
from .plain_text import HtmlToPlainText, plain_text
from .protocols import DocumentParser, PlainTextConverter

__all__ = [
    # Protocols
    "DocumentParser",
    "PlainTextConverter",
    # Implementations
    "HtmlToPlainText",
    "NodeConverter",
    "SoupDocumentParser",
    "plain_text",
    # Building blocks
    "FormattingContext",
    "ListKind",
    "NumberingCounter",
    "OutputBuffer",
    "derive_child_context",
]
