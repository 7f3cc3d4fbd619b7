"""Break and decoration formatters that write structural markup."""

from typing import Optional

from bs4 import Tag

from .buffer import OutputBuffer
from .context import FormattingContext, ListKind
from .tags import (
    ABSOLUTE_URL_PATTERN,
    ALL_WHITESPACE_PATTERN,
    BORDER,
    HORIZONTAL_RULE,
    LEADING_INTEGER_PATTERN,
    NEWLINE,
    NON_PROTOCOL_PATTERN,
    TABLE,
)


def append_paragraph_break(out: OutputBuffer) -> None:
    """Leave the buffer ending in exactly one blank line."""
    out.trim_trailing_blanks()
    if out.endswith(NEWLINE):
        if not out.endswith(NEWLINE * 2):
            out.append(NEWLINE)
    else:
        out.append(NEWLINE * 2)


def append_block_break(out: OutputBuffer) -> None:
    """Leave the buffer ending in a line break, adding at most one."""
    out.trim_trailing_blanks()
    if not out.endswith(NEWLINE):
        out.append(NEWLINE)


def append_line_break(out: OutputBuffer) -> None:
    out.trim_trailing_blanks()
    out.append(NEWLINE)


def append_horizontal_rule(out: OutputBuffer) -> None:
    out.trim_trailing_blanks()
    if not out.endswith(NEWLINE):
        out.append(NEWLINE)
    out.append(HORIZONTAL_RULE)


def format_list_item(out: OutputBuffer, context: FormattingContext) -> None:
    """
    Write the bullet or number for a list item.

    Unordered items get one asterisk per nesting level. Ordered items take
    the next marker from the list's shared counter.
    """
    if context.list_kind == ListKind.UNORDERED:
        out.append("*" * (context.ul_depth + 1) + " ")
    elif context.list_kind == ListKind.ORDERED and context.counter is not None:
        out.append(f"{context.counter.next()}. ")


def link_annotation(href: Optional[str], text: str) -> Optional[str]:
    """
    Return the parenthetical written after a link, or None.

    Only absolute URLs are annotated, and only when the link text says
    something other than the URL itself, so
    ``<a href="http://a.com">a.com</a>`` stays as the bare text.
    """
    if not href or not ABSOLUTE_URL_PATTERN.match(href):
        return None

    text = ALL_WHITESPACE_PATTERN.sub(" ", text).strip()
    if not text or text == href:
        return None

    match = NON_PROTOCOL_PATTERN.search(href)
    if match and text == match.group(1):
        return None

    return f" ({href}) "


def parse_border(value: object) -> int:
    """Read the leading integer of a border attribute; anything else is 0."""
    if value is None:
        return 0
    if isinstance(value, (list, tuple)):
        value = " ".join(str(item) for item in value)
    match = LEADING_INTEGER_PATTERN.match(str(value))
    return int(match.group(1)) if match else 0


def enclosing_table(node: Tag) -> Optional[Tag]:
    """Find the nearest table element above ``node``."""
    return node.find_parent(TABLE)


def is_data_table(table: Optional[Tag]) -> bool:
    """A table with a positive border renders with pipe separators."""
    if table is None:
        return False
    return parse_border(table.get(BORDER)) > 0
