"""Recursive conversion of a parsed HTML tree into plain text."""

from __future__ import annotations

from bs4.element import CData, NavigableString, PreformattedString, Tag

from .buffer import OutputBuffer
from .context import FormattingContext, derive_child_context
from .formatters import (
    append_block_break,
    append_horizontal_rule,
    append_line_break,
    append_paragraph_break,
    enclosing_table,
    format_list_item,
    is_data_table,
    link_annotation,
)
from .tags import (
    A,
    ALL_WHITESPACE_PATTERN,
    BR,
    HR,
    HREF,
    LI,
    PLAINTEXT,
    ROW_MARKER,
    SPACE,
    TABLE_SEPARATOR,
    TD,
    TH,
    TR,
    WHITESPACE,
    is_block,
    is_ignored,
    is_paragraph,
)


def is_text(node: object) -> bool:
    """Character data that is rendered: plain strings and CDATA sections."""
    if not isinstance(node, NavigableString):
        return False
    # Comments, doctypes and processing instructions are never rendered
    return not isinstance(node, PreformattedString) or isinstance(node, CData)


def normalize_text(text: str, out: OutputBuffer, context: FormattingContext) -> str:
    """
    Prepare a text node for appending.

    Outside preformatted mode every whitespace run becomes a single space,
    and a leading space is dropped when the buffer already ends in
    whitespace.
    """
    if context.pre:
        return text
    text = ALL_WHITESPACE_PATTERN.sub(SPACE, text)
    if out.last_char() in WHITESPACE:
        text = text.lstrip()
    return text


class NodeConverter:
    """
    Walks a node tree depth-first and writes plain text to a buffer.

    The converter itself is stateless; everything that changes during a
    walk lives in the buffer and in the contexts handed down the tree.

    Example:
        out = NodeConverter().convert(body, OutputBuffer(), FormattingContext())
        text = out.getvalue().strip()
    """

    def convert(self, parent: Tag, out: OutputBuffer, context: FormattingContext) -> OutputBuffer:
        """
        Append the plain text rendering of ``parent`` to ``out``.

        Args:
            parent: Element to render
            out: Buffer shared by the whole conversion
            context: Context inherited from the enclosing element

        Returns:
            The same buffer
        """
        name = parent.name
        if is_paragraph(name):
            append_paragraph_break(out)
        elif is_block(name):
            append_block_break(out)

        if name == LI:
            format_list_item(out, context)
        if name == TR and is_data_table(enclosing_table(parent)):
            out.append(ROW_MARKER)

        for node in parent.children:
            if is_text(node):
                out.append(normalize_text(str(node), out, context))
            elif isinstance(node, Tag):
                if node.name == PLAINTEXT:
                    out.append(node.get_text())
                elif not is_ignored(node.name):
                    self.convert(node, out, derive_child_context(node.name, context))
                    self._close_element(node, out, context)

        return out

    def _close_element(self, node: Tag, out: OutputBuffer, context: FormattingContext) -> None:
        """Write whatever follows an element once its content is rendered."""
        name = node.name
        if name == BR:
            append_line_break(out)
        elif name == HR:
            append_horizontal_rule(out)
        elif name in (TD, TH):
            out.append(TABLE_SEPARATOR if is_data_table(enclosing_table(node)) else SPACE)
        elif name == A and context.show_links:
            annotation = link_annotation(node.get(HREF), node.get_text())
            if annotation:
                out.append(annotation)
        elif is_paragraph(name):
            append_paragraph_break(out)
        elif is_block(name):
            append_block_break(out)
