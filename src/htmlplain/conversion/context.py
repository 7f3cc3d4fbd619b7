"""Formatting context passed from a node to its children."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .tags import OL, PRE, UL

# Ordered list markers alternate between numbers and letters by depth
NUMBER_SEEDS = ("1", "a")


class ListKind(str, Enum):
    """Kind of list whose items are currently being rendered."""

    NONE = "none"
    UNORDERED = "unordered"
    ORDERED = "ordered"


def successor(marker: str) -> str:
    """
    Return the marker following ``marker`` in its sequence.

    Numeric markers count up ("9" -> "10"). Alphabetic markers carry like a
    base-26 odometer ("z" -> "aa", "az" -> "ba").

    Examples:
        >>> successor("1")
        '2'
        >>> successor("z")
        'aa'
    """
    if marker.isdigit():
        return str(int(marker) + 1)

    chars = list(marker)
    index = len(chars) - 1
    while index >= 0:
        char = chars[index]
        if char == "z":
            chars[index] = "a"
        elif char == "Z":
            chars[index] = "A"
        else:
            chars[index] = chr(ord(char) + 1)
            return "".join(chars)
        index -= 1
    # Every position carried
    return ("A" if marker[0] == "Z" else "a") + "".join(chars)


class NumberingCounter:
    """
    Marker sequence owned by one ordered list.

    Every direct item of the list shares the same instance, so each item
    takes the next marker. Nested lists get a counter of their own.
    """

    def __init__(self, start: str = "1"):
        self.value = start

    def __repr__(self) -> str:
        return f"NumberingCounter({self.value!r})"

    @classmethod
    def for_depth(cls, depth: int) -> NumberingCounter:
        return cls(NUMBER_SEEDS[depth % 2])

    def next(self) -> str:
        """Return the current marker and advance to the following one."""
        marker = self.value
        self.value = successor(marker)
        return marker


@dataclass(frozen=True)
class FormattingContext:
    """
    Formatting state inherited by a node's children.

    Attributes:
        pre: Inside a preformatted element (no whitespace collapsing)
        show_links: Append the href after absolute links
        list_kind: Kind of the innermost enclosing list
        ul_depth: Nesting depth of unordered lists (-1 outside any)
        ol_depth: Nesting depth of ordered lists (-1 outside any)
        counter: Numbering of the innermost enclosing ordered list
    """

    pre: bool = False
    show_links: bool = True
    list_kind: ListKind = ListKind.NONE
    ul_depth: int = -1
    ol_depth: int = -1
    counter: Optional[NumberingCounter] = None

    def derive(self, **changes) -> FormattingContext:
        """Return a copy with the given fields overridden."""
        return replace(self, **changes)


def derive_child_context(name: str, context: FormattingContext) -> FormattingContext:
    """
    Compute the context for the children of an element named ``name``.

    Lists bump their own depth and become the active list; an ordered
    list also gets a fresh counter. ``pre`` switches on preformatted mode.
    Any other element hands its own context down unchanged.
    """
    if name == UL:
        return context.derive(list_kind=ListKind.UNORDERED, ul_depth=context.ul_depth + 1)
    if name == OL:
        depth = context.ol_depth + 1
        return context.derive(
            list_kind=ListKind.ORDERED,
            ol_depth=depth,
            counter=NumberingCounter.for_depth(depth),
        )
    if name == PRE:
        return context.derive(pre=True)
    return context
