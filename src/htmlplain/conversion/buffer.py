"""Append-only output buffer shared by one conversion call."""

from __future__ import annotations

import re

# Horizontal whitespace only; line breaks are never trimmed
_TRAILING_BLANKS = re.compile(r"[^\S\n\r\f\v]+\Z")


class OutputBuffer:
    """
    Growable text buffer written to in document order.

    Text can only be appended. The one exception is
    ``trim_trailing_blanks`` which removes spaces and tabs from the tail
    before a line break is written.

    Example:
        buffer = OutputBuffer()
        buffer.append("Hello  ")
        buffer.trim_trailing_blanks()
        buffer.append("\\n")
        buffer.getvalue()  # "Hello\\n"
    """

    def __init__(self, initial: str = ""):
        self._parts: list[str] = [initial] if initial else []

    def __len__(self) -> int:
        return sum(len(part) for part in self._parts)

    def __str__(self) -> str:
        return self.getvalue()

    def append(self, text: str) -> OutputBuffer:
        """Append text to the end of the buffer."""
        if text:
            self._parts.append(text)
        return self

    def tail(self, size: int) -> str:
        """Return up to the last ``size`` characters."""
        collected: list[str] = []
        length = 0
        for part in reversed(self._parts):
            collected.append(part)
            length += len(part)
            if length >= size:
                break
        return "".join(reversed(collected))[-size:] if size > 0 else ""

    def last_char(self) -> str:
        """Return the last character, or an empty string for an empty buffer."""
        return self._parts[-1][-1] if self._parts else ""

    def endswith(self, suffix: str) -> bool:
        return self.tail(len(suffix)) == suffix

    def trim_trailing_blanks(self) -> None:
        """Remove trailing horizontal whitespace, leaving line breaks alone."""
        while self._parts:
            trimmed = _TRAILING_BLANKS.sub("", self._parts[-1])
            if trimmed:
                self._parts[-1] = trimmed
                return
            self._parts.pop()

    def getvalue(self) -> str:
        value = "".join(self._parts)
        # Collapse parts so repeated reads stay cheap
        self._parts = [value] if value else []
        return value
