"""Tag classification tables and fixed patterns used by the converter."""

import re

# Elements whose subtree is skipped entirely
IGNORE_TAGS = frozenset(
    {
        "script",
        "noscript",
        "style",
        "object",
        "applet",
        "iframe",
    }
)

# Elements surrounded by a blank line
PARAGRAPH_TAGS = frozenset(
    {
        "p",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "table",
        "ol",
        "ul",
        "dl",
        "dd",
        "blockquote",
        "dialog",
        "figure",
        "aside",
        "section",
    }
)

# Elements surrounded by a single line break
BLOCK_TAGS = frozenset(
    {
        "div",
        "address",
        "li",
        "dt",
        "center",
        "del",
        "article",
        "header",
        "footer",
        "nav",
        "pre",
        "legend",
        "tr",
    }
)

# Elements with bespoke handling
PLAINTEXT = "plaintext"
PRE = "pre"
BR = "br"
HR = "hr"
TD = "td"
TH = "th"
TR = "tr"
OL = "ol"
UL = "ul"
LI = "li"
A = "a"
TABLE = "table"

HREF = "href"
BORDER = "border"

NEWLINE = "\n"
SPACE = " "
TABLE_SEPARATOR = " | "
ROW_MARKER = "| "
HORIZONTAL_RULE = "-" * 31 + NEWLINE

# Characters that make a leading space in the next text run redundant
WHITESPACE = frozenset({" ", "\n", "\r"})

# Trimmed from both ends of the final text; Unicode spaces such as NBSP are kept
ASCII_WHITESPACE = " \t\n\v\f\r\0"

HTML_PATTERN = re.compile(r"[<&]")
ABSOLUTE_URL_PATTERN = re.compile(r"^[a-z]+://[a-z0-9]", re.IGNORECASE)
NON_PROTOCOL_PATTERN = re.compile(r":/?/?(.*)")
ALL_WHITESPACE_PATTERN = re.compile(r"\s+")
CARRIAGE_RETURN_PATTERN = re.compile(r"\r\n?")
LEADING_INTEGER_PATTERN = re.compile(r"^\s*([+-]?\d+)")


def is_ignored(name: str) -> bool:
    return name in IGNORE_TAGS


def is_paragraph(name: str) -> bool:
    return name in PARAGRAPH_TAGS


def is_block(name: str) -> bool:
    return name in BLOCK_TAGS
