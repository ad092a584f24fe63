"""Whitespace normalization applied before scanning."""

from __future__ import annotations

import re

# Explicit set: `\s` would also match `\x1c`-`\x1f` and `\x85`, which are
# ordinary characters here.
WHITESPACE_RUN_PATTERN = re.compile(
    r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)
OPEN_PADDING_PATTERN = re.compile(r"\( ")
CLOSE_PADDING_PATTERN = re.compile(r" \)")


def normalize_whitespace(text: str) -> str:
    """Canonicalize whitespace so the scanner only ever sees single spaces.

    Collapses every run of whitespace to one space, drops the space right
    after ``(`` and right before ``)``, then trims both ends. No other
    character is touched.

    Args:
        text: Raw fragment.

    Returns:
        str: Normalized fragment.

    Examples:
        normalize_whitespace("a   b")  # "a b"
        normalize_whitespace(" x:(\\ta  b\\n) ")  # "x:(a b)"
    """
    text = WHITESPACE_RUN_PATTERN.sub(" ", text)
    text = OPEN_PADDING_PATTERN.sub("(", text)
    text = CLOSE_PADDING_PATTERN.sub(")", text)
    return text.strip(" ")
