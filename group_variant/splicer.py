"""Reassembly of expanded text from replacement spans."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Span


def splice(text: str, spans: Iterable[Span]) -> str:
    """Substitute each span's content for its inclusive range of `text`.

    Spans must be ordered by `start` and must not overlap; text between
    spans is copied verbatim.

    Args:
        text: Normalized text the spans were produced from.
        spans: Replacements in increasing offset order.

    Returns:
        str: The rewritten text. `text` itself when there are no spans.

    Examples:
        splice("x a:(b)", [Span(start=2, end=6, content="a:b")])  # "x a:b"
    """
    parts: list[str] = []
    offset = 0
    for span in spans:
        parts.append(text[offset : span.start])
        parts.append(span.content)
        offset = span.end + 1

    if not parts:
        return text

    parts.append(text[offset:])
    return "".join(parts)
