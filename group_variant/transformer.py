"""Public entry points for expanding grouped variants."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .machine import scan
from .models import ExpansionResult
from .normalizer import normalize_whitespace
from .splicer import splice

logger = logging.getLogger(__name__)


def expand(content: str) -> ExpansionResult:
    """Expand grouped variants and report what was rewritten.

    Never raises: malformed groups are left as literal text and reported in
    `ExpansionResult.malformations`.

    Args:
        content: Raw fragment, such as the value of a ``class`` attribute.

    Returns:
        ExpansionResult: Expanded text, the spans applied to the normalized
            fragment, and any groups that were left untouched.

    Examples:
        expand("hover:(bg-red text-white)").text  # "hover:bg-red hover:text-white"
        expand("a:()").malformations  # [Malformation(kind=EMPTY_GROUP, offset=3)]
    """
    normalized = normalize_whitespace(content)
    result = scan(normalized)
    logger.debug(
        "Expanded %d group(s), left %d malformed group(s) as text",
        len(result.spans),
        len(result.malformations),
    )
    return ExpansionResult(
        text=splice(normalized, result.spans),
        spans=result.spans,
        malformations=result.malformations,
    )


def transform(content: str) -> str:
    """Expand grouped variants in a fragment.

    Args:
        content: Raw fragment.

    Returns:
        str: Whitespace-normalized fragment with every well-formed group
            expanded.

    Examples:
        transform("sm:hover:(bg-red)")  # "sm:hover:bg-red"
        transform("a:(b:(c) d)")  # "a:b:c a:d"
    """
    return expand(content).text


def create_transformer() -> Callable[[str], str]:
    """Return a callable a host integration can apply to each fragment."""
    return transform
