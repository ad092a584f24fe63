"""
group-variant: Expand grouped variants in utility-class strings.

Turns shorthand such as ``hover:(bg-red text-white)`` into the flat form
``hover:bg-red hover:text-white``. Groups nest, and nested prefixes compose.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    group-variant "sm:hover:(bg-red text-white)"

Library Usage:
    from group_variant import transform

    transform("a:(b:(c) d)")  # "a:b:c a:d"
"""

from .exceptions import ExpansionError, InputTooLongError, MalformedGroupError
from .machine import scan
from .models import ExpansionResult, Malformation, MalformationKind, Span
from .normalizer import normalize_whitespace
from .splicer import splice
from .transformer import create_transformer, expand, transform

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "transform",
    "expand",
    "create_transformer",
    "scan",
    "normalize_whitespace",
    "splice",
    # Data models
    "ExpansionResult",
    "Malformation",
    "MalformationKind",
    "Span",
    # Exceptions
    "ExpansionError",
    "InputTooLongError",
    "MalformedGroupError",
    # Version
    "__version__",
]
