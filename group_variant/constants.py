"""Constants used across the group-variant package."""

from __future__ import annotations

# Whitespace the scanner never treats as a delimiter. The plain space is
# absent: it is the only separator the machine understands.
WHITESPACE_CHARS = frozenset(
    {
        "\n",
        "\t",
        "\r",
        "\f",
        "\v",
        "\u00a0",
        "\u1680",
        "\u2000",
        "\u200a",
        "\u2028",
        "\u2029",
        "\u202f",
        "\u205f",
        "\u3000",
        "\ufeff",
    }
)

# Characters that end a token outside of a group and break an open group.
FORBIDDEN_CHARS = frozenset({'"', "'", "`", "\\", "[", "\n", "\r"}) | WHITESPACE_CHARS

SEPARATOR_CHAR = " "
VARIANT_CHAR = ":"
GROUP_OPEN = "("
GROUP_CLOSE = ")"

# Adapter limits
DEFAULT_MAX_INPUT_LENGTH = 100_000
