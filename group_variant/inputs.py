"""Input helpers for host integrations."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import TextIO

from .constants import DEFAULT_MAX_INPUT_LENGTH
from .exceptions import InputTooLongError, MalformedGroupError
from .models import ExpansionResult

MAX_INPUT_LENGTH_ENV_VAR = "GROUP_VARIANT_MAX_INPUT_LENGTH"


def get_max_input_length(default: int = DEFAULT_MAX_INPUT_LENGTH) -> int:
    """Resolve the maximum allowed fragment length.

    Args:
        default: Fallback value in characters when the environment variable is
            unset.

    Returns:
        int: Maximum allowed fragment length in characters.

    Raises:
        ValueError: If the environment value is not a positive integer.

    Examples:
        os.environ["GROUP_VARIANT_MAX_INPUT_LENGTH"] = "4096"
        limit = get_max_input_length(default=1024)
    """
    env_value = os.environ.get(MAX_INPUT_LENGTH_ENV_VAR)
    if env_value is None:
        return default

    try:
        max_length = int(env_value)
    except ValueError as error:
        error_message = (
            f"Invalid value for {MAX_INPUT_LENGTH_ENV_VAR}: {env_value} (expected positive integer)"
        )
        raise ValueError(error_message) from error

    if max_length <= 0:
        error_message = f"{MAX_INPUT_LENGTH_ENV_VAR} must be a positive integer, got {max_length}."
        raise ValueError(error_message)

    return max_length


def enforce_input_length(fragment: str, max_length: int) -> None:
    """Reject fragments longer than `max_length` characters.

    Raises:
        InputTooLongError: If the fragment is too long.
    """
    if len(fragment) > max_length:
        raise InputTooLongError(len(fragment), max_length)


def enforce_well_formed(result: ExpansionResult, fragment: str) -> None:
    """Raise when an expansion left malformed groups behind.

    Args:
        result: Expansion of `fragment`.
        fragment: Raw fragment, used in the error message.

    Raises:
        MalformedGroupError: If `result` reports any malformed group.
    """
    if result.malformations:
        raise MalformedGroupError(fragment, result.malformations)


def read_fragments(stream: TextIO, line_mode: bool = True) -> Iterator[str]:
    """Yield the fragments contained in a text stream.

    Args:
        stream: Stream to read, typically standard input.
        line_mode: When True, every non-blank line is a fragment; otherwise the
            whole stream is a single fragment.

    Yields:
        str: Raw fragments, without line terminators.

    Examples:
        list(read_fragments(io.StringIO("a:(b c)\\n\\nd\\n")))  # ["a:(b c)", "d"]
    """
    if not line_mode:
        yield stream.read()
        return

    for line in stream:
        fragment = line.rstrip("\r\n")
        if fragment.strip():
            yield fragment
