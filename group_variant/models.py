"""Data models for group-variant."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class MachineState(Enum):
    """States of the grouped-variant scanner.

    Attributes:
        IDLE: Between tokens, or recovering after malformed input.
        PARSING_TEXT: Inside an ordinary token outside any group.
        HANDLING_VARIANT: Just read a ``:`` outside any group.
        OPENING_STACK: Just opened a group or finished a token inside one.
        PARSING_STACK_TEXT: Inside a token within a group.
        HANDLING_STACK_VARIANT: Just read a ``:`` inside a group.
        CLOSING_STACK: Just closed a nested group.
    """

    IDLE = auto()
    PARSING_TEXT = auto()
    HANDLING_VARIANT = auto()
    OPENING_STACK = auto()
    PARSING_STACK_TEXT = auto()
    HANDLING_STACK_VARIANT = auto()
    CLOSING_STACK = auto()


class MalformationKind(Enum):
    """Reasons a group was abandoned and left as literal text."""

    FORBIDDEN_CHARACTER = auto()
    EMPTY_GROUP = auto()
    UNEXPECTED_CHARACTER = auto()
    UNCLOSED_GROUP = auto()


@dataclass(frozen=True)
class Span:
    """Replacement for the inclusive range ``[start, end]`` of the normalized text.

    Attributes:
        start: Offset of the first replaced character.
        end: Offset of the last replaced character (the closing parenthesis).
        content: Expanded text substituted for the range.
    """

    start: int
    end: int
    content: str


@dataclass(frozen=True)
class Malformation:
    """A group abandoned during scanning.

    Attributes:
        kind: Why the group was abandoned.
        offset: Offset in the normalized text where scanning gave up on it.
    """

    kind: MalformationKind
    offset: int


@dataclass(frozen=True)
class ClosedChild:
    """Snapshot of a nested group that closed successfully.

    Attributes:
        variant: Variant prefix of the nested group, including the ``:``.
        start_idx: Offset where the nested group's variant begins.
        end_idx: Offset of the nested group's closing parenthesis.
        tokens: Tokens of the nested group with its own descendants folded in,
            not yet prefixed by ``variant``.
        token_index: Number of the parent's own tokens read before this group.
    """

    variant: str
    start_idx: int
    end_idx: int
    tokens: tuple[str, ...]
    token_index: int

    def expanded(self) -> list[str]:
        return [f"{self.variant}{token}" for token in self.tokens]


@dataclass
class GroupFrame:
    """A group that is still open.

    Attributes:
        variant: Variant prefix that introduced the group, including the ``:``.
        start_idx: Offset where the variant begins.
        tokens: Plain tokens read directly inside this group.
        children: Nested groups that already closed, in source order.
    """

    variant: str
    start_idx: int
    tokens: list[str] = field(default_factory=list)
    children: list[ClosedChild] = field(default_factory=list)


@dataclass
class MachineContext:
    """Mutable state threaded through a single scan.

    Attributes:
        text: Normalized text being scanned.
        state: Current machine state.
        token_start: Start offset of the token being read.
        variant_end: Offset of the most recent ``:``.
        stack: Open groups, innermost last.
        spans: Replacements emitted so far, in increasing offset order.
        malformations: Groups abandoned so far.
    """

    text: str
    state: MachineState = MachineState.IDLE
    token_start: int = 0
    variant_end: int = 0
    stack: list[GroupFrame] = field(default_factory=list)
    spans: list[Span] = field(default_factory=list)
    malformations: list[Malformation] = field(default_factory=list)


@dataclass
class ScanResult:
    """Outcome of scanning normalized text.

    Attributes:
        spans: Replacements in strictly increasing offset order.
        malformations: Groups that were left as literal text.
    """

    spans: list[Span]
    malformations: list[Malformation]


@dataclass
class ExpansionResult:
    """Structured result of expanding a fragment.

    Attributes:
        text: Normalized text with every well-formed group expanded.
        spans: Replacements that were applied to the normalized text.
        malformations: Groups that were left as literal text.
    """

    text: str
    spans: list[Span]
    malformations: list[Malformation]
