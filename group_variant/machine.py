"""Single-pass state machine that expands grouped variants.

The scanner walks normalized text one character at a time. Groups such as
``hover:(bg-red text-white)`` are tracked on a stack of `GroupFrame`
objects; when the outermost group closes, a `Span` describing its
replacement is emitted. Malformed groups are abandoned without raising, but
nested groups that already closed inside them are kept.
"""

from __future__ import annotations

import logging

from .constants import FORBIDDEN_CHARS, GROUP_CLOSE, GROUP_OPEN, SEPARATOR_CHAR, VARIANT_CHAR
from .models import (
    ClosedChild,
    GroupFrame,
    MachineContext,
    MachineState,
    Malformation,
    MalformationKind,
    ScanResult,
    Span,
)

logger = logging.getLogger(__name__)


def fold_tokens(frame: GroupFrame) -> list[str]:
    """Merge a frame's own tokens with its closed children in source order.

    Each child's tokens receive only the child's variant; the frame's own
    variant is applied by whoever consumes the result.

    Args:
        frame: Group being closed.

    Returns:
        list[str]: Tokens of the group, unprefixed by its own variant.

    Examples:
        frame = GroupFrame("a:", 0, tokens=["d"])
        frame.children.append(ClosedChild("b:", 3, 7, ("c",), 0))
        fold_tokens(frame)  # ["b:c", "d"]
    """
    folded: list[str] = []
    position = 0
    for child in frame.children:
        folded.extend(frame.tokens[position : child.token_index])
        position = child.token_index
        folded.extend(child.expanded())
    folded.extend(frame.tokens[position:])
    return folded


def _open_group(ctx: MachineContext) -> None:
    variant = ctx.text[ctx.token_start : ctx.variant_end + 1]
    ctx.stack.append(GroupFrame(variant=variant, start_idx=ctx.token_start))
    ctx.state = MachineState.OPENING_STACK


def _close_group(ctx: MachineContext, idx: int, pending_word: bool) -> None:
    frame = ctx.stack.pop()
    if pending_word:
        frame.tokens.append(ctx.text[ctx.token_start : idx])

    tokens = fold_tokens(frame)

    if ctx.stack:
        parent = ctx.stack[-1]
        parent.children.append(
            ClosedChild(
                variant=frame.variant,
                start_idx=frame.start_idx,
                end_idx=idx,
                tokens=tuple(tokens),
                token_index=len(parent.tokens),
            )
        )
        ctx.state = MachineState.CLOSING_STACK
        return

    content = " ".join(f"{frame.variant}{token}" for token in tokens)
    ctx.spans.append(Span(start=frame.start_idx, end=idx, content=content))
    ctx.state = MachineState.IDLE


def _abort_groups(ctx: MachineContext, idx: int, kind: MalformationKind) -> None:
    """Abandon every open group, keeping nested groups that already closed."""
    logger.debug("Abandoning %d open group(s) at offset %d: %s", len(ctx.stack), idx, kind.name)
    for frame in ctx.stack:
        for child in frame.children:
            ctx.spans.append(
                Span(start=child.start_idx, end=child.end_idx, content=" ".join(child.expanded()))
            )
    ctx.stack.clear()
    ctx.malformations.append(Malformation(kind=kind, offset=idx))
    ctx.state = MachineState.IDLE


def _push_token(ctx: MachineContext, idx: int) -> None:
    ctx.stack[-1].tokens.append(ctx.text[ctx.token_start : idx])
    ctx.state = MachineState.OPENING_STACK


def step(ctx: MachineContext, idx: int, char: str) -> None:
    """Advance the machine by one character.

    Args:
        ctx: Scan context to update.
        idx: Offset of `char` in the normalized text.
        char: Character being consumed.

    Examples:
        ctx = MachineContext(text="a:(b)")
        for idx, char in enumerate(ctx.text):
            step(ctx, idx, char)
    """
    state = ctx.state
    forbidden = char in FORBIDDEN_CHARS

    if state is MachineState.IDLE:
        if not forbidden and char != SEPARATOR_CHAR:
            ctx.token_start = idx
            ctx.state = MachineState.PARSING_TEXT

    elif state is MachineState.PARSING_TEXT:
        if forbidden:
            ctx.state = MachineState.IDLE
        elif char == VARIANT_CHAR:
            ctx.variant_end = idx
            ctx.state = MachineState.HANDLING_VARIANT
        elif char == SEPARATOR_CHAR:
            ctx.token_start = idx + 1

    elif state is MachineState.HANDLING_VARIANT:
        if forbidden:
            ctx.state = MachineState.IDLE
        elif char == GROUP_OPEN:
            _open_group(ctx)
        else:
            ctx.state = MachineState.PARSING_TEXT

    elif state is MachineState.OPENING_STACK:
        if forbidden:
            _abort_groups(ctx, idx, MalformationKind.FORBIDDEN_CHARACTER)
        elif char == GROUP_CLOSE:
            _abort_groups(ctx, idx, MalformationKind.EMPTY_GROUP)
        else:
            ctx.token_start = idx
            ctx.state = MachineState.PARSING_STACK_TEXT

    # Forbidden characters are allowed inside a token within a group.
    elif state is MachineState.PARSING_STACK_TEXT:
        if char == VARIANT_CHAR:
            ctx.variant_end = idx
            ctx.state = MachineState.HANDLING_STACK_VARIANT
        elif char == GROUP_CLOSE:
            _close_group(ctx, idx, pending_word=True)
        elif char == SEPARATOR_CHAR:
            _push_token(ctx, idx)

    elif state is MachineState.HANDLING_STACK_VARIANT:
        if forbidden:
            _abort_groups(ctx, idx, MalformationKind.FORBIDDEN_CHARACTER)
        elif char == GROUP_OPEN:
            _open_group(ctx)
        else:
            ctx.state = MachineState.PARSING_STACK_TEXT

    elif state is MachineState.CLOSING_STACK:
        if forbidden:
            _abort_groups(ctx, idx, MalformationKind.FORBIDDEN_CHARACTER)
        elif char == GROUP_CLOSE:
            _close_group(ctx, idx, pending_word=False)
        elif char == SEPARATOR_CHAR:
            ctx.state = MachineState.OPENING_STACK
        else:
            _abort_groups(ctx, idx, MalformationKind.UNEXPECTED_CHARACTER)

    else:  # pragma: no cover - exhaustive over MachineState
        raise AssertionError(f"unhandled machine state: {state}")


def scan(text: str) -> ScanResult:
    """Run the machine over normalized text.

    Groups still open when the text ends are left untouched, including any
    nested groups that closed inside them.

    Args:
        text: Whitespace-normalized fragment.

    Returns:
        ScanResult: Replacement spans in increasing offset order and the groups
            that were abandoned.

    Examples:
        scan("hover:(bg-red text-white)").spans
        # [Span(start=0, end=24, content="hover:bg-red hover:text-white")]
    """
    ctx = MachineContext(text=text)
    for idx, char in enumerate(text):
        step(ctx, idx, char)

    if ctx.stack:
        logger.debug("Input ended with %d unclosed group(s)", len(ctx.stack))
        ctx.malformations.append(
            Malformation(kind=MalformationKind.UNCLOSED_GROUP, offset=ctx.stack[0].start_idx)
        )
        ctx.stack.clear()

    return ScanResult(spans=ctx.spans, malformations=ctx.malformations)
