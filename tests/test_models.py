from group_variant.models import (
    ClosedChild,
    GroupFrame,
    MachineContext,
    MachineState,
    MalformationKind,
)


def test_machine_state_members():
    assert list(MachineState) == [
        MachineState.IDLE,
        MachineState.PARSING_TEXT,
        MachineState.HANDLING_VARIANT,
        MachineState.OPENING_STACK,
        MachineState.PARSING_STACK_TEXT,
        MachineState.HANDLING_STACK_VARIANT,
        MachineState.CLOSING_STACK,
    ]


def test_malformation_kinds():
    assert {kind.name for kind in MalformationKind} == {
        "FORBIDDEN_CHARACTER",
        "EMPTY_GROUP",
        "UNEXPECTED_CHARACTER",
        "UNCLOSED_GROUP",
    }


def test_machine_context_defaults():
    ctx = MachineContext(text="a:(b)")

    assert ctx.state is MachineState.IDLE
    assert ctx.token_start == 0
    assert ctx.variant_end == 0
    assert ctx.stack == []
    assert ctx.spans == []
    assert ctx.malformations == []


def test_group_frames_do_not_share_lists():
    first = GroupFrame(variant="a:", start_idx=0)
    second = GroupFrame(variant="b:", start_idx=4)

    first.tokens.append("x")

    assert second.tokens == []
    assert second.children == []


def test_closed_child_expanded_applies_only_its_variant():
    child = ClosedChild(variant="md:", start_idx=3, end_idx=15, tokens=("p-2", "hover:m-1"), token_index=0)

    assert child.expanded() == ["md:p-2", "md:hover:m-1"]
