from __future__ import annotations

import io

import pytest

from group_variant.exceptions import ExpansionError, InputTooLongError, MalformedGroupError
from group_variant.inputs import (
    enforce_input_length,
    enforce_well_formed,
    get_max_input_length,
    read_fragments,
)
from group_variant.transformer import expand


def test_get_max_input_length_uses_default(monkeypatch):
    monkeypatch.delenv("GROUP_VARIANT_MAX_INPUT_LENGTH", raising=False)

    assert get_max_input_length(default=42) == 42


def test_get_max_input_length_reads_environment(monkeypatch):
    monkeypatch.setenv("GROUP_VARIANT_MAX_INPUT_LENGTH", "128")

    assert get_max_input_length(default=42) == 128


def test_get_max_input_length_rejects_non_integer(monkeypatch):
    monkeypatch.setenv("GROUP_VARIANT_MAX_INPUT_LENGTH", "invalid")
    with pytest.raises(ValueError, match="Invalid value"):
        get_max_input_length()


def test_get_max_input_length_rejects_non_positive(monkeypatch):
    monkeypatch.setenv("GROUP_VARIANT_MAX_INPUT_LENGTH", "0")
    with pytest.raises(ValueError, match="positive integer"):
        get_max_input_length()


def test_enforce_input_length():
    enforce_input_length("abc", 3)

    with pytest.raises(InputTooLongError) as excinfo:
        enforce_input_length("abcd", 3)

    assert excinfo.value.length == 4
    assert excinfo.value.limit == 3
    assert isinstance(excinfo.value, ExpansionError)


def test_enforce_well_formed_accepts_clean_expansion():
    enforce_well_formed(expand("a:(b c)"), "a:(b c)")


def test_enforce_well_formed_reports_malformations():
    with pytest.raises(MalformedGroupError) as excinfo:
        enforce_well_formed(expand("a:()"), "a:()")

    assert "empty group at offset 3" in str(excinfo.value)
    assert len(excinfo.value.malformations) == 1


def test_read_fragments_line_mode_skips_blank_lines():
    stream = io.StringIO("a:(b c)\n\n  \nd\r\n")

    assert list(read_fragments(stream)) == ["a:(b c)", "d"]


def test_read_fragments_whole_stream():
    stream = io.StringIO("a:(b\nc)\n")

    assert list(read_fragments(stream, line_mode=False)) == ["a:(b\nc)\n"]
