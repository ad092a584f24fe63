from __future__ import annotations

import os

import pytest
from group_variant import expand, normalize_whitespace

atheris = pytest.importorskip("atheris")


def test_expand_with_fuzzed_input():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    seen = 0

    for _ in range(128):
        if provider.remaining_bytes() == 0:
            break
        text = provider.ConsumeUnicodeNoSurrogates(64)
        result = expand(text)
        assert isinstance(result.text, str)
        if not result.spans:
            assert result.text == normalize_whitespace(text)
        seen += 1

    assert seen  # ensure we exercised the loop


def test_expand_with_fuzzed_group_syntax():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    alphabet = "ab:() '[-"

    while provider.remaining_bytes() > 0:
        length = provider.ConsumeIntInRange(0, 48)
        text = "".join(alphabet[provider.ConsumeIntInRange(0, len(alphabet) - 1)] for _ in range(length))
        spans = expand(text).spans
        for previous, current in zip(spans, spans[1:]):
            assert previous.end < current.start
