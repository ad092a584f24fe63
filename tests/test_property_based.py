from __future__ import annotations

import string

from hypothesis import given
from hypothesis import strategies as st
from group_variant import expand, normalize_whitespace, transform
from group_variant.machine import scan

token_strategy = st.text(alphabet=string.ascii_lowercase + string.digits + "-", min_size=1, max_size=8)
variant_strategy = st.text(alphabet=string.ascii_lowercase, min_size=1, max_size=6).map(
    lambda name: f"{name}:"
)
syntax_strategy = st.text(alphabet="ab:() '\"[\\\n\t-", max_size=60)


@given(st.text().map(lambda text: text.replace("(", "").replace(")", "")))
def test_text_without_groups_is_only_normalized(content: str):
    assert transform(content) == normalize_whitespace(content)


@given(st.one_of(st.text(), syntax_strategy))
def test_transform_never_raises(content: str):
    assert isinstance(transform(content), str)


@given(st.one_of(st.text(max_size=100), syntax_strategy))
def test_spans_are_increasing_and_disjoint(content: str):
    normalized = normalize_whitespace(content)
    spans = scan(normalized).spans

    for span in spans:
        assert 0 <= span.start <= span.end < len(normalized)
    for previous, current in zip(spans, spans[1:]):
        assert previous.end < current.start


@given(syntax_strategy)
def test_transform_is_deterministic(content: str):
    assert expand(content) == expand(content)


@given(variant_strategy, st.lists(token_strategy, min_size=1, max_size=6))
def test_flat_group_prefixes_every_token(variant: str, tokens: list[str]):
    content = f"{variant}({' '.join(tokens)})"

    assert transform(content) == " ".join(f"{variant}{token}" for token in tokens)


@given(variant_strategy, variant_strategy, st.lists(token_strategy, min_size=1, max_size=4))
def test_nested_group_composes_prefixes(outer: str, inner: str, tokens: list[str]):
    content = f"{outer}({inner}({' '.join(tokens)}))"

    assert transform(content) == " ".join(f"{outer}{inner}{token}" for token in tokens)


@given(st.lists(st.tuples(variant_strategy, token_strategy), min_size=1, max_size=5))
def test_sibling_groups_expand_independently(groups: list[tuple[str, str]]):
    content = " ".join(f"{variant}({token})" for variant, token in groups)

    assert transform(content) == " ".join(f"{variant}{token}" for variant, token in groups)
