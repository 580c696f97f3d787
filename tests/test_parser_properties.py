"""Property-based tests for parse and normalize using Hypothesis."""

from hypothesis import given, settings
from hypothesis import strategies as st

from bash_strict import normalize, parse

header_ish = st.sampled_from(
    [
        "#!/usr/bin/env bash",
        "#!/bin/sh",
        "# comment",
        "#",
        "",
        "IFS=$'",
        "\t'",
        "IFS=$'\\n\\t'",
        "set -eu",
        "shopt -s extdebug",
        "echo hi",
        "main",
    ]
)
scripts = st.lists(header_ish, max_size=20).map("\n".join)


class TestParseProperties:
    """Invariants for parse and normalize."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_never_raises(self, source: str) -> None:
        normalize(parse(source))

    @given(scripts)
    @settings(max_examples=200)
    def test_normalize_is_idempotent(self, source: str) -> None:
        """A normalized script is a fixed point."""
        once = normalize(parse(source))
        assert normalize(parse(once)) == once

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_normalize_is_idempotent_on_any_text(self, source: str) -> None:
        once = normalize(parse(source))
        assert normalize(parse(once)) == once

    @given(scripts)
    @settings(max_examples=200)
    def test_body_is_source_suffix(self, source: str) -> None:
        """Body lines are the trailing lines of the input, in order."""
        body = parse(source).body
        if body:
            text = "\n".join(body)
            stripped = source[:-1] if source.endswith("\n") else source
            assert stripped.endswith(text)

    @given(scripts)
    @settings(max_examples=200)
    def test_comments_start_with_hash(self, source: str) -> None:
        header = parse(source).header
        assert all(c.startswith("#") and not c.startswith("#!") for c in header.comments)
        assert header.shebang == "" or header.shebang.startswith("#!")
