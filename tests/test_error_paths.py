"""Error-path and malformed input tests.

Parsing degrades gracefully: nothing it is given makes it raise. Errors are
reserved for helpers that cannot interpret their input at all.
"""

import pytest

from bash_strict import lint, normalize, parse, shebang
from bash_strict.errors import BashStrictError, ShebangError


class TestShebangError:
    """Verify ShebangError formatting and hierarchy."""

    def test_message_only(self) -> None:
        err = ShebangError("first line is blank")
        assert str(err) == "first line is blank"
        assert err.source_file is None

    def test_with_source_file(self) -> None:
        err = ShebangError("first line is blank", source_file="deploy.sh")
        assert str(err) == "deploy.sh: first line is blank"
        assert err.message == "first line is blank"

    def test_is_bash_strict_error(self) -> None:
        assert isinstance(ShebangError("x"), BashStrictError)

    def test_raised_for_empty_lines(self) -> None:
        with pytest.raises(BashStrictError):
            shebang([])


class TestMalformedInput:
    """Odd input is classified, never rejected."""

    @pytest.mark.parametrize(
        "source",
        [
            "IFS=$'\n",
            "IFS=$'\n\n",
            "#",
            "#!",
            "shopt -s",
            "set -",
            "\r\n\r\n",
            "\x00\n#\x00",
        ],
    )
    def test_parse_does_not_raise(self, source: str) -> None:
        parsed = parse(source)
        assert isinstance(normalize(parsed), str)

    def test_bare_set_dash_is_strict(self) -> None:
        assert parse("set -\n").header.declarations.strict == ("set -",)

    def test_short_shopt_is_body(self) -> None:
        assert parse("shopt -s\n").body == ("shopt -s",)

    def test_carriage_returns_are_content(self) -> None:
        """Only \\n ends a line; a lone \\r line is not blank."""
        assert parse("#!/bin/bash\r\n\r\n").body == ("\r",)

    def test_lint_never_raises(self) -> None:
        for content in ("", "\n", "   \n", "#!\n"):
            assert lint(content) == content
