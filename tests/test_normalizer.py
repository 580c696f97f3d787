"""Tests for canonical header rendering."""

from __future__ import annotations

from bash_strict import normalize, parse
from bash_strict.config import HeaderConfig, header_config_context
from bash_strict.nodes import DeclarationSet, HeaderRecord, ParsedFile

CANONICAL_HEADER = (
    "#!/usr/bin/env bash\n"
    "\n"
    "set -CEeuo pipefail\n"
    "IFS=$'\\n\\t'\n"
    "shopt -s extdebug\n"
    "\n"
)


class TestFixedPoint:
    """Canonical scripts come back unchanged."""

    def test_minimal(self) -> None:
        source = CANONICAL_HEADER + 'echo "hello"\n'
        assert normalize(parse(source)) == source

    def test_header_only(self) -> None:
        assert normalize(parse(CANONICAL_HEADER)) == CANONICAL_HEADER

    def test_with_comment(self) -> None:
        source = (
            "#!/usr/bin/env bash\n"
            "# Greets the world\n"
            "\n"
            "set -CEeuo pipefail\n"
            "IFS=$'\\n\\t'\n"
            "shopt -s extdebug\n"
            "\n"
            'echo "hello"\n'
        )
        assert normalize(parse(source)) == source

    def test_with_comment_block(self) -> None:
        source = (
            "#!/usr/bin/env bash\n"
            "#\n"
            "# Usage: greet NAME\n"
            "#\n"
            "\n"
            "set -CEeuo pipefail\n"
            "IFS=$'\\n\\t'\n"
            "shopt -s extdebug\n"
            "\n"
            "main() {\n"
            '  echo "hello $1"\n'
            "}\n"
            "\n"
            'main "$@"\n'
        )
        assert normalize(parse(source)) == source

    def test_declarations_out_of_order(self) -> None:
        """shopt before IFS still normalizes to the canonical order."""
        source = (
            "#!/usr/bin/env bash\n"
            "\n"
            "set -CEeuo pipefail\n"
            "shopt -s extdebug\n"
            "IFS=$'\\n\\t'\n"
            "\n"
            'echo "hello"\n'
        )
        assert normalize(parse(source)) == CANONICAL_HEADER + 'echo "hello"\n'


class TestRewrite:
    """Non-canonical headers are replaced, comments and body kept."""

    def test_parsed_declarations_discarded(self) -> None:
        source = "#!/bin/bash\nset -e\nIFS=' '\necho hi\n"
        assert normalize(parse(source)) == CANONICAL_HEADER + "echo hi\n"

    def test_missing_header_added(self) -> None:
        assert normalize(parse("echo hi\n")) == CANONICAL_HEADER + "echo hi\n"

    def test_trailing_comment_stays_with_body(self) -> None:
        source = "#!/bin/bash\n# say hi\necho hi\n"
        assert normalize(parse(source)) == CANONICAL_HEADER + "# say hi\necho hi\n"

    def test_unterminated_source_gains_newline(self) -> None:
        assert normalize(parse("echo hi")) == CANONICAL_HEADER + "echo hi\n"

    def test_idempotent(self) -> None:
        source = "#!/bin/sh\n# a\nset -eu\n\nfoo\n\nbar"
        once = normalize(parse(source))
        assert normalize(parse(once)) == once

    def test_from_record(self) -> None:
        record = ParsedFile(
            header=HeaderRecord(
                shebang="#!/bin/zsh",
                comments=("# x",),
                declarations=DeclarationSet(strict=("set -e",)),
            ),
            body=("true",),
        )
        expected = (
            "#!/usr/bin/env bash\n"
            "# x\n"
            "\n"
            "set -CEeuo pipefail\n"
            "IFS=$'\\n\\t'\n"
            "shopt -s extdebug\n"
            "\n"
            "true\n"
        )
        assert normalize(record) == expected


class TestConfiguredHeader:
    """The active HeaderConfig supplies the canonical lines."""

    def test_custom_declarations(self) -> None:
        config = HeaderConfig(shebang="#!/bin/bash", strict="set -euo pipefail")
        with header_config_context(config):
            result = normalize(parse("echo hi\n"))
        assert result == (
            "#!/bin/bash\n"
            "\n"
            "set -euo pipefail\n"
            "IFS=$'\\n\\t'\n"
            "shopt -s extdebug\n"
            "\n"
            "echo hi\n"
        )

    def test_default_restored(self) -> None:
        with header_config_context(HeaderConfig(shebang="#!/bin/bash")):
            pass
        assert normalize(parse("x\n")).startswith("#!/usr/bin/env bash\n")
