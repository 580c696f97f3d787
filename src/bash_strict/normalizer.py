"""Canonical re-serialization of a parsed script.

The canonical header is the configured shebang, the recorded comments, a
blank line, the configured strict/IFS/shopt declarations and another blank
line. Declarations found in the input are not carried over; only comments
and body lines pass through.

``normalize(parse(text)) == text`` holds exactly when ``text`` already has
the canonical header.

"""

from __future__ import annotations

from bash_strict.config import get_header_config
from bash_strict.nodes import ParsedFile


def normalize(parsed: ParsedFile) -> str:
    """Render a ParsedFile with the canonical header.

    Args:
        parsed: Record produced by :func:`bash_strict.parse`

    Returns:
        Script text ending in a single newline.

    Example:
        >>> from bash_strict import parse
        >>> print(normalize(parse("#!/bin/sh\\necho hi\\n")), end="")
        #!/usr/bin/env bash
        <BLANKLINE>
        set -CEeuo pipefail
        IFS=$'\\n\\t'
        shopt -s extdebug
        <BLANKLINE>
        echo hi
    """
    config = get_header_config()
    lines = config.header_lines(parsed.header.comments)
    lines.extend(parsed.body)
    return "\n".join(lines) + "\n"
