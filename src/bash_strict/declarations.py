"""Canonical header declarations and line prefixes.

All tables are immutable module data:
- Canonical lines that a normalized header is rebuilt from
- Prefixes used to classify header lines (plain ``str.startswith``)
- The multi-line IFS pattern used by boundary predicates

Usage:
    from bash_strict.declarations import STRICT_PREFIX

    if line.startswith(STRICT_PREFIX):
        ...
"""

import re
from types import MappingProxyType

# Canonical header lines
SHEBANG = "#!/usr/bin/env bash"
STRICT_SET = "set -CEeuo pipefail"
EXT_DEBUG = "shopt -s extdebug"
IFS = "IFS=$'\\n\\t'"

PREFERRED_DECLARATION: MappingProxyType[str, str] = MappingProxyType(
    {
        "strict": STRICT_SET,
        "shebang": SHEBANG,
        "ifs": IFS,
        "shopt": EXT_DEBUG,
    }
)

LANGUAGES_SUPPORTED: frozenset[str] = frozenset({"bash"})

# Line prefixes
SHEBANG_PREFIX = "#!"
COMMENT_PREFIX = "#"
IFS_PREFIX = "IFS"
STRICT_PREFIX = "set -"

# An IFS assignment whose $'...' value opens with a literal newline has not
# reached its closing quote by the end of the physical line.
IFS_CONTINUATION = "IFS=$'\n"

# IFS=$'...' or IFS="..." anywhere in joined text; the value may span lines
IFS_PATTERN = re.compile(
    r"""
    ^IFS=
    \$?         # $'...' quoting
    ['"]
    (.*)
    ['"]
    $
    """,
    re.VERBOSE | re.MULTILINE | re.DOTALL,
)


def is_extdebug_line(line: str) -> bool:
    """Check if line is exactly the extended-debug declaration."""
    return line == EXT_DEBUG


def is_special_line(line: str | None) -> bool:
    """Check if a lookahead line keeps a preceding comment in the header.

    Special lines are comments (shebangs included), IFS assignments, the
    extended-debug declaration, strict-mode declarations, blank lines and
    end of input (``None``).

    """
    if line is None or line == "":
        return True
    return (
        line.startswith(COMMENT_PREFIX)
        or line.startswith(IFS_PREFIX)
        or is_extdebug_line(line)
        or line.startswith(STRICT_PREFIX)
    )
