"""
bash-strict: canonical strict-mode headers for bash scripts

Splits a shell script into its header (shebang, leading comments,
``set`` flags, ``IFS`` assignment, ``shopt -s extdebug``) and body, and
rebuilds the header in a fixed canonical order. The body is never touched.

Quick Start:
    >>> from bash_strict import normalize, parse
    >>> parsed = parse("#!/bin/bash\\nset -e\\n# greet\\necho hi\\n")
    >>> parsed.header.declarations.strict
    ('set -e',)
    >>> parsed.body
    ('# greet', 'echo hi')
    >>> print(normalize(parsed), end="")
    #!/usr/bin/env bash
    <BLANKLINE>
    set -CEeuo pipefail
    IFS=$'\\n\\t'
    shopt -s extdebug
    <BLANKLINE>
    # greet
    echo hi

Flags:
    >>> from bash_strict import parse_flags
    >>> parse_flags("set -eu -o pipefail").long_codes
    ('pipefail',)
"""

from bash_strict.config import (
    HeaderConfig,
    get_header_config,
    header_config_context,
    reset_header_config,
    set_header_config,
)
from bash_strict.declarations import (
    EXT_DEBUG,
    IFS,
    LANGUAGES_SUPPORTED,
    PREFERRED_DECLARATION,
    SHEBANG,
    STRICT_SET,
)
from bash_strict.errors import BashStrictError, ShebangError
from bash_strict.flags import FlagSet, parse_flags
from bash_strict.lexer import Lexer, LexerMode, to_lines
from bash_strict.lint import (
    first_non_comment,
    has_extdebug,
    has_ifs,
    has_options_declaration,
    is_supported,
    lint,
    shebang,
)
from bash_strict.nodes import DeclarationSet, HeaderRecord, ParsedFile
from bash_strict.normalizer import normalize
from bash_strict.parser import Parser, parse
from bash_strict.serialization import from_dict, from_json, to_dict, to_json
from bash_strict.tokens import Token, TokenType

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "normalize",
    "lint",
    "to_lines",
    # Records
    "DeclarationSet",
    "HeaderRecord",
    "ParsedFile",
    # Flags
    "FlagSet",
    "parse_flags",
    # Boundary helpers
    "is_supported",
    "shebang",
    "has_options_declaration",
    "has_ifs",
    "has_extdebug",
    "first_non_comment",
    # Parser components
    "Lexer",
    "LexerMode",
    "Parser",
    "Token",
    "TokenType",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "HeaderConfig",
    "get_header_config",
    "set_header_config",
    "reset_header_config",
    "header_config_context",
    # Canonical declarations
    "SHEBANG",
    "STRICT_SET",
    "IFS",
    "EXT_DEBUG",
    "PREFERRED_DECLARATION",
    "LANGUAGES_SUPPORTED",
    # Errors
    "BashStrictError",
    "ShebangError",
]
