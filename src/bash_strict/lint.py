"""Boundary helpers: interpreter detection, linting, line predicates.

These operate on raw text or on the logical lines returned by
:func:`bash_strict.lexer.to_lines`.

"""

from __future__ import annotations

from collections.abc import Sequence

from bash_strict.config import get_header_config
from bash_strict.declarations import (
    COMMENT_PREFIX,
    IFS_PATTERN,
    STRICT_PREFIX,
    is_extdebug_line,
)
from bash_strict.errors import ShebangError
from bash_strict.lexer import to_lines
from bash_strict.utils.logger import get_logger

logger = get_logger(__name__)


def is_supported(language: str) -> bool:
    """Check if the linter handles scripts for language (only "bash" by default)."""
    return language in get_header_config().supported_languages


def shebang(lines: Sequence[str], *, source_file: str | None = None) -> str:
    """Read the interpreter name from the first line.

    ``#!/usr/bin/env bash`` names its interpreter in the second word;
    ``#!/bin/bash`` in the last path segment of the first word.

    Args:
        lines: Script lines, first line first
        source_file: Optional path used in error messages

    Returns:
        Interpreter name, e.g. ``"bash"``

    Raises:
        ShebangError: If there is no first line or it is blank.

    Example:
        >>> shebang(["#!/usr/bin/env bash"])
        'bash'
        >>> shebang(["#!/bin/ruby"])
        'ruby'
    """
    if not lines:
        raise ShebangError("no first line to read an interpreter from", source_file)

    words = lines[0].split()
    if not words:
        raise ShebangError("first line is blank", source_file)

    if len(words) > 1:
        return words[1]
    return words[0].rstrip("/").rsplit("/", 1)[-1]


def lint(content: str, *, source_file: str | None = None) -> str:
    """Lint a script, returning its text.

    Scripts for unsupported interpreters, and scripts whose interpreter
    cannot be read, are returned unchanged. Supported scripts are currently
    returned unchanged as well; rewriting them is left to callers via
    ``normalize(parse(content))``.

    Args:
        content: Script text
        source_file: Optional path for log messages

    Returns:
        Script text
    """
    lines = to_lines(content)
    try:
        language = shebang(lines, source_file=source_file)
    except ShebangError as e:
        logger.debug("Interpreter not detected, skipping: %s", e)
        return content

    if not is_supported(language):
        logger.debug("%s: unsupported language %r", source_file or "<string>", language)
        return content

    logger.debug("%s: %s script passed through", source_file or "<string>", language)
    return content


def has_options_declaration(lines: Sequence[str]) -> bool:
    """Check if any line is a ``set -...`` declaration."""
    return any(line.startswith(STRICT_PREFIX) for line in lines)


def has_ifs(lines: Sequence[str]) -> bool:
    """Check if the joined lines contain a quoted IFS assignment.

    Lines are joined with newlines so a value split across lines still
    matches.
    """
    return IFS_PATTERN.search("\n".join(lines)) is not None


def has_extdebug(lines: Sequence[str]) -> bool:
    """Check if any line is exactly ``shopt -s extdebug``."""
    return any(is_extdebug_line(line) for line in lines)


def first_non_comment(lines: Sequence[str]) -> int | None:
    """Index of the first line not starting with ``#``, or None."""
    for index, line in enumerate(lines):
        if not line.startswith(COMMENT_PREFIX):
            return index
    return None
