"""Lexer operating modes.

This module defines the two-state machine shared by the lexer and the
header parser.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer starts in HEADER and moves to BODY at most once:
    - HEADER: Merging IFS continuations, classifying each logical line
    - BODY: Copying the remaining physical lines verbatim

    BODY is terminal; no transition leads back to HEADER.

    """

    HEADER = auto()  # Leading metadata block
    BODY = auto()  # Everything after the header
