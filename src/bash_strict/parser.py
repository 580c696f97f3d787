"""Header parser producing a ParsedFile.

Consumes the lexer's token stream in a single forward pass. While the
lexer is in HEADER mode each token is filed into the header record; the
first line that is not header material flips the lexer to BODY, after which
every remaining line is copied into the body.

Thread Safety:
- Parser instances are single-use; create one per source string
- The resulting ParsedFile is immutable and safe to share

"""

from __future__ import annotations

from bash_strict.declarations import is_special_line
from bash_strict.lexer import Lexer, LexerMode
from bash_strict.nodes import DeclarationSet, HeaderRecord, ParsedFile
from bash_strict.tokens import Token, TokenType
from bash_strict.utils.logger import get_logger

logger = get_logger(__name__)


def parse_shopt(line: str) -> str | None:
    """Return the option name of a ``shopt -s NAME`` line.

    The name is the third whitespace-delimited word (the rest of the line
    after two words). Returns None when the line has fewer than three words.

    Example:
        >>> parse_shopt("shopt -s extdebug")
        'extdebug'
    """
    parts = line.split(None, 2)
    if len(parts) < 3:
        return None
    return parts[2]


class Parser:
    """Single-pass header classifier.

    Rules applied to each header token, in priority order:

    1. Blank lines are dropped.
    2. The first shebang is kept; later ones are dropped.
    3. A comment stays in the header only when the next physical line is
       special (comment, IFS, extdebug, ``set -``, blank or end of input).
       Otherwise the comment becomes the first body line.
    4. IFS assignments overwrite each other; the last one wins.
    5. ``shopt -s extdebug`` contributes its option name.
    6. ``set -...`` lines are collected in order.
    7. Anything else starts the body.

    Usage:
            >>> result = Parser("#!/bin/bash\\nset -e\\necho hi\\n").parse()
            >>> result.body
        ('echo hi',)

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_lexer",
        "_shebang",
        "_comments",
        "_strict",
        "_ifs",
        "_shopt",
        "_body",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Args:
            source: Shell script text
            source_file: Optional source file path for log messages

        """
        self._source = source
        self._source_file = source_file
        self._lexer = Lexer(source, source_file)
        self._shebang = ""
        self._comments: list[str] = []
        self._strict: list[str] = []
        self._ifs: str | None = None
        self._shopt: list[str] = []
        self._body: list[str] = []

    def parse(self) -> ParsedFile:
        """Parse source into a ParsedFile.

        Returns:
            Immutable record of header fields and body lines.
        """
        lexer = self._lexer
        for token in lexer.tokenize():
            if lexer.mode == LexerMode.HEADER:
                self._parse_header_token(token)
            elif lexer.mode == LexerMode.BODY:
                self._body.append(token.value)

        return ParsedFile(
            header=HeaderRecord(
                shebang=self._shebang,
                comments=tuple(self._comments),
                declarations=DeclarationSet(
                    strict=tuple(self._strict),
                    ifs=self._ifs,
                    shopt=tuple(self._shopt),
                ),
            ),
            body=tuple(self._body),
        )

    def _parse_header_token(self, token: Token) -> None:
        """File one header-mode token."""
        token_type = token.type

        if token_type == TokenType.BLANK:
            return

        if token_type == TokenType.SHEBANG:
            if not self._shebang:
                self._shebang = token.value
            else:
                logger.debug(
                    "%s:%d: dropping repeated shebang %r",
                    self._source_file or "<string>",
                    token.lineno,
                    token.value,
                )
        elif token_type == TokenType.COMMENT:
            # Lookahead is the raw next line, not a merged logical one
            if is_special_line(self._lexer.peek_line()):
                self._comments.append(token.value)
            else:
                self._enter_body(token)
        elif token_type == TokenType.IFS:
            self._ifs = token.value
        elif token_type == TokenType.SHOPT:
            option = parse_shopt(token.value)
            if option:
                self._shopt.append(option)
        elif token_type == TokenType.STRICT:
            self._strict.append(token.value)
        else:
            self._enter_body(token)

    def _enter_body(self, token: Token) -> None:
        """Start the body at token and switch the lexer to BODY mode."""
        logger.debug(
            "%s:%d: header ends, body starts",
            self._source_file or "<string>",
            token.lineno,
        )
        self._body.append(token.value)
        self._lexer.enter_body()


def parse(source: str, *, source_file: str | None = None) -> ParsedFile:
    """Split a shell script into header fields and body lines.

    Args:
        source: Shell script text
        source_file: Optional source file path for log messages

    Returns:
        ParsedFile record

    Example:
        >>> parsed = parse("#!/usr/bin/env bash\\n# hi\\nset -eu\\necho ok\\n")
        >>> parsed.header.comments
        ('# hi',)
        >>> parsed.header.declarations.strict
        ('set -eu',)
    """
    return Parser(source, source_file=source_file).parse()
