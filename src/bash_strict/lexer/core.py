"""Line-window lexer for shell script headers.

Scans one line window at a time: find the end of the line, classify it,
then commit past the newline. Position only ever moves forward.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from bash_strict.declarations import IFS_CONTINUATION
from bash_strict.lexer.classifiers import (
    CommentClassifierMixin,
    DeclarationClassifierMixin,
)
from bash_strict.lexer.modes import LexerMode
from bash_strict.tokens import Token, TokenType


class Lexer(
    # Classifiers (pure logic, no position mutation)
    CommentClassifierMixin,
    DeclarationClassifierMixin,
):
    """Two-mode line lexer.

    In HEADER mode each logical line is classified; an ``IFS=$'`` line
    whose quoted value opens with a literal newline absorbs the following
    physical line. In BODY mode every remaining physical line is emitted
    as TEXT, unmerged and unclassified.

    The consumer switches modes with :meth:`enter_body` between tokens;
    tokens are produced lazily, so the switch applies to the very next one.

    Usage:
            >>> lexer = Lexer("#!/bin/bash\\nset -e\\necho hi\\n")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(SHEBANG, '#!/bin/bash', 1)
        Token(STRICT, 'set -e', 2)
        Token(TEXT, 'echo hi', 3)

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_lineno",
        "_mode",
        "_source_file",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Shell script text
            source_file: Optional source file path for log messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._mode = LexerMode.HEADER
        self._source_file = source_file

    @property
    def mode(self) -> LexerMode:
        """Current operating mode."""
        return self._mode

    @property
    def source_file(self) -> str | None:
        """Source file path, if known."""
        return self._source_file

    def enter_body(self) -> None:
        """Switch to BODY mode for the rest of the input. Irreversible."""
        self._mode = LexerMode.BODY

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into one token per line.

        A final line without a trailing newline is still emitted. Empty
        input yields nothing.

        Yields:
            Token objects one at a time
        """
        while self._pos < self._source_len:
            yield self._dispatch_mode()

    def _dispatch_mode(self) -> Token:
        """Dispatch to the scanner for the current mode."""
        if self._mode == LexerMode.HEADER:
            return self._scan_header_line()
        return self._scan_body_line()

    def peek_line(self) -> str | None:
        """Return the next physical line without consuming it.

        Returns:
            Line content without its newline, or None at end of input.
        """
        if self._pos >= self._source_len:
            return None
        return self._source[self._pos : self._find_line_end(self._pos)]

    # =========================================================================
    # Mode scanners
    # =========================================================================

    def _scan_header_line(self) -> Token:
        """Scan and classify one logical line."""
        lineno = self._lineno
        line_start = self._pos
        line_end = self._find_line_end(line_start)

        # Quoted IFS value still open: the next physical line belongs to it
        if (
            self._source.startswith(IFS_CONTINUATION, line_start)
            and line_end + 1 < self._source_len
        ):
            line_end = self._find_line_end(line_end + 1)

        line = self._source[line_start:line_end]
        self._commit_to(line_end)

        if not line:
            return self._make_token(TokenType.BLANK, line, lineno)

        token = (
            self._try_classify_shebang(line, lineno)
            or self._try_classify_comment(line, lineno)
            or self._try_classify_ifs(line, lineno)
            or self._try_classify_shopt(line, lineno)
            or self._try_classify_strict(line, lineno)
        )
        if token is not None:
            return token

        return self._make_token(TokenType.TEXT, line, lineno)

    def _scan_body_line(self) -> Token:
        """Copy one physical line verbatim."""
        lineno = self._lineno
        line_start = self._pos
        line_end = self._find_line_end(line_start)
        line = self._source[line_start:line_end]
        self._commit_to(line_end)
        return self._make_token(TokenType.TEXT, line, lineno)

    # =========================================================================
    # Window navigation helpers
    # =========================================================================

    def _find_line_end(self, start: int) -> int:
        """Find the end of the line starting at start (position of \\n or EOF)."""
        if start >= self._source_len:
            return self._source_len
        idx = self._source.find("\n", start)
        return idx if idx != -1 else self._source_len

    def _commit_to(self, line_end: int) -> None:
        """Commit position past line_end, consuming the newline if present.

        Newlines inside the committed window (merged IFS values) still
        advance the line counter.
        """
        self._lineno += self._source.count("\n", self._pos, line_end)
        self._pos = line_end

        if self._pos < self._source_len and self._source[self._pos] == "\n":
            self._pos += 1
            self._lineno += 1

    def _make_token(self, token_type: TokenType, value: str, lineno: int) -> Token:
        """Create a Token for a line starting at lineno."""
        return Token(type=token_type, value=value, lineno=lineno)


def to_lines(source: str) -> list[str]:
    """Split source into logical lines with newlines stripped.

    Merges a continued IFS assignment into one line, keeps empty lines,
    and includes a final line that has no trailing newline.

    Example:
        >>> to_lines("#!/bin/bash\\nIFS=$'\\n\\t'\\necho hi\\n")
        ['#!/bin/bash', "IFS=$'\\n\\t'", 'echo hi']

    """
    return [token.value for token in Lexer(source).tokenize()]
