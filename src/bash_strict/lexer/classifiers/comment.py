"""Shebang and comment classifier mixin."""

from __future__ import annotations

from bash_strict.declarations import COMMENT_PREFIX, SHEBANG_PREFIX
from bash_strict.tokens import Token, TokenType


class CommentClassifierMixin:
    """Mixin providing shebang and comment classification."""

    def _make_token(self, token_type: TokenType, value: str, lineno: int) -> Token:
        """Create token. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_shebang(self, line: str, lineno: int) -> Token | None:
        """Try to classify line as an interpreter line (``#!...``)."""
        if line.startswith(SHEBANG_PREFIX):
            return self._make_token(TokenType.SHEBANG, line, lineno)
        return None

    def _try_classify_comment(self, line: str, lineno: int) -> Token | None:
        """Try to classify line as a comment.

        Shebangs also start with ``#``; classify them first.
        """
        if line.startswith(COMMENT_PREFIX):
            return self._make_token(TokenType.COMMENT, line, lineno)
        return None
