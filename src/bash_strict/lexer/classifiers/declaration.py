"""Header declaration classifier mixin.

Recognizes the three declaration kinds a strict-mode header carries:
field-separator assignments, the extended-debug option and ``set`` flags.
"""

from __future__ import annotations

from bash_strict.declarations import IFS_PREFIX, STRICT_PREFIX, is_extdebug_line
from bash_strict.tokens import Token, TokenType


class DeclarationClassifierMixin:
    """Mixin providing declaration classification."""

    def _make_token(self, token_type: TokenType, value: str, lineno: int) -> Token:
        """Create token. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_ifs(self, line: str, lineno: int) -> Token | None:
        """Try to classify line as a field-separator assignment.

        Any line starting with ``IFS`` qualifies, including values merged
        across an embedded newline.
        """
        if line.startswith(IFS_PREFIX):
            return self._make_token(TokenType.IFS, line, lineno)
        return None

    def _try_classify_shopt(self, line: str, lineno: int) -> Token | None:
        """Try to classify line as the extended-debug declaration.

        Only the exact canonical form matches.
        """
        if is_extdebug_line(line):
            return self._make_token(TokenType.SHOPT, line, lineno)
        return None

    def _try_classify_strict(self, line: str, lineno: int) -> Token | None:
        """Try to classify line as a strict-mode ``set -...`` declaration."""
        if line.startswith(STRICT_PREFIX):
            return self._make_token(TokenType.STRICT, line, lineno)
        return None
