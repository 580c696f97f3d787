"""Token and TokenType definitions for the bash-strict lexer.

The lexer produces one Token per logical line. Header-mode tokens carry
the classification of their line; body-mode tokens are always TEXT.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Line classes produced by the lexer."""

    BLANK = auto()
    SHEBANG = auto()  # #!/usr/bin/env bash
    COMMENT = auto()  # # ...
    IFS = auto()  # IFS=$'\n\t'
    SHOPT = auto()  # shopt -s extdebug
    STRICT = auto()  # set -euo pipefail
    TEXT = auto()  # Anything else, and every line once in body


@dataclass(frozen=True, slots=True)
class Token:
    """A logical line produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Line content without its terminating newline. An IFS
            assignment continued across a literal newline keeps it.
        lineno: Physical line the token starts on (1-indexed)

    """

    type: TokenType
    value: str
    lineno: int

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.lineno})"
