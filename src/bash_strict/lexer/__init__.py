"""Line-window lexer for bash-strict.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode, to_lines
├── core.py              # Lexer class (mixin composition + navigation)
├── modes.py             # LexerMode enum
└── classifiers/         # Header line classification mixins
    ├── comment.py       # Shebang and comments
    └── declaration.py   # IFS, shopt, set

Usage:
    >>> from bash_strict.lexer import Lexer
    >>> for token in Lexer("#!/bin/bash\\n\\necho hi").tokenize():
    ...     print(token)
Token(SHEBANG, '#!/bin/bash', 1)
Token(BLANK, '', 2)
Token(TEXT, 'echo hi', 3)

"""

from bash_strict.lexer.core import Lexer, to_lines
from bash_strict.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode", "to_lines"]
