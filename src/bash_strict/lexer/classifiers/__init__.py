"""Header line classifiers for the bash-strict lexer.

Each classifier is a mixin that decides whether a single logical line
matches one header pattern. Classifiers are pure: they never move the
lexer position.
"""

from bash_strict.lexer.classifiers.comment import (
    CommentClassifierMixin,
)
from bash_strict.lexer.classifiers.declaration import (
    DeclarationClassifierMixin,
)

__all__ = [
    "CommentClassifierMixin",
    "DeclarationClassifierMixin",
]
