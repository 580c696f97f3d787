"""Option-set tokenizer for ``set`` declarations.

Splits a declaration such as ``set -CEeuo pipefail`` into its short flags
(``C``, ``E``, ``e``, ``u``) and long option names (``pipefail``).

Example:
    >>> flags = parse_flags("set -CEeuo pipefail")
    >>> flags.short_codes
    ('C', 'E', 'e', 'u')
    >>> flags.long_codes
    ('pipefail',)

Thread Safety:
    FlagSet is frozen; parse_flags is pure.

"""

from __future__ import annotations

import re
import string
from dataclasses import dataclass

# Prefix word of a declaration
COMMAND = "set"

# Short flag announcing that the following word is a long option name
LONG_OPTION_MARKER = "o"

_LETTERS = frozenset(string.ascii_letters)
_WORD_CHAR = re.compile(r"\w", re.ASCII)


@dataclass(frozen=True, slots=True)
class FlagSet:
    """Flags enabled by one ``set`` declaration.

    Attributes:
        short_codes: Single-letter flags, sorted and deduplicated
        long_codes: Long option names in encounter order, duplicates kept

    """

    short_codes: tuple[str, ...] = ()
    long_codes: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> FlagSet:
        """Parse a declaration string. See :func:`parse_flags`."""
        return parse_flags(text)


def parse_flags(text: str) -> FlagSet:
    """Parse a ``set`` declaration into a FlagSet.

    Words are split on whitespace runs. A leading ``set`` is dropped. Words
    starting with ``-`` are short-flag groups: every ASCII letter in them is
    a flag, except the ``o`` marker. Any other word holding a word character
    is a long option name, recorded verbatim.

    Args:
        text: Declaration text, e.g. ``"set -eu -o pipefail"``

    Returns:
        FlagSet with sorted short codes and ordered long codes.
    """
    words = text.split()
    if words and words[0] == COMMAND:
        words = words[1:]

    short_codes: set[str] = set()
    long_codes: list[str] = []
    for word in words:
        if word.startswith("-"):
            short_codes.update(char for char in word if char in _LETTERS)
        elif _WORD_CHAR.search(word):
            long_codes.append(word)

    short_codes.discard(LONG_OPTION_MARKER)
    return FlagSet(short_codes=tuple(sorted(short_codes)), long_codes=tuple(long_codes))
