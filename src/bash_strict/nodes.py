"""Typed parse records for bash-strict.

All records are frozen dataclasses with slots; sequences are tuples.

Record Hierarchy:
ParsedFile
├── header: HeaderRecord
│   ├── shebang
│   ├── comments
│   └── declarations: DeclarationSet
│       ├── strict
│       ├── ifs
│       └── shopt
└── body

Thread Safety:
All records are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class DeclarationSet:
    """Declarations found in a script header.

    Attributes:
        strict: ``set -...`` lines in encounter order
        ifs: Last field-separator assignment, or None
        shopt: Option names enabled via ``shopt -s`` (e.g. ``"extdebug"``)

    """

    strict: tuple[str, ...] = ()
    ifs: str | None = None
    shopt: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class HeaderRecord:
    """Leading metadata block of a script.

    Attributes:
        shebang: First interpreter line, or "" when absent
        comments: Header comment lines in encounter order
        declarations: Strict-mode, IFS and shopt declarations

    """

    shebang: str = ""
    comments: tuple[str, ...] = ()
    declarations: DeclarationSet = field(default_factory=DeclarationSet)


@dataclass(frozen=True, slots=True)
class ParsedFile:
    """A script split into header and body.

    Sole output of :func:`bash_strict.parse` and sole input of
    :func:`bash_strict.normalize`.

    """

    header: HeaderRecord = field(default_factory=HeaderRecord)
    body: tuple[str, ...] = ()
