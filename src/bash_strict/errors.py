"""Exception classes for bash-strict.

Parsing itself never raises: malformed header lines degrade into body
content. Errors are reserved for inputs a helper cannot interpret at all.
"""

from __future__ import annotations


class BashStrictError(Exception):
    """Base exception for all bash-strict errors."""

    pass


class ShebangError(BashStrictError):
    """Interpreter cannot be read from the first line of a script.

    Raised by :func:`bash_strict.lint.shebang` when there is no first line
    or the first line holds no tokens. No default interpreter is assumed.
    """

    def __init__(self, message: str, source_file: str | None = None) -> None:
        """Initialize shebang error.

        Args:
            message: Error description
            source_file: Path to the script (optional)
        """
        self.message = message
        self.source_file = source_file

        location = f"{source_file}: " if source_file else ""
        super().__init__(f"{location}{message}")
