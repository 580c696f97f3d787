"""ParsedFile serialization to JSON-compatible dicts.

The dict shape mirrors the record nesting::

    {
        "header": {
            "shebang": "#!/usr/bin/env bash",
            "comments": ["# Usage: ..."],
            "declarations": {
                "strict": ["set -CEeuo pipefail"],
                "ifs": "IFS=$'\\n\\t'",
                "shopt": ["extdebug"],
            },
        },
        "body": ["echo hello"],
    }

Example:
    from bash_strict import parse
    from bash_strict.serialization import to_json, from_json

    parsed = parse(source)
    assert from_json(to_json(parsed)) == parsed

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from typing import Any

from bash_strict.nodes import DeclarationSet, HeaderRecord, ParsedFile


def to_dict(parsed: ParsedFile) -> dict[str, Any]:
    """Convert a ParsedFile to a JSON-compatible dict."""
    header = parsed.header
    declarations = header.declarations
    return {
        "header": {
            "shebang": header.shebang,
            "comments": list(header.comments),
            "declarations": {
                "strict": list(declarations.strict),
                "ifs": declarations.ifs,
                "shopt": list(declarations.shopt),
            },
        },
        "body": list(parsed.body),
    }


def from_dict(data: dict[str, Any]) -> ParsedFile:
    """Reconstruct a ParsedFile from a dict produced by :func:`to_dict`.

    Missing list fields default to empty; ``ifs`` defaults to None.

    Raises:
        ValueError: If ``header`` or ``body`` is missing.

    """
    for key in ("header", "body"):
        if key not in data:
            msg = f"Missing {key!r} field in serialized file"
            raise ValueError(msg)

    header = data["header"]
    declarations = header.get("declarations", {})
    return ParsedFile(
        header=HeaderRecord(
            shebang=header.get("shebang", ""),
            comments=tuple(header.get("comments", ())),
            declarations=DeclarationSet(
                strict=tuple(declarations.get("strict", ())),
                ifs=declarations.get("ifs"),
                shopt=tuple(declarations.get("shopt", ())),
            ),
        ),
        body=tuple(data["body"]),
    )


def to_json(parsed: ParsedFile, *, indent: int | None = None) -> str:
    """Serialize a ParsedFile to a JSON string.

    Output is deterministic (sorted keys).

    Args:
        parsed: Record to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(parsed), sort_keys=True, indent=indent)


def from_json(data: str) -> ParsedFile:
    """Deserialize a ParsedFile from a JSON string.

    Raises:
        ValueError: If the JSON is not an object with ``header`` and ``body``.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    return from_dict(raw)
