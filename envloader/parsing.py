"""Classification and parsing of single dotenv lines."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Mapping


class LineKind(str, Enum):
    COMMENT = "comment"
    BLANK = "blank"
    ASSIGNMENT = "assignment"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class Assignment:
    key: str
    value: str


def classify_line(line: str) -> LineKind:
    """Return the :class:`LineKind` of ``line``.

    The comment check looks at the raw line, so an indented ``#`` is not a
    comment.
    """

    if line.startswith("#"):
        return LineKind.COMMENT
    if not line.strip():
        return LineKind.BLANK
    if "=" not in line:
        return LineKind.MALFORMED
    return LineKind.ASSIGNMENT


def parse_line(line: str) -> Assignment | None:
    """Split an assignment line on its first ``=``.

    Returns ``None`` for comments, blank and malformed lines. Key and value are
    trimmed but may be empty.
    """

    if classify_line(line) is not LineKind.ASSIGNMENT:
        return None
    key, _, value = line.partition("=")
    return Assignment(key=key.strip(), value=value.strip())


def substitute(value: str, environ: Mapping[str, str]) -> str:
    """Replace literal ``$NAME`` tokens in ``value`` with values from ``environ``.

    Only variables with a non-empty value take part. ``value`` is scanned once
    and replaced text is never rescanned. Matching is plain substring
    matching, so ``$FOOBAR`` will pick up ``FOO`` if ``FOO`` comes first in
    ``environ``.
    """

    if "$" not in value:
        return value

    tokens: dict[str, str] = {}
    for name, current in list(environ.items()):
        if name and current:
            tokens.setdefault(f"${name}", current)
    if not tokens:
        return value

    # alternation keeps the mapping's order, first listed token wins
    pattern = re.compile("|".join(re.escape(token) for token in tokens))
    return pattern.sub(lambda match: tokens[match.group(0)], value)


__all__ = ["Assignment", "LineKind", "classify_line", "parse_line", "substitute"]
