"""Leaf parsers: quoted strings and bare scalars (number / boolean / null).

Each parser takes the full candidate text and a start offset and returns
``(value, end)`` where *end* is the offset just past what it consumed.
Neither raises on truncated or malformed input.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal

from .values import Value, VBool, VNumber, VString, Null


_WHITESPACE = frozenset(" \t\n\r")
_TERMINATORS = _WHITESPACE | frozenset(",}]")
_NUMERIC = frozenset("0123456789-.")
_EXPONENT = frozenset("eE+")
_INTEGER_RE = re.compile(r"^-?\d+$")

_ESCAPES = {
    '"': '"',
    "n": "\n",
    "t": "\t",
    "\\": "\\",
}


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------

def unescape(char: str) -> str:
    """Decode the character following a backslash."""
    return _ESCAPES.get(char, "\\" + char)


def parse_string(text: str, offset: int) -> tuple[VString, int]:
    """Parse a quoted string starting at (or before) the opening quote.

    Only ``\\"``, ``\\n``, ``\\t`` and ``\\\\`` are decoded; any other escape
    is kept verbatim, backslash included, so ``\\u00F6`` stays six
    characters.  A missing closing quote returns what was read so far.
    """
    chars: list[str] = []
    state = "starting_string"
    i = offset

    while i < len(text):
        char = text[i]
        i += 1
        if state == "starting_string":
            if char == '"':
                state = "in_string"
        elif state == "found_slash":
            chars.append(unescape(char))
            state = "in_string"
        elif char == "\\":
            state = "found_slash"
        elif char == '"':
            return VString("".join(chars)), i
        else:
            chars.append(char)

    return VString("".join(chars)), i


# ---------------------------------------------------------------------------
# Numbers, booleans, null
# ---------------------------------------------------------------------------

def parse_scalar(text: str, offset: int) -> tuple[Value, int]:
    """Parse a bare literal up to the next terminator.

    Classification locks on the first qualifying character: ``t`` is
    ``true`` and ``f`` is ``false`` however little of the word follows,
    ``n`` is null, and digits/``-``/``.`` make a number.  Anything else
    reads as null.  The terminator itself is not consumed.
    """
    i = offset
    while i < len(text) and text[i] in _WHITESPACE:
        i += 1

    kind: str | None = None
    digits: list[str] = []
    flag: bool | None = None

    while i < len(text):
        char = text[i]
        if char in _TERMINATORS:
            break
        if char in _NUMERIC or (kind == "number" and char in _EXPONENT):
            kind = "number"
            digits.append(char)
        elif char in ("t", "f") or kind == "boolean":
            kind = "boolean"
            if flag is None:
                flag = char == "t"
        elif char == "n" or kind == "null":
            kind = "null"
        i += 1

    if kind == "number":
        return _to_number("".join(digits)), i
    if kind == "boolean":
        return VBool(bool(flag)), i
    return Null, i


def _to_number(run: str) -> VNumber:
    """Convert a collected numeric run; unconvertible runs become zero.

    ``-0`` becomes integer ``0``.
    """
    if "." in run or "e" in run or "E" in run:
        try:
            number = float(run)
        except ValueError:
            return VNumber(0.0)
        if not math.isfinite(number):
            return VNumber(0.0)
        return VNumber(number)
    try:
        return VNumber(int(run))
    except ValueError:
        if not _INTEGER_RE.match(run):
            return VNumber(0)
    # Past the int/str digit limit; Decimal converts without it.
    return VNumber(int(Decimal(run)))
