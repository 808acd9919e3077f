"""Reader layer: recursive-descent parsing of a payload span into Values.

``parse_value``, ``parse_object`` and ``parse_array`` recurse into each
other over a shared ``(text, offset)`` cursor.  Every function returns
``(value, end)`` with *end* just past the consumed input, and none of
them raises on truncated or malformed text.
"""

from __future__ import annotations

import structlog

from .errors import NestingTooDeepError
from .literals import parse_scalar, parse_string, unescape
from .values import Value, VArray, VObject, Null

logger = structlog.get_logger()

# Skipped before a value starts.  Closing brackets and commas are included:
# the dispatcher is re-entered right after a sibling value, before its
# trailing separator is consumed.
_INSIGNIFICANT = frozenset(" \t\n\r},]")
_ARRAY_SKIP = frozenset(" \t\n\r,")


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

def parse_value(
    text: str,
    offset: int = 0,
    depth: int = 0,
    max_depth: int | None = None,
) -> tuple[Value | None, int]:
    """Parse the next value at or after *offset*.

    Returns ``(None, len(text))`` when the text runs out before a value
    starts; callers must not store that as a real value.
    """
    i = offset
    while i < len(text):
        char = text[i]
        if char in _INSIGNIFICANT:
            i += 1
            continue
        if char == "{":
            return parse_object(text, i, depth, max_depth)
        if char == "[":
            return parse_array(text, i, depth, max_depth)
        if char == '"':
            return parse_string(text, i)
        return parse_scalar(text, i)
    return None, i


def _enter(depth: int, offset: int, max_depth: int | None) -> None:
    if max_depth is not None and depth >= max_depth:
        logger.warning("nesting_limit_exceeded", depth=depth + 1, offset=offset, max_depth=max_depth)
        raise NestingTooDeepError(depth + 1, offset)


# ---------------------------------------------------------------------------
# Objects
# ---------------------------------------------------------------------------

def parse_object(
    text: str,
    offset: int,
    depth: int = 0,
    max_depth: int | None = None,
) -> tuple[VObject, int]:
    """Parse an object starting at its ``{``.

    Walks ``looking_for_key → in_key → looking_for_colon →
    looking_for_value``.  Key escapes decode like string escapes.  A key
    that never sees its colon is dropped, as is a key whose colon is
    followed directly by ``}``.  A key whose colon was seen when the text
    runs out is bound to null.
    Later duplicates of a key overwrite earlier ones.
    """
    _enter(depth, offset, max_depth)

    entries: dict[str, Value] = {}
    state = "looking_for_key"
    key_chars: list[str] = []
    escaped = False
    i = offset + 1 if text.startswith("{", offset) else offset

    while i < len(text):
        char = text[i]

        if state == "in_key":
            i += 1
            if escaped:
                key_chars.append(unescape(char))
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                state = "looking_for_colon"
            else:
                key_chars.append(char)
            continue

        if char == "}":
            return VObject(entries), i + 1

        if state == "looking_for_value":
            value, i = parse_value(text, i, depth + 1, max_depth)
            entries["".join(key_chars)] = Null if value is None else value
            state = "looking_for_key"
            continue

        i += 1
        if state == "looking_for_key":
            if char == '"':
                key_chars = []
                escaped = False
                state = "in_key"
        elif state == "looking_for_colon":
            if char == ":":
                state = "looking_for_value"

    if state == "looking_for_value":
        entries["".join(key_chars)] = Null
    return VObject(entries), i


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------

def parse_array(
    text: str,
    offset: int,
    depth: int = 0,
    max_depth: int | None = None,
) -> tuple[VArray, int]:
    """Parse an array starting at its ``[``.

    Whitespace and commas between elements are skipped, so trailing and
    doubled commas are harmless.
    """
    _enter(depth, offset, max_depth)

    items: list[Value] = []
    i = offset + 1 if text.startswith("[", offset) else offset

    while i < len(text):
        char = text[i]
        if char == "]":
            return VArray(items), i + 1
        if char in _ARRAY_SKIP:
            i += 1
            continue
        value, i = parse_value(text, i, depth + 1, max_depth)
        if value is not None:
            items.append(value)

    return VArray(items), i
