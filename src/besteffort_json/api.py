"""Public entry points: raw model output in, best-effort value out."""

from __future__ import annotations

from typing import Any

from .config import ParseOptions, DEFAULT_OPTIONS
from .encoder import encode
from .preprocess import extract_payload
from .reader import parse_value
from .values import Value, Null


def parse_tree(raw_text: str, options: ParseOptions = DEFAULT_OPTIONS) -> Value:
    """Parse *raw_text* into a Value tree.

    Narrative before the payload and everything from a closing fence on
    are ignored.  Returns ``Null`` when there is no payload yet.
    """
    payload = extract_payload(raw_text, options)
    value, _ = parse_value(payload, 0, 0, options.max_depth)
    return Null if value is None else value


def parse(raw_text: str, options: ParseOptions = DEFAULT_OPTIONS) -> str:
    """Return the canonical JSON encoding of the best-effort value.

    Never fails on truncated or malformed text::

        parse('{ "fact": "some')   # → '{"fact":"some"}'
        parse('no payload yet')    # → 'null'
    """
    return encode(parse_tree(raw_text, options))


def parse_python(raw_text: str, options: ParseOptions = DEFAULT_OPTIONS) -> Any:
    """Like parse_tree(), but as plain dicts, lists and scalars."""
    return parse_tree(raw_text, options).to_python()
