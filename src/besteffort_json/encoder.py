"""Canonical encoder: renders a Value tree as compact, key-sorted JSON."""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import NoReturn

import structlog

from .errors import InvalidValueError
from .values import Value, VArray, VBool, VNumber, VObject, VString, _Null

logger = structlog.get_logger()


def encode(value: Value | None) -> str:
    """Return the canonical encoding of *value*.

    Object keys are sorted, arrays keep their order and separators carry
    no whitespace, so equal trees always encode to equal strings.  ``None``
    (nothing parsed) encodes as ``null``.

    Raises InvalidValueError if the tree is not made of Value nodes.
    """
    if value is None:
        return "null"
    return _encode(value)


def _encode(value: Value) -> str:
    if isinstance(value, _Null):
        return "null"

    if isinstance(value, VBool):
        if not isinstance(value.value, bool):
            _invalid("boolean payload is not a bool", value)
        return "true" if value.value else "false"

    if isinstance(value, VNumber):
        number = value.value
        if isinstance(number, bool) or not isinstance(number, (int, float)):
            _invalid("number payload is not an int or float", value)
        if isinstance(number, float):
            if not math.isfinite(number):
                _invalid("number payload is not finite", value)
            return repr(value.float_value)
        # str() on an int refuses more than sys.get_int_max_str_digits() digits.
        return str(Decimal(value.int_value))

    if isinstance(value, VString):
        if not isinstance(value.value, str):
            _invalid("string payload is not a str", value)
        return json.dumps(value.value, ensure_ascii=False)

    if isinstance(value, VArray):
        return "[" + ",".join(_encode(item) for item in value.items) + "]"

    if isinstance(value, VObject):
        for key in value.entries:
            if not isinstance(key, str):
                _invalid("object key is not a str", value)
        members = (
            json.dumps(key, ensure_ascii=False) + ":" + _encode(value.entries[key])
            for key in sorted(value.entries)
        )
        return "{" + ",".join(members) + "}"

    _invalid(f"unexpected node type {type(value).__name__}", value)


def _invalid(message: str, node: object) -> NoReturn:
    logger.error("invalid_value_tree", reason=message, node=repr(node))
    raise InvalidValueError(message, node)
