"""Best-Effort JSON: tolerant parsing of partial JSON from streamed model output."""

from .api import parse, parse_python, parse_tree
from .config import DEFAULT_OPTIONS, ParseOptions
from .encoder import encode
from .errors import BestEffortJSONError, InvalidValueError, NestingTooDeepError
from .preprocess import extract_payload
from .progress import ProgressParser, iter_progress
from .values import (
    Null,
    Value,
    VArray,
    VBool,
    VNumber,
    VObject,
    VString,
    _Null,
)

__all__ = [
    "parse",
    "parse_python",
    "parse_tree",
    "encode",
    "extract_payload",
    "ParseOptions",
    "DEFAULT_OPTIONS",
    "ProgressParser",
    "iter_progress",
    "BestEffortJSONError",
    "InvalidValueError",
    "NestingTooDeepError",
    "Null",
    "Value",
    "VArray",
    "VBool",
    "VNumber",
    "VObject",
    "VString",
]
