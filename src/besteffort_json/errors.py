"""Exceptions raised by Best-Effort JSON.

Malformed or truncated input never raises; these cover resource limits
and internal defects only.
"""

from __future__ import annotations


class BestEffortJSONError(Exception):
    """Base class for all package errors."""


class NestingTooDeepError(BestEffortJSONError):
    """The payload nests arrays/objects deeper than ``max_depth``."""

    def __init__(self, depth: int, offset: int) -> None:
        super().__init__(f"nesting depth {depth} exceeded at offset {offset}")
        self.depth = depth
        self.offset = offset


class InvalidValueError(BestEffortJSONError):
    """A value tree handed to the encoder breaks the data model."""

    def __init__(self, message: str, node: object = None) -> None:
        super().__init__(message)
        self.node = node
