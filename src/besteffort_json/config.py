"""Parse options."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseOptions:
    """Knobs for payload extraction and parsing.

    ``open_marker`` starts capture when it leads a (trimmed) line,
    ``fence_marker`` ends it.  ``max_depth`` bounds array/object nesting;
    ``None`` leaves the interpreter's recursion limit as the only bound.
    """

    open_marker: str = "{"
    fence_marker: str = "```"
    max_depth: int | None = 256

    def __post_init__(self) -> None:
        if not self.open_marker:
            raise ValueError("open_marker must not be empty")
        if not self.fence_marker:
            raise ValueError("fence_marker must not be empty")
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError("max_depth must be positive")


DEFAULT_OPTIONS = ParseOptions()
