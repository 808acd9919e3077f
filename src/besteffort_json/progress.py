"""ProgressParser: incremental view over a streamed completion."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

import structlog

from .api import parse_tree
from .config import ParseOptions, DEFAULT_OPTIONS
from .encoder import encode
from .values import Value, VArray, VObject, Null

logger = structlog.get_logger()


class ProgressParser:
    """Accumulates streamed text and re-parses it after every increment.

    Usage::

        progress = ProgressParser()
        for chunk in stream:
            progress.feed(chunk)
            render(progress.results())   # items under "results" so far

        progress.encoded   # canonical JSON of the latest value
        progress.reset()   # start over for a new completion

    Each feed re-parses the whole accumulated text, so total work grows
    with the square of the stream length.  Batch small increments before
    feeding if that matters.
    """

    def __init__(self, options: ParseOptions = DEFAULT_OPTIONS) -> None:
        self.options = options
        self._chunks: list[str] = []
        self._value: Value = Null

    @property
    def text(self) -> str:
        """Everything fed since construction or the last reset()."""
        return "".join(self._chunks)

    @property
    def value(self) -> Value:
        return self._value

    @property
    def encoded(self) -> str:
        return encode(self._value)

    def feed(self, chunk: str) -> Value:
        """Append *chunk* and return the value parsed from the total text."""
        self._chunks.append(chunk)
        text = self.text
        self._value = parse_tree(text, self.options)
        logger.debug("progress_reparsed", chunks=len(self._chunks), length=len(text))
        return self._value

    def results(self, key: str = "results") -> list[Any]:
        """Items collected so far under top-level *key*.

        Returns ``[]`` until the key holds an array.
        """
        if not isinstance(self._value, VObject):
            return []
        found = self._value.entries.get(key)
        if not isinstance(found, VArray):
            return []
        return found.to_python()

    def reset(self) -> None:
        """Drop all accumulated text."""
        self._chunks = []
        self._value = Null


def iter_progress(
    chunks: Iterable[str],
    options: ParseOptions = DEFAULT_OPTIONS,
) -> Iterator[str]:
    """Yield the canonical encoding after each chunk of *chunks*."""
    progress = ProgressParser(options)
    for chunk in chunks:
        progress.feed(chunk)
        yield progress.encoded
