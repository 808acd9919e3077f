"""Preprocessor: isolates the structured payload inside narrative text."""

from __future__ import annotations

from .config import ParseOptions, DEFAULT_OPTIONS


def extract_payload(text: str, options: ParseOptions = DEFAULT_OPTIONS) -> str:
    """Return the candidate payload span of *text*.

    Capture starts at the first line whose stripped text begins with the
    open marker and stops before the next line that begins with a fence
    marker.  Captured lines are joined without their newlines.  Returns
    ``""`` when no line opens a payload.

    Example::

        Sure, here you go.
        ```json
        {
          "a": 1
        }
        ```
        → '{  "a": 1}'
    """
    captured: list[str] = []
    capturing = False

    for line in text.split("\n"):
        stripped = line.strip()
        if not capturing:
            if not stripped.startswith(options.open_marker):
                continue
            capturing = True
        elif stripped.startswith(options.fence_marker):
            break
        captured.append(line)

    return "".join(captured)
