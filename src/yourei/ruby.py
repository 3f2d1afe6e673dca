from __future__ import annotations

import re
from typing import Iterator

from .errors import MalformedAnnotationError
from .logging_utils import debug_log
from .styles import TERMINAL_STYLES, StyleTable

# Markers that only group a base with its reading.
WRAPPER_MARKERS = ("<ruby>", "</ruby>", "<rb>", "</rb>")
READING_OPEN = "<rt>"
READING_CLOSE = "</rt>"
# <rp> holds fallback parentheses for renderers without ruby support.
_FALLBACK_PAREN_PATTERN = re.compile(r"<rp>.*?</rp>", re.DOTALL)


def _strip_wrappers(fragment: str) -> str:
    for marker in WRAPPER_MARKERS:
        fragment = fragment.replace(marker, "")
    return _FALLBACK_PAREN_PATTERN.sub("", fragment)


def _iter_segments(fragment: str) -> Iterator[tuple[str, bool]]:
    """
    Split ``fragment`` into ``(text, is_reading)`` pieces.

    Raises MalformedAnnotationError once the scan reaches an ``<rt>`` without
    a matching ``</rt>``; everything before it has already been yielded.
    """
    pos = 0
    while True:
        start = fragment.find(READING_OPEN, pos)
        if start == -1:
            if pos < len(fragment):
                yield fragment[pos:], False
            return
        if start > pos:
            yield fragment[pos:start], False
        end = fragment.find(READING_CLOSE, start + len(READING_OPEN))
        if end == -1:
            raise MalformedAnnotationError(fragment, start)
        yield fragment[start + len(READING_OPEN) : end], True
        pos = end + len(READING_CLOSE)


def normalize_annotations(
    fragment: str,
    *,
    furigana: bool,
    styles: StyleTable = TERMINAL_STYLES,
) -> str:
    """
    Reduce ruby markup in an excerpt fragment to display text.

    Readings are re-rendered inline in the reading style when ``furigana`` is
    set and dropped otherwise. The annotated base text is always kept.
    """
    stripped = _strip_wrappers(fragment)
    pieces: list[str] = []
    try:
        for text, is_reading in _iter_segments(stripped):
            if not is_reading:
                pieces.append(text)
            elif furigana:
                pieces.append(styles.reading(text))
    except MalformedAnnotationError as exc:
        debug_log(f"Keeping malformed annotation as text: {exc}")
        pieces.append(stripped[exc.position :])
    return "".join(pieces)
