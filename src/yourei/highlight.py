from __future__ import annotations

import re

from .logging_utils import debug_log
from .patterns import WORD_GROUP, Matchers
from .styles import TERMINAL_STYLES, StyleTable


def _wrap_all(pattern: re.Pattern[str], text: str, styles: StyleTable) -> str:
    return pattern.sub(lambda match: styles.highlight(match.group(WORD_GROUP)), text)


def highlight(text: str, matchers: Matchers, styles: StyleTable = TERMINAL_STYLES) -> str:
    """
    Wrap occurrences of the query word in the highlight style.

    Every occurrence found by the exact matcher is wrapped. The kanji skeleton
    matcher is consulted only when the exact matcher finds nothing, and then
    every skeleton occurrence is wrapped instead.
    """
    if matchers.exact.search(text):
        return _wrap_all(matchers.exact, text, styles)
    if matchers.skeleton is not None and matchers.skeleton.search(text):
        debug_log(f"Falling back to kanji skeleton match for {matchers.word!r}")
        return _wrap_all(matchers.skeleton, text, styles)
    return text
