from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import PatternCompilationError
from .kana import KANA_CLASS, strip_kana, trailing_kana
from .logging_utils import debug_log
from .styles import TERMINAL_STYLES, StyleTable

WORD_GROUP = "word"


@dataclass(frozen=True, slots=True)
class Matchers:
    word: str
    exact: re.Pattern[str]
    # None when the query has no kanji to fall back on.
    skeleton: re.Pattern[str] | None


def _reading_span(styles: StyleTable, *, lazy: bool = True) -> str:
    """Optional clause that steps over one inline reading."""
    if not styles.has_reading_style:
        return ""
    on = re.escape(styles.reading_on)
    off = re.escape(styles.reading_off)
    quantifier = "??" if lazy else "?"
    return f"(?:{on}(?s:(?:(?!{off}).)*){off}){quantifier}"


def _compile(pattern: str, kind: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise PatternCompilationError(f"Invalid {kind} matcher {pattern!r}: {exc}") from exc


def exact_pattern(word: str, styles: StyleTable = TERMINAL_STYLES) -> str:
    span = _reading_span(styles)
    body = "".join(f"{re.escape(ch)}{span}" for ch in word)
    return f"(?P<{WORD_GROUP}>{body})"


def skeleton_pattern(word: str, styles: StyleTable = TERMINAL_STYLES) -> str | None:
    """
    Build the inflection-tolerant pattern for ``word``.

    Only the kanji are kept. Kana runs may sit between them, and the final
    kanji may carry up to as many kana as the query's own okurigana, so
    食べる also finds 食べた and 食べて. Returns None for kana-only words.
    """
    skeleton = strip_kana(word)
    if not skeleton:
        return None
    tail = len(trailing_kana(word))
    lazy_span = _reading_span(styles)
    units: list[str] = []
    for index, ch in enumerate(skeleton):
        literal = re.escape(ch)
        if index < len(skeleton) - 1:
            units.append(f"{literal}{lazy_span}{KANA_CLASS}*?{lazy_span}")
        elif tail:
            units.append(f"{literal}{_reading_span(styles, lazy=False)}{KANA_CLASS}{{0,{tail}}}")
        else:
            units.append(f"{literal}{lazy_span}")
    return f"(?P<{WORD_GROUP}>{''.join(units)})"


def compile_matchers(word: str, styles: StyleTable = TERMINAL_STYLES) -> Matchers:
    if not word:
        raise ValueError("Query word must not be empty.")
    exact = _compile(exact_pattern(word, styles), "exact")
    skeleton_source = skeleton_pattern(word, styles)
    if skeleton_source is None:
        debug_log(f"No kanji in {word!r}; using exact match only")
        skeleton = None
    else:
        skeleton = _compile(skeleton_source, "skeleton")
    debug_log(f"Compiled matchers for {word!r}: exact={exact.pattern!r} skeleton={skeleton_source!r}")
    return Matchers(word=word, exact=exact, skeleton=skeleton)
