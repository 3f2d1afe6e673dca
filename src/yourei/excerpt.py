from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable

from .highlight import highlight
from .patterns import Matchers, compile_matchers
from .ruby import normalize_annotations
from .styles import TERMINAL_STYLES, StyleTable

FIELD_NAMES = ("prev", "sentence", "next", "source")


@dataclass(frozen=True, slots=True)
class Excerpt:
    prev: str | None = None
    sentence: str | None = None
    next: str | None = None
    source: str | None = None

    def map(self, func: Callable[[str], str]) -> Excerpt:
        """Apply ``func`` to every present field."""
        updates: dict[str, str] = {}
        for name in FIELD_NAMES:
            value = getattr(self, name)
            if value is not None:
                updates[name] = func(value)
        return replace(self, **updates)

    def render(self) -> str:
        text = (self.prev or "") + (self.sentence or "") + (self.next or "")
        if self.source is not None:
            return f"{text}\n{self.source}"
        return text

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True, slots=True)
class FormatOptions:
    word: str
    furigana: bool = False
    emphasize: bool = False
    styles: StyleTable = field(default=TERMINAL_STYLES)


class ExcerptFormatter:
    """Formats excerpts for one query, compiling the word matchers once."""

    def __init__(self, options: FormatOptions) -> None:
        self.options = options
        self.matchers: Matchers | None = None
        if options.emphasize:
            self.matchers = compile_matchers(options.word, options.styles)

    def normalize(self, excerpt: Excerpt) -> Excerpt:
        opts = self.options
        return excerpt.map(
            lambda text: normalize_annotations(text, furigana=opts.furigana, styles=opts.styles)
        )

    def emphasize(self, excerpt: Excerpt) -> Excerpt:
        if self.matchers is None:
            return excerpt
        matchers = self.matchers
        styles = self.options.styles
        return excerpt.map(lambda text: highlight(text, matchers, styles))

    def format(self, excerpt: Excerpt) -> str:
        # Readings must be inlined before matching; the matchers step over them.
        return self.emphasize(self.normalize(excerpt)).render()


def format_excerpt(excerpt: Excerpt, options: FormatOptions) -> str:
    return ExcerptFormatter(options).format(excerpt)
