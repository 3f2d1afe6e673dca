from .errors import (
    FetchError,
    MalformedAnnotationError,
    PatternCompilationError,
    YoureiError,
)
from .excerpt import Excerpt, ExcerptFormatter, FormatOptions, format_excerpt
from .fetch import extract_excerpts, search_excerpts
from .highlight import highlight
from .kana import is_kana, strip_kana
from .patterns import Matchers, compile_matchers
from .ruby import normalize_annotations
from .styles import PLAIN_STYLES, TERMINAL_STYLES, StyleTable

__all__ = [
    "Excerpt",
    "ExcerptFormatter",
    "FormatOptions",
    "format_excerpt",
    "extract_excerpts",
    "search_excerpts",
    "highlight",
    "is_kana",
    "strip_kana",
    "Matchers",
    "compile_matchers",
    "normalize_annotations",
    "StyleTable",
    "TERMINAL_STYLES",
    "PLAIN_STYLES",
    "YoureiError",
    "FetchError",
    "PatternCompilationError",
    "MalformedAnnotationError",
]
