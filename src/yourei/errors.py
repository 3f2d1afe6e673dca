from __future__ import annotations


class YoureiError(RuntimeError):
    """Base class for errors raised while looking up examples."""

    stage = "lookup"


class FetchError(YoureiError):
    """Raised when the example page cannot be retrieved."""

    stage = "fetch"


class PatternCompilationError(YoureiError):
    """Raised when a generated word matcher is rejected by ``re``."""

    stage = "compilation"


class MalformedAnnotationError(YoureiError):
    """Raised when a reading annotation is missing its closing marker."""

    stage = "normalization"

    def __init__(self, fragment: str, position: int) -> None:
        super().__init__(f"Unterminated reading annotation at offset {position}: {fragment[position:position + 24]!r}")
        self.fragment = fragment
        self.position = position
