from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StyleTable:
    """Control sequences for revealed readings and matched words.

    The ``*_off`` sequence must cancel its ``*_on`` counterpart. An empty
    table renders plain text.
    """

    reading_on: str
    reading_off: str
    highlight_on: str
    highlight_off: str

    def reading(self, text: str) -> str:
        return f"{self.reading_on}{text}{self.reading_off}"

    def highlight(self, text: str) -> str:
        return f"{self.highlight_on}{text}{self.highlight_off}"

    @property
    def has_reading_style(self) -> bool:
        return bool(self.reading_on) and bool(self.reading_off)


TERMINAL_STYLES = StyleTable(
    reading_on="\x1b[4m",
    reading_off="\x1b[24m",
    highlight_on="\x1b[32m",
    # Default foreground only, so an enclosing underline survives.
    highlight_off="\x1b[39m",
)

PLAIN_STYLES = StyleTable(reading_on="", reading_off="", highlight_on="", highlight_off="")
