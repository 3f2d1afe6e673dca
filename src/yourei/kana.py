from __future__ import annotations

# Hiragana and Katakana letters, iteration marks and the prolonged sound mark.
# Voicing marks (U+309B-309C), U+30A0 and the middle dot U+30FB are punctuation.
KANA_RANGES: tuple[tuple[int, int], ...] = (
    (0x3041, 0x3096),
    (0x309D, 0x309F),
    (0x30A1, 0x30FA),
    (0x30FC, 0x30FF),
    (0x31F0, 0x31FF),
    (0xFF66, 0xFF6F),
    (0xFF71, 0xFF9D),
)

KANA_CLASS = "[" + "".join(f"\\u{lo:04x}-\\u{hi:04x}" for lo, hi in KANA_RANGES) + "]"


def is_kana(ch: str) -> bool:
    if len(ch) != 1:
        return False
    code = ord(ch)
    return any(lo <= code <= hi for lo, hi in KANA_RANGES)


def strip_kana(text: str) -> str:
    """Return the kanji skeleton of ``text``."""
    return "".join(ch for ch in text if not is_kana(ch))


def trailing_kana(text: str) -> str:
    """Return the kana run that follows the last non-kana character."""
    end = len(text)
    start = end
    while start > 0 and is_kana(text[start - 1]):
        start -= 1
    if start == 0:
        return ""
    return text[start:end]
