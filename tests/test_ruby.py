from __future__ import annotations

import pytest

from yourei import logging_utils
from yourei.ruby import normalize_annotations
from yourei.styles import PLAIN_STYLES, TERMINAL_STYLES, StyleTable

ON = TERMINAL_STYLES.reading_on
OFF = TERMINAL_STYLES.reading_off


def test_reading_is_inlined_in_reading_style() -> None:
    text = normalize_annotations("<ruby>猫<rt>ねこ</rt></ruby>が好きだ", furigana=True)
    assert text == f"猫{ON}ねこ{OFF}が好きだ"


def test_reading_is_dropped_without_furigana() -> None:
    text = normalize_annotations("<ruby>猫<rt>ねこ</rt></ruby>が好きだ", furigana=False)
    assert text == "猫が好きだ"


def test_multiple_annotations_keep_their_base_text() -> None:
    raw = "<ruby>東京<rt>とうきょう</rt></ruby>と<ruby>京都<rt>きょうと</rt></ruby>"
    assert normalize_annotations(raw, furigana=False) == "東京と京都"
    assert normalize_annotations(raw, furigana=True) == f"東京{ON}とうきょう{OFF}と京都{ON}きょうと{OFF}"


def test_rb_and_rp_markup_is_removed() -> None:
    raw = "<ruby><rb>漢字</rb><rp>(</rp><rt>かんじ</rt><rp>)</rp></ruby>を書く"
    assert normalize_annotations(raw, furigana=False) == "漢字を書く"
    assert normalize_annotations(raw, furigana=True) == f"漢字{ON}かんじ{OFF}を書く"


def test_field_without_annotations_only_loses_wrappers() -> None:
    assert normalize_annotations("<ruby>猫</ruby>が好きだ", furigana=True) == "猫が好きだ"
    assert normalize_annotations("ただの文。", furigana=False) == "ただの文。"


@pytest.mark.parametrize("furigana", [True, False])
def test_normalizing_twice_is_a_no_op(furigana: bool) -> None:
    once = normalize_annotations("<ruby>猫<rt>ねこ</rt></ruby>が好きだ", furigana=furigana)
    assert normalize_annotations(once, furigana=furigana) == once


def test_custom_style_table_is_used() -> None:
    styles = StyleTable(reading_on="(", reading_off=")", highlight_on="*", highlight_off="*")
    text = normalize_annotations("<ruby>猫<rt>ねこ</rt></ruby>", furigana=True, styles=styles)
    assert text == "猫(ねこ)"


def test_plain_styles_inline_reading_without_control_sequences() -> None:
    text = normalize_annotations("<ruby>猫<rt>ねこ</rt></ruby>だ", furigana=True, styles=PLAIN_STYLES)
    assert text == "猫ねこだ"


def test_unterminated_reading_is_kept_as_text() -> None:
    raw = "<ruby>犬<rt>いぬ</rt></ruby>と<ruby>猫<rt>ねこ</ruby>だ"
    assert normalize_annotations(raw, furigana=False) == "犬と猫<rt>ねこだ"
    assert normalize_annotations(raw, furigana=True) == f"犬{ON}いぬ{OFF}と猫<rt>ねこだ"


def test_unterminated_reading_is_logged_in_debug_mode(monkeypatch, capsys) -> None:
    monkeypatch.setattr(logging_utils, "_DEBUG_LOG", True)
    normalize_annotations("猫<rt>ねこ", furigana=True)
    err = capsys.readouterr().err
    assert "[yourei debug]" in err
    assert "Unterminated reading annotation" in err
