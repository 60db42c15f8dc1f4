"""Desktop QWERTY: single view, shift for shifted symbols, key mapping."""

from __future__ import annotations

import pytest

from humankeys.keyboard import KeystrokeAnalyzer


@pytest.fixture
def desktop():
    return KeystrokeAnalyzer(keyboard_mode="desktop")


def test_default_desktop_profile(desktop):
    assert desktop.timing_profile.name == "Desktop Average"
    assert desktop.layout.modifiers.shift == "shift"


def test_letter_maps_to_physical_key(desktop):
    seq = desktop.analyze_character("q", 0, "q")
    assert [(k.key, k.kind, k.keyboard_view) for k in seq.keys] == [("q", "letter", "letters")]
    assert seq.total_duration == 80


def test_digits_never_switch_views(desktop):
    seq = desktop.analyze_character("7", 0, "7")
    assert [k.key for k in seq.keys] == ["7"]
    assert seq.keys[0].kind == "number"
    assert seq.total_duration == 100
    assert desktop.get_state().current_view == "letters"


def test_isolated_capital_shift_then_key(desktop):
    seq = desktop.analyze_character("H", 0, "Hi")
    assert [k.key for k in seq.keys] == ["shift", "h"]
    assert seq.keys[0].duration == 90
    assert seq.keys[1].character == "H"
    assert not seq.uses_caps_lock


def test_shifted_symbol_gets_shift(desktop):
    seq = desktop.analyze_character("!", 0, "!")
    assert [k.key for k in seq.keys] == ["shift", "1"]
    assert [k.kind for k in seq.keys] == ["modifier", "symbol"]
    assert seq.keys[1].character == "!"


def test_complex_shifted_symbol_penalty(desktop):
    seq = desktop.analyze_character("@", 0, "@")
    assert [k.key for k in seq.keys] == ["shift", "2"]
    assert seq.keys[1].duration == 120 + 30


def test_unshifted_symbol(desktop):
    seq = desktop.analyze_character("/", 0, "/")
    assert [k.key for k in seq.keys] == ["/"]
    assert seq.keys[0].kind == "symbol"


def test_tab_maps_to_tab_key(desktop):
    seq = desktop.analyze_character("\t", 0, "\t")
    assert [k.key for k in seq.keys] == ["tab"]


def test_unmapped_character_falls_back_to_letter(desktop):
    seq = desktop.analyze_character("É", 0, "É")
    assert len(seq.keys) == 1
    key = seq.keys[0]
    assert (key.key, key.character, key.kind) == ("é", "É", "letter")
    assert key.duration == 80


def test_space_and_enter(desktop):
    assert [k.key for k in desktop.analyze_character(" ", 0, " ").keys] == ["space"]
    assert [k.key for k in desktop.analyze_character("\n", 0, "\n").keys] == ["enter"]


def test_programmer_profile_from_developer_hint():
    analyzer = KeystrokeAnalyzer(keyboard_mode="desktop", typing_speed="developer")
    assert analyzer.timing_profile.name == "Desktop Programmer"
    seq = analyzer.analyze_character("{", 0, "{")
    assert seq.keys[1].duration == pytest.approx(75 * 0.7 + 10)


def test_same_hand_bonus_on_desktop(desktop):
    text = "aa"
    desktop.analyze_character("a", 0, text)
    seq = desktop.analyze_character("a", 1, text)
    assert seq.total_duration == pytest.approx(80 * 0.85)


def test_backspace_desktop(desktop):
    seq = desktop.analyze_backspace()
    assert seq.keys[0].key == "backspace"
    assert seq.total_duration == 100
