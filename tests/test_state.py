"""Analyzer state: snapshots, history, reset, backspace, preconditions."""

from __future__ import annotations

import pytest

from humankeys.keyboard import AnalyzerConfig, KeystrokeAnalyzer, SequenceOrderError


def _type(analyzer, text):
    return [analyzer.analyze_character(ch, i, text) for i, ch in enumerate(text)]


def test_initial_state():
    state = KeystrokeAnalyzer(keyboard_mode="desktop").get_state()
    assert state.current_view == "letters"
    assert not state.caps_lock_active
    assert not state.shift_active
    assert list(state.recent_characters) == []
    assert state.mode == "desktop"


def test_get_state_returns_a_copy():
    analyzer = KeystrokeAnalyzer()
    _type(analyzer, "ab")
    snapshot = analyzer.get_state()
    snapshot.recent_characters.append("z")
    snapshot.current_view = "symbols"

    fresh = analyzer.get_state()
    assert list(fresh.recent_characters) == ["a", "b"]
    assert fresh.current_view == "letters"


def test_history_keeps_last_ten():
    analyzer = KeystrokeAnalyzer()
    text = "abcdefghijkl"
    _type(analyzer, text)
    assert list(analyzer.get_state().recent_characters) == list(text[2:])


def test_reset_state_restores_defaults():
    analyzer = KeystrokeAnalyzer()
    _type(analyzer, "ABC 1%")
    analyzer.analyze_character("H", 0, "HELLO")  # leaves caps lock engaged
    assert analyzer.get_state().caps_lock_active

    analyzer.reset_state()
    state = analyzer.get_state()
    assert state.current_view == "letters"
    assert not state.caps_lock_active
    assert not state.shift_active
    assert list(state.recent_characters) == []

    analyzer.reset_state()
    assert analyzer.get_state() == state


def test_backspace_leaves_view_and_caps_alone():
    analyzer = KeystrokeAnalyzer()
    text = "1%HELLO"
    for i in range(3):
        analyzer.analyze_character(text[i], i, text)
    before = analyzer.get_state()
    assert before.current_view == "letters"
    assert before.caps_lock_active

    seq = analyzer.analyze_backspace()
    after = analyzer.get_state()
    assert seq.keys[0].keyboard_view == "letters"
    assert after.current_view == before.current_view
    assert after.caps_lock_active == before.caps_lock_active
    assert list(after.recent_characters) == list(before.recent_characters)


def test_backspace_reports_current_view():
    analyzer = KeystrokeAnalyzer()
    analyzer.analyze_character("%", 0, "%")
    assert analyzer.analyze_backspace().keys[0].keyboard_view == "symbols"


def test_index_out_of_range():
    analyzer = KeystrokeAnalyzer()
    with pytest.raises(IndexError):
        analyzer.analyze_character("a", 3, "abc")
    with pytest.raises(IndexError):
        analyzer.analyze_character("a", -1, "abc")


def test_character_must_match_text():
    analyzer = KeystrokeAnalyzer()
    with pytest.raises(ValueError):
        analyzer.analyze_character("x", 0, "abc")
    # a rejected call leaves no trace
    assert list(analyzer.get_state().recent_characters) == []


def test_strict_order_rejects_skips():
    analyzer = KeystrokeAnalyzer(strict_order=True)
    text = "abc"
    analyzer.analyze_character("a", 0, text)
    with pytest.raises(SequenceOrderError):
        analyzer.analyze_character("c", 2, text)


def test_strict_order_backspace_steps_back():
    analyzer = KeystrokeAnalyzer(strict_order=True)
    text = "abc"
    analyzer.analyze_character("a", 0, text)
    analyzer.analyze_character("b", 1, text)
    analyzer.analyze_backspace()
    analyzer.analyze_character("b", 1, text)
    analyzer.analyze_character("c", 2, text)


def test_strict_order_reset_starts_over():
    analyzer = KeystrokeAnalyzer(strict_order=True)
    analyzer.analyze_character("a", 0, "ab")
    with pytest.raises(SequenceOrderError):
        analyzer.analyze_character("x", 0, "xy")
    analyzer.reset_state()
    analyzer.analyze_character("x", 0, "xy")


def test_loose_order_allows_probing():
    analyzer = KeystrokeAnalyzer()
    analyzer.analyze_character("O", 4, "HELLO world")
    analyzer.analyze_character("H", 0, "HELLO world")


def test_invalid_config():
    with pytest.raises(ValueError):
        AnalyzerConfig(keyboard_mode="tablet")
    with pytest.raises(ValueError):
        AnalyzerConfig(caps_lock_threshold=0)
    with pytest.raises(ValueError):
        AnalyzerConfig(caps_lock_threshold=True)


def test_overrides_on_top_of_config():
    base = AnalyzerConfig(keyboard_mode="desktop", typing_speed="fast")
    analyzer = KeystrokeAnalyzer(base, caps_lock_threshold=5)
    assert analyzer.config.keyboard_mode == "desktop"
    assert analyzer.config.caps_lock_threshold == 5
    assert analyzer.timing_profile.name == "Desktop Fast"


def test_independent_analyzers_share_no_state():
    a = KeystrokeAnalyzer()
    b = KeystrokeAnalyzer()
    a.analyze_character("5", 0, "5")
    assert a.get_state().current_view == "numbers"
    assert b.get_state().current_view == "letters"
    assert a.layout == b.layout


def test_debug_traces_go_to_logger(caplog):
    analyzer = KeystrokeAnalyzer(debug=True)
    with caplog.at_level("DEBUG", logger="humankeys.keyboard.analyzer"):
        analyzer.analyze_character("a", 0, "a")
    assert any("KeystrokeAnalyzer" in r.getMessage() for r in caplog.records)


def test_debug_off_is_silent(caplog):
    analyzer = KeystrokeAnalyzer()
    with caplog.at_level("DEBUG", logger="humankeys.keyboard.analyzer"):
        analyzer.analyze_character("a", 0, "a")
    assert not caplog.records
