"""Contextual timing calculator."""

from __future__ import annotations

import itertools

import pytest

from humankeys.keyboard import TimingContext, calculate_contextual_timing
from humankeys.keyboard import profiles


def test_no_context_is_base_times_multiplier():
    assert calculate_contextual_timing(100, profiles.MOBILE_CAREFUL) == 150
    assert calculate_contextual_timing(100, profiles.DESKTOP_GAMING, TimingContext()) == 50


def test_each_flag():
    p = profiles.MOBILE_CASUAL
    assert calculate_contextual_timing(100, p, TimingContext(same_hand=True)) == pytest.approx(90)
    assert calculate_contextual_timing(100, p, TimingContext(complex_symbol=True)) == 140
    assert calculate_contextual_timing(100, p, TimingContext(view_switch=True)) == 150
    assert calculate_contextual_timing(100, p, TimingContext(caps_lock_transition=True)) == 160


def test_flags_combine():
    p = profiles.MOBILE_CASUAL
    ctx = TimingContext(complex_symbol=True, view_switch=True)
    assert calculate_contextual_timing(100, p, ctx) == 100 + 40 + 50

    everything = TimingContext(True, True, True, True)
    assert calculate_contextual_timing(100, p, everything) == pytest.approx(90 + 40 + 50 + 60)


@pytest.mark.parametrize(
    "profile",
    list(profiles.MOBILE_TIMING_PROFILES.values())
    + list(profiles.DESKTOP_TIMING_PROFILES.values()),
)
def test_additive_flags_never_decrease(profile):
    for same_hand, complex_symbol, view_switch, caps in itertools.product([False, True], repeat=4):
        base_ctx = TimingContext(same_hand, complex_symbol, view_switch, caps)
        base = calculate_contextual_timing(80, profile, base_ctx)
        assert base >= 0
        for flag in ("complex_symbol", "view_switch", "caps_lock_transition"):
            if getattr(base_ctx, flag):
                continue
            raised = TimingContext(**{**base_ctx.__dict__, flag: True})
            assert calculate_contextual_timing(80, profile, raised) >= base


def test_linear_in_multiplier():
    from dataclasses import replace

    p = profiles.DESKTOP_AVERAGE
    doubled = replace(p, multiplier=p.multiplier * 2)
    assert calculate_contextual_timing(70, doubled) == pytest.approx(
        2 * calculate_contextual_timing(70, p)
    )
