from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .models import TimingProfile


@dataclass(frozen=True)
class TimingContext:
    """Situational flags for one key press; any combination is valid."""

    same_hand: bool = False
    complex_symbol: bool = False
    view_switch: bool = False
    caps_lock_transition: bool = False


NO_CONTEXT = TimingContext()


def calculate_contextual_timing(
    base_duration: float,
    profile: TimingProfile,
    context: Optional[TimingContext] = None,
) -> float:
    """Scale a base duration by the profile and apply each flagged adjustment."""
    context = context or NO_CONTEXT
    adjusted = base_duration * profile.multiplier

    if context.same_hand:
        adjusted *= profile.same_hand_bonus
    if context.complex_symbol:
        adjusted += profile.complex_symbol_penalty
    if context.view_switch:
        adjusted += profile.view_switch_delay
    if context.caps_lock_transition:
        adjusted += profile.caps_lock_transition_delay

    return adjusted
