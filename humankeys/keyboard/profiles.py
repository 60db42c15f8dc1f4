from __future__ import annotations
from dataclasses import replace
from typing import Dict, Optional, Tuple

from .config import AnalyzerConfig
from .layouts import base_layout_for_mode
from .models import KeyDurations, LayoutDefinition, TimingProfile

# =========================================================
# Mobile profiles
# =========================================================

MOBILE_CASUAL = TimingProfile(
    name="Mobile Casual",
    description="Average smartphone user, thumb typing",
    multiplier=1.0,
    key_durations=KeyDurations(
        letter=120,
        number=140,
        symbol=160,
        modifier=180,
        view_switch=150,
        space=100,
        enter=130,
        backspace=150,
    ),
    same_hand_bonus=0.9,
    complex_symbol_penalty=40,
    view_switch_delay=50,
    caps_lock_transition_delay=60,
)

MOBILE_FAST = TimingProfile(
    name="Mobile Fast",
    description="Experienced mobile user, swipe/predictive text habits",
    multiplier=0.7,
    key_durations=KeyDurations(
        letter=80,
        number=95,
        symbol=110,
        modifier=120,
        view_switch=100,
        space=70,
        enter=90,
        backspace=110,
    ),
    same_hand_bonus=0.85,
    complex_symbol_penalty=25,
    view_switch_delay=30,
    caps_lock_transition_delay=40,
)

MOBILE_CAREFUL = TimingProfile(
    name="Mobile Careful",
    description="Deliberate mobile typing, hunt-and-peck style",
    multiplier=1.5,
    key_durations=KeyDurations(
        letter=180,
        number=220,
        symbol=280,
        modifier=250,
        view_switch=200,
        space=150,
        enter=180,
        backspace=220,
    ),
    same_hand_bonus=0.95,
    complex_symbol_penalty=60,
    view_switch_delay=80,
    caps_lock_transition_delay=100,
)

TABLET = TimingProfile(
    name="Tablet",
    description="Tablet device, often landscape mode with more fingers",
    multiplier=0.8,
    key_durations=KeyDurations(
        letter=90,
        number=110,
        symbol=130,
        modifier=140,
        view_switch=120,
        space=80,
        enter=100,
        backspace=130,
    ),
    same_hand_bonus=0.8,
    complex_symbol_penalty=30,
    view_switch_delay=40,
    caps_lock_transition_delay=50,
)

# =========================================================
# Desktop profiles (no view switching)
# =========================================================

DESKTOP_AVERAGE = TimingProfile(
    name="Desktop Average",
    description="Average desktop user, ~40 WPM",
    multiplier=1.0,
    key_durations=KeyDurations(
        letter=80,
        number=100,
        symbol=120,
        modifier=90,
        view_switch=0,
        space=70,
        enter=90,
        backspace=100,
    ),
    same_hand_bonus=0.85,
    complex_symbol_penalty=30,
    view_switch_delay=0,
    caps_lock_transition_delay=50,
)

DESKTOP_FAST = TimingProfile(
    name="Desktop Fast",
    description="Experienced typist, ~70+ WPM, touch typing",
    multiplier=0.6,
    key_durations=KeyDurations(
        letter=50,
        number=65,
        symbol=80,
        modifier=60,
        view_switch=0,
        space=45,
        enter=60,
        backspace=70,
    ),
    same_hand_bonus=0.8,
    complex_symbol_penalty=15,
    view_switch_delay=0,
    caps_lock_transition_delay=25,
)

DESKTOP_PROGRAMMER = TimingProfile(
    name="Desktop Programmer",
    description="Developer typing, frequent symbols and modifiers",
    multiplier=0.7,
    key_durations=KeyDurations(
        letter=60,
        number=70,
        symbol=75,
        modifier=65,
        view_switch=0,
        space=50,
        enter=70,
        backspace=80,
    ),
    same_hand_bonus=0.8,
    complex_symbol_penalty=10,
    view_switch_delay=0,
    caps_lock_transition_delay=30,
)

DESKTOP_SLOW = TimingProfile(
    name="Desktop Slow",
    description="Hunt-and-peck typing, looking at keyboard",
    multiplier=2.0,
    key_durations=KeyDurations(
        letter=160,
        number=200,
        symbol=250,
        modifier=180,
        view_switch=0,
        space=140,
        enter=160,
        backspace=180,
    ),
    same_hand_bonus=0.95,
    complex_symbol_penalty=80,
    view_switch_delay=0,
    caps_lock_transition_delay=120,
)

DESKTOP_GAMING = TimingProfile(
    name="Desktop Gaming",
    description="Mechanical keyboard, gaming-optimized typing",
    multiplier=0.5,
    key_durations=KeyDurations(
        letter=40,
        number=50,
        symbol=60,
        modifier=45,
        view_switch=0,
        space=35,
        enter=50,
        backspace=60,
    ),
    same_hand_bonus=0.75,
    complex_symbol_penalty=10,
    view_switch_delay=0,
    caps_lock_transition_delay=20,
)

MOBILE_TIMING_PROFILES: Dict[str, TimingProfile] = {
    "mobile_casual": MOBILE_CASUAL,
    "mobile_fast": MOBILE_FAST,
    "mobile_careful": MOBILE_CAREFUL,
    "tablet": TABLET,
}

DESKTOP_TIMING_PROFILES: Dict[str, TimingProfile] = {
    "desktop_average": DESKTOP_AVERAGE,
    "desktop_fast": DESKTOP_FAST,
    "desktop_programmer": DESKTOP_PROGRAMMER,
    "desktop_slow": DESKTOP_SLOW,
    "desktop_gaming": DESKTOP_GAMING,
}

# hint -> profile, per mode; anything unlisted falls back to the mode default
_MOBILE_HINTS: Dict[str, TimingProfile] = {
    "fast": MOBILE_FAST,
    "slow": MOBILE_CAREFUL,
    "careful": MOBILE_CAREFUL,
    "tablet": TABLET,
}

_DESKTOP_HINTS: Dict[str, TimingProfile] = {
    "fast": DESKTOP_FAST,
    "slow": DESKTOP_SLOW,
    "programmer": DESKTOP_PROGRAMMER,
    "developer": DESKTOP_PROGRAMMER,
    "gaming": DESKTOP_GAMING,
}


def get_default_timing_profile(mode: str, hint: Optional[str] = None) -> TimingProfile:
    """Pick the profile for a keyboard mode and an optional speed hint.

    Never raises: unknown modes are treated as desktop, unknown hints give
    the mode's default (Mobile Casual / Desktop Average).
    """
    key = hint.strip().lower() if isinstance(hint, str) else ""
    if mode == "mobile":
        return _MOBILE_HINTS.get(key, MOBILE_CASUAL)
    return _DESKTOP_HINTS.get(key, DESKTOP_AVERAGE)


def get_timing_profile(name: str) -> TimingProfile:
    """Look up a profile by registry id, e.g. "desktop_programmer"."""
    key = name.lower()
    if key in MOBILE_TIMING_PROFILES:
        return MOBILE_TIMING_PROFILES[key]
    if key in DESKTOP_TIMING_PROFILES:
        return DESKTOP_TIMING_PROFILES[key]
    raise KeyError(f"unknown timing profile {name!r}")


def apply_timing_profile(
    layout: LayoutDefinition, profile: TimingProfile
) -> LayoutDefinition:
    """Return the layout with its duration table replaced by the profile's."""
    return replace(layout, key_durations=profile.key_durations)


def resolve_layout(config: AnalyzerConfig) -> Tuple[LayoutDefinition, TimingProfile]:
    """Run the configuration pipeline for an AnalyzerConfig.

    mode default layout -> custom layout override -> profile selection
    -> profile durations merged into the layout.
    """
    layout = base_layout_for_mode(config.keyboard_mode)
    if config.custom_layout is not None:
        layout = config.custom_layout
    profile = get_default_timing_profile(config.keyboard_mode, config.typing_speed)
    return apply_timing_profile(layout, profile), profile
