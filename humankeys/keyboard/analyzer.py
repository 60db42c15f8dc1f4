from __future__ import annotations
import logging
from dataclasses import replace
from typing import Optional

from .config import AnalyzerConfig, kcfg
from .models import KeyboardState, KeyEvent, KeySequence, LayoutDefinition, TimingProfile
from .profiles import resolve_layout
from .strategies import STRATEGIES
from .timing import TimingContext, calculate_contextual_timing
from .utils import detect_caps_lock_run

_log = logging.getLogger(__name__)

BACKSPACE = "\b"


class SequenceOrderError(ValueError):
    """Raised in strict mode when a call does not follow the text position."""


class KeystrokeAnalyzer:
    """Turns characters into timed physical key sequences on a simulated keyboard.

    Feed characters of one text left to right; view and caps-lock state carry
    over between calls. Call reset_state() before starting an unrelated text.
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None, **overrides):
        if config is None:
            config = AnalyzerConfig(**overrides)
        elif overrides:
            config = replace(config, **overrides)
        self.config = config

        self._layout, self._profile = resolve_layout(config)
        self._strategy = STRATEGIES[config.keyboard_mode](self._layout, self._timed)
        self._state = KeyboardState(mode=config.keyboard_mode)
        self._cursor = 0

        self._debug(
            "initialized: mode=%s profile=%s layout=%s",
            config.keyboard_mode,
            self._profile.name,
            self._layout.name,
        )

    @property
    def layout(self) -> LayoutDefinition:
        return self._layout

    @property
    def timing_profile(self) -> TimingProfile:
        return self._profile

    def _debug(self, msg: str, *args) -> None:
        if self.config.debug:
            _log.debug("[KeystrokeAnalyzer] " + msg, *args)

    def _timed(self, base_duration: float, context: TimingContext) -> float:
        if not self.config.use_natural_timing:
            return base_duration
        return calculate_contextual_timing(base_duration, self._profile, context)

    def _check_position(self, character: str, index: int, full_text: str) -> None:
        if not 0 <= index < len(full_text):
            raise IndexError(
                f"index {index} out of range for text of length {len(full_text)}"
            )
        if full_text[index] != character:
            raise ValueError(
                f"character {character!r} does not match text[{index}] "
                f"= {full_text[index]!r}"
            )
        if self.config.strict_order and index != self._cursor:
            raise SequenceOrderError(
                f"expected text position {self._cursor}, got {index}; "
                "call reset_state() before analyzing a new text"
            )

    def analyze_character(self, character: str, index: int, full_text: str) -> KeySequence:
        """Analyze ``full_text[index]`` and return the keys that type it."""
        self._check_position(character, index, full_text)
        self._debug("analyzing %r at index %d", character, index)

        self._state.remember(character)
        caps = detect_caps_lock_run(
            character, index, full_text, self.config.caps_lock_threshold
        )
        keys = self._strategy.analyze(character, caps, self._state)
        self._cursor = index + 1

        sequence = KeySequence.build(character, keys, caps.is_caps_lock)
        self._debug(
            "%r -> %s (%.1f ms)",
            character,
            [key.key for key in sequence.keys],
            sequence.total_duration,
        )
        return sequence

    def analyze_backspace(self) -> KeySequence:
        """One backspace press; view, caps lock and history are left untouched."""
        durations = self._layout.key_durations
        duration = durations.backspace or durations.modifier or kcfg.BACKSPACE_FLOOR_MS
        key = KeyEvent(
            self._layout.modifiers.backspace,
            BACKSPACE,
            "backspace",
            self._state.current_view,
            False,
            duration,
        )
        self._cursor = max(0, self._cursor - 1)
        self._debug("backspace (%.1f ms)", duration)
        return KeySequence.build(BACKSPACE, [key])

    def get_state(self) -> KeyboardState:
        """Snapshot of the keyboard state; mutating it does not affect the analyzer."""
        return self._state.copy()

    def reset_state(self) -> None:
        self._state = KeyboardState(mode=self.config.keyboard_mode)
        self._cursor = 0
        self._debug("state reset")
