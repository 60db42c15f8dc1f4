from __future__ import annotations
from typing import Callable, Dict, List, Optional, Tuple, Type

from .config import kcfg
from .layouts import DESKTOP_KEY_MAPPING, MOBILE_CHARACTER_TO_VIEW
from .models import KeyboardState, KeyDurations, KeyEvent, LayoutDefinition
from .timing import NO_CONTEXT, TimingContext
from .utils import (
    CapsLockRun,
    _is_complex_symbol,
    _is_same_hand,
    _is_upper_letter,
    _key_kind,
)

TimedFn = Callable[[float, TimingContext], float]


class _ModeStrategy:
    """Turns one character into physical key presses for a keyboard mode.

    Strategies hold no state of their own; everything that changes between
    characters lives on the KeyboardState passed in.
    """

    mode = ""

    def __init__(self, layout: LayoutDefinition, timed: TimedFn):
        self.layout = layout
        self._timed = timed

    @property
    def durations(self) -> KeyDurations:
        return self.layout.key_durations

    def analyze(
        self, character: str, caps: CapsLockRun, state: KeyboardState
    ) -> List[KeyEvent]:
        state.shift_active = False
        mods = self.layout.modifiers
        view = state.current_view
        if character == " ":
            return [KeyEvent(mods.space, " ", "space", view, False, self.durations.space)]
        if character == "\n":
            return [KeyEvent(mods.enter, "\n", "enter", view, False, self.durations.enter)]
        return self._analyze_printable(character, caps, state)

    def _analyze_printable(
        self, character: str, caps: CapsLockRun, state: KeyboardState
    ) -> List[KeyEvent]:
        raise NotImplementedError

    # --- key builders -------------------------------------------------

    def _character_key(
        self,
        character: str,
        key: str,
        kind: str,
        view: str,
        is_caps_lock: bool,
        state: KeyboardState,
    ) -> KeyEvent:
        context = TimingContext(
            same_hand=kind == "letter"
            and _is_same_hand(state.previous_character(), character),
            complex_symbol=kind == "symbol" and _is_complex_symbol(character),
        )
        duration = self._timed(self.durations.for_kind(kind), context)
        return KeyEvent(key, character, kind, view, is_caps_lock, duration)

    def _shift_key(self, view: str) -> KeyEvent:
        duration = self._timed(self.durations.modifier, NO_CONTEXT)
        return KeyEvent(self.layout.modifiers.shift, "", "modifier", view, False, duration)

    def _caps_key(self, turning_on: bool, view: str, character: str = "") -> KeyEvent:
        duration = self._timed(
            self.durations.modifier, TimingContext(caps_lock_transition=True)
        )
        if turning_on:
            duration += kcfg.CAPS_ON_EXTRA_MS
        return KeyEvent(self.layout.modifiers.caps, character, "modifier", view, True, duration)

    def _uppercase_keys(
        self,
        character: str,
        caps: CapsLockRun,
        state: KeyboardState,
        letter: KeyEvent,
    ) -> List[KeyEvent]:
        view = state.current_view
        if not caps.is_caps_lock:
            state.shift_active = True
            return [self._shift_key(view), letter]

        if caps.is_first and caps.is_last:
            # one-letter run (threshold 1): full toggle around the letter
            state.caps_lock_active = False
            return [self._caps_key(True, view), letter, self._caps_key(False, view)]

        if caps.is_first:
            # the caps-on press stands in for the run's first letter
            state.caps_lock_active = True
            return [self._caps_key(True, view, character)]

        if caps.is_last:
            state.caps_lock_active = False
            return [letter, self._caps_key(False, view)]

        return [letter]


class MobileStrategy(_ModeStrategy):
    mode = "mobile"

    def __init__(
        self,
        layout: LayoutDefinition,
        timed: TimedFn,
        view_index: Optional[Dict[str, str]] = None,
    ):
        super().__init__(layout, timed)
        self.view_index = MOBILE_CHARACTER_TO_VIEW if view_index is None else view_index

    def _target_view(self, character: str) -> str:
        view = self.view_index.get(character, "letters")
        if view == "emoji" and not self.layout.view_switchers.to_emoji:
            return "letters"
        return view

    def _view_switch_key(self, key: str, from_view: str) -> KeyEvent:
        duration = self._timed(
            self.durations.view_switch, TimingContext(view_switch=True)
        )
        return KeyEvent(key, "", "view-switch", from_view, duration=duration)

    def _view_switch_keys(self, from_view: str, to_view: str) -> List[KeyEvent]:
        switchers = self.layout.view_switchers
        if from_view == to_view:
            return []
        if to_view == "numbers":
            return [self._view_switch_key(switchers.to_numbers, from_view)]
        if to_view == "symbols":
            # the "#+=" toggle only exists on the numbers page
            keys = []
            if from_view != "numbers":
                keys.append(self._view_switch_key(switchers.to_numbers, from_view))
            keys.append(self._view_switch_key(switchers.to_symbols, "numbers"))
            return keys
        if to_view == "emoji":
            return [self._view_switch_key(switchers.to_emoji, from_view)]
        return [self._view_switch_key(switchers.to_letters, from_view)]

    def _analyze_printable(
        self, character: str, caps: CapsLockRun, state: KeyboardState
    ) -> List[KeyEvent]:
        keys: List[KeyEvent] = []

        target = self._target_view(character)
        if target != state.current_view:
            keys.extend(self._view_switch_keys(state.current_view, target))
            state.current_view = target

        main = self._character_key(
            character,
            character.lower(),
            _key_kind(character),
            state.current_view,
            caps.is_caps_lock,
            state,
        )
        if _is_upper_letter(character):
            keys.extend(self._uppercase_keys(character, caps, state, main))
        else:
            keys.append(main)
        return keys


class DesktopStrategy(_ModeStrategy):
    mode = "desktop"

    def __init__(
        self,
        layout: LayoutDefinition,
        timed: TimedFn,
        key_mapping: Optional[Dict[str, Tuple[str, bool]]] = None,
    ):
        super().__init__(layout, timed)
        self.key_mapping = DESKTOP_KEY_MAPPING if key_mapping is None else key_mapping

    def _analyze_printable(
        self, character: str, caps: CapsLockRun, state: KeyboardState
    ) -> List[KeyEvent]:
        view = state.current_view
        mapping = self.key_mapping.get(character)
        if mapping is None:
            duration = self._timed(self.durations.letter, NO_CONTEXT)
            return [KeyEvent(character.lower(), character, "letter", view, False, duration)]

        physical, requires_shift = mapping
        main = self._character_key(
            character, physical, _key_kind(character), view, caps.is_caps_lock, state
        )
        if _is_upper_letter(character):
            return self._uppercase_keys(character, caps, state, main)
        if requires_shift:
            state.shift_active = True
            return [self._shift_key(view), main]
        return [main]


STRATEGIES: Dict[str, Type[_ModeStrategy]] = {
    MobileStrategy.mode: MobileStrategy,
    DesktopStrategy.mode: DesktopStrategy,
}
