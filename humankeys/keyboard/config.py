from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, Optional

from .models import HISTORY_SIZE, LayoutDefinition


class kcfg:
    # Uppercase letters (spaces allowed between them) needed to type a run with caps lock
    CAPS_LOCK_THRESHOLD = 3

    # Recent-character ring size
    HISTORY_SIZE = HISTORY_SIZE

    # Engaging caps lock is a slightly longer press than releasing it
    CAPS_ON_EXTRA_MS = 20.0

    # Backspace duration when the layout table has neither backspace nor modifier
    BACKSPACE_FLOOR_MS = 120.0

    # Symbols that need a more precise reach
    COMPLEX_SYMBOLS: FrozenSet[str] = frozenset("@#$%^&*+={}\\|`~<>")

    # QWERTY touch-typing hands, used for the same-hand bonus
    LEFT_HAND: FrozenSet[str] = frozenset("qwertasdfgzxcvb")
    RIGHT_HAND: FrozenSet[str] = frozenset("yuiophjklnm")

    KEYBOARD_MODES = ("mobile", "desktop")


@dataclass(frozen=True)
class AnalyzerConfig:
    keyboard_mode: str = "mobile"
    custom_layout: Optional[LayoutDefinition] = None
    caps_lock_threshold: int = kcfg.CAPS_LOCK_THRESHOLD
    use_natural_timing: bool = True
    typing_speed: Optional[str] = None  # profile hint, e.g. "fast", "programmer"
    debug: bool = False
    strict_order: bool = False  # raise when calls skip or repeat text positions

    def __post_init__(self):
        if self.keyboard_mode not in kcfg.KEYBOARD_MODES:
            raise ValueError(
                f"keyboard_mode must be one of {kcfg.KEYBOARD_MODES}, "
                f"got {self.keyboard_mode!r}"
            )
        if (
            isinstance(self.caps_lock_threshold, bool)
            or not isinstance(self.caps_lock_threshold, int)
            or self.caps_lock_threshold < 1
        ):
            raise ValueError(
                f"caps_lock_threshold must be an integer >= 1, "
                f"got {self.caps_lock_threshold!r}"
            )
