from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field, replace
from typing import Deque, Iterable, Optional, Tuple

# "letter"|"number"|"symbol"|"modifier"|"view-switch"|"space"|"enter"|"backspace"
KEY_KINDS = (
    "letter",
    "number",
    "symbol",
    "modifier",
    "view-switch",
    "space",
    "enter",
    "backspace",
)

# "letters"|"numbers"|"symbols"|"emoji"
VIEWS = ("letters", "numbers", "symbols", "emoji")

HISTORY_SIZE = 10


@dataclass(frozen=True)
class KeyEvent:
    """One physical key press inside a KeySequence."""

    key: str  # physical key token, e.g. "shift", "a", "123"
    character: str  # source character; "" for pure modifier/view-switch presses
    kind: str
    keyboard_view: str
    is_caps_lock: bool = False
    duration: float = 0.0  # ms
    sequence_index: int = 0
    sequence_length: int = 0


@dataclass(frozen=True)
class KeySequence:
    """The complete physical realization of one typed character (or backspace)."""

    character: str
    keys: Tuple[KeyEvent, ...]
    uses_caps_lock: bool = False

    def __post_init__(self):
        if not self.keys:
            raise ValueError("a KeySequence needs at least one KeyEvent")

    @property
    def total_duration(self) -> float:
        return sum(key.duration for key in self.keys)

    @classmethod
    def build(
        cls, character: str, keys: Iterable[KeyEvent], uses_caps_lock: bool = False
    ) -> "KeySequence":
        """Number the events in press order and stamp the final length on each."""
        pending = list(keys)
        total = len(pending)
        numbered = tuple(
            replace(key, sequence_index=i, sequence_length=total)
            for i, key in enumerate(pending)
        )
        return cls(character, numbered, uses_caps_lock)


@dataclass
class KeyboardState:
    """Mutable device state carried between analysis calls of one analyzer."""

    mode: str = "mobile"
    current_view: str = "letters"
    caps_lock_active: bool = False
    shift_active: bool = False  # last character was produced with shift held
    recent_characters: Deque[str] = field(
        default_factory=lambda: deque(maxlen=HISTORY_SIZE)
    )

    def remember(self, character: str) -> None:
        self.recent_characters.append(character)

    def previous_character(self) -> Optional[str]:
        """Character seen before the most recent one, if any."""
        if len(self.recent_characters) < 2:
            return None
        return self.recent_characters[-2]

    def copy(self) -> "KeyboardState":
        return replace(
            self,
            recent_characters=deque(
                self.recent_characters, maxlen=self.recent_characters.maxlen
            ),
        )


@dataclass(frozen=True)
class KeyDurations:
    """Base press duration (ms) per key kind."""

    letter: float
    number: float
    symbol: float
    modifier: float
    view_switch: float
    space: float
    enter: float
    backspace: Optional[float] = None

    def for_kind(self, kind: str) -> float:
        value = getattr(self, kind.replace("-", "_"))
        return 0.0 if value is None else value


@dataclass(frozen=True)
class LayoutViews:
    letters: Tuple[str, ...]
    numbers: Tuple[str, ...]
    symbols: Tuple[str, ...]
    emoji: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ViewSwitchers:
    to_numbers: str
    to_symbols: str
    to_letters: str
    to_emoji: Optional[str] = None


@dataclass(frozen=True)
class ModifierKeys:
    shift: str
    caps: str
    space: str
    enter: str
    backspace: str


@dataclass(frozen=True)
class LayoutDefinition:
    """Static keyboard description; shared read-only between analyzers."""

    name: str
    views: LayoutViews
    view_switchers: ViewSwitchers
    modifiers: ModifierKeys
    key_durations: KeyDurations


@dataclass(frozen=True)
class TimingProfile:
    """A device/skill archetype: duration table plus contextual coefficients."""

    name: str
    description: str
    multiplier: float
    key_durations: KeyDurations
    same_hand_bonus: float  # multiplicative; < 1 speeds up
    complex_symbol_penalty: float  # ms added
    view_switch_delay: float  # ms added
    caps_lock_transition_delay: float  # ms added
