from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from .analyzer import BACKSPACE
from .models import KeySequence
from .telemetry import recorder as global_recorder


@dataclass(frozen=True)
class TypingStats:
    total_ms: float = 0.0
    characters: int = 0  # typed characters, backspaces excluded
    backspaces: int = 0
    key_presses: int = 0
    kinds: Dict[str, int] = field(default_factory=dict)
    caps_lock_activations: int = 0
    view_switches: int = 0

    @property
    def wpm(self) -> float:
        """Words per minute over the planned durations (5 chars = 1 word)."""
        if self.total_ms <= 0:
            return 0.0
        return (self.characters / 5.0) / (self.total_ms / 60000.0)


def typing_stats(sequences: Iterable[KeySequence]) -> TypingStats:
    total_ms = 0.0
    characters = backspaces = presses = caps_on = 0
    kinds: Counter = Counter()

    for seq in sequences:
        total_ms += seq.total_duration
        if seq.character == BACKSPACE:
            backspaces += 1
        else:
            characters += 1
        last = len(seq.keys) - 1
        for i, key in enumerate(seq.keys):
            presses += 1
            kinds[key.kind] += 1
            # caps-off is always the bare final press; anything else engages the lock
            if key.kind == "modifier" and key.is_caps_lock:
                if key.character or i < last:
                    caps_on += 1

    return TypingStats(
        total_ms=total_ms,
        characters=characters,
        backspaces=backspaces,
        key_presses=presses,
        kinds=dict(kinds),
        caps_lock_activations=caps_on,
        view_switches=kinds.get("view-switch", 0),
    )


def summarize_sequences(sequences: Optional[Iterable[KeySequence]] = None) -> str:
    """
    Reports:
      - Total planned duration
      - Effective WPM over those durations
      - Characters, backspaces and physical key presses
      - Modifier presses, caps-lock runs and view switches
    """
    if sequences is None:
        sequences = global_recorder.sequences
    stats = typing_stats(sequences)
    if stats.key_presses == 0:
        return "No typing data"

    per_kind = ", ".join(f"{kind}={count}" for kind, count in sorted(stats.kinds.items()))
    return (
        "Typing Summary:\n"
        f"  Total duration: {stats.total_ms / 1000.0:.2f}s\n"
        f"  Effective WPM: {stats.wpm:.2f}\n"
        f"  Characters: {stats.characters} (backspaces: {stats.backspaces})\n"
        f"  Key presses: {stats.key_presses} ({per_kind})\n"
        f"  Caps-lock runs: {stats.caps_lock_activations}\n"
        f"  View switches: {stats.view_switches}"
    )
