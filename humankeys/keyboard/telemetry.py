from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from .models import KeySequence


@dataclass(frozen=True)
class RecordedSequence:
    offset_ms: float  # planned start, relative to the first recorded sequence
    sequence: KeySequence


@dataclass
class SequenceRecorder:
    """Lays analyzed sequences end to end on a planned millisecond timeline.

    Nothing here reads the clock; offsets are the sum of earlier durations.
    """

    entries: List[RecordedSequence] = field(default_factory=list)
    elapsed_ms: float = 0.0

    def log(self, sequence: KeySequence) -> RecordedSequence:
        entry = RecordedSequence(self.elapsed_ms, sequence)
        self.entries.append(entry)
        self.elapsed_ms += sequence.total_duration
        return entry

    @property
    def sequences(self) -> List[KeySequence]:
        return [entry.sequence for entry in self.entries]

    def reset(self) -> None:
        self.entries.clear()
        self.elapsed_ms = 0.0


# Shared recorder for callers that want a single session log
recorder = SequenceRecorder()
