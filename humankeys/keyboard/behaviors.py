from __future__ import annotations
import logging
from typing import List, Optional

from .analysis import summarize_sequences
from .analyzer import KeystrokeAnalyzer
from .config import AnalyzerConfig
from .models import KeySequence
from .telemetry import SequenceRecorder

# Route debug prints in this module through logging
print = logging.getLogger(__name__).debug


def analyze_text(
    text: str,
    config: Optional[AnalyzerConfig] = None,
    *,
    analyzer: Optional[KeystrokeAnalyzer] = None,
    recorder: Optional[SequenceRecorder] = None,
    log_summary: bool = False,
) -> List[KeySequence]:
    """
    Analyze a whole text as one typing session and return one KeySequence
    per character, in order.

    - A supplied ``analyzer`` is reset first; ``config`` is ignored then.
    - A supplied ``recorder`` is reset and receives every sequence.
    """
    if analyzer is None:
        analyzer = KeystrokeAnalyzer(config)
    else:
        analyzer.reset_state()

    if recorder is not None:
        recorder.reset()

    sequences: List[KeySequence] = []
    for index, ch in enumerate(text):
        seq = analyzer.analyze_character(ch, index, text)
        sequences.append(seq)
        if recorder is not None:
            recorder.log(seq)

    if log_summary:
        print(summarize_sequences(sequences))
    return sequences


def estimate_typing_duration(text: str, config: Optional[AnalyzerConfig] = None) -> float:
    """Total planned key-press time (ms) for typing ``text`` once, without pauses."""
    return sum(seq.total_duration for seq in analyze_text(text, config))
