from __future__ import annotations
from .keyboard import (
    KeystrokeAnalyzer,
    AnalyzerConfig,
    KeySequence,
    KeyEvent,
    analyze_text,
    estimate_typing_duration,
    summarize_sequences,
    save_typing_timeline_jpeg,
    recorder,
)

__all__ = [
    "KeystrokeAnalyzer",
    "AnalyzerConfig",
    "KeySequence",
    "KeyEvent",
    "analyze_text",
    "estimate_typing_duration",
    "summarize_sequences",
    "save_typing_timeline_jpeg",
    "recorder",
]
