from .analyzer import KeystrokeAnalyzer, SequenceOrderError
from .behaviors import analyze_text, estimate_typing_duration
from .analysis import summarize_sequences, typing_stats, TypingStats
from .config import AnalyzerConfig, kcfg
from .layouts import (
    MOBILE_LAYOUT,
    IOS_LAYOUT,
    ANDROID_LAYOUT,
    DESKTOP_QWERTY_LAYOUT,
    MOBILE_CHARACTER_TO_VIEW,
    DESKTOP_KEY_MAPPING,
    get_layout,
)
from .models import (
    KeyEvent,
    KeySequence,
    KeyboardState,
    KeyDurations,
    LayoutDefinition,
    TimingProfile,
)
from .profiles import (
    MOBILE_TIMING_PROFILES,
    DESKTOP_TIMING_PROFILES,
    get_default_timing_profile,
    get_timing_profile,
    apply_timing_profile,
    resolve_layout,
)
from .render import save_typing_timeline_jpeg
from .telemetry import recorder, SequenceRecorder
from .timing import TimingContext, calculate_contextual_timing

__all__ = [
    "KeystrokeAnalyzer",
    "SequenceOrderError",
    "AnalyzerConfig",
    "kcfg",
    "KeyEvent",
    "KeySequence",
    "KeyboardState",
    "KeyDurations",
    "LayoutDefinition",
    "TimingProfile",
    "TimingContext",
    "MOBILE_LAYOUT",
    "IOS_LAYOUT",
    "ANDROID_LAYOUT",
    "DESKTOP_QWERTY_LAYOUT",
    "MOBILE_CHARACTER_TO_VIEW",
    "DESKTOP_KEY_MAPPING",
    "MOBILE_TIMING_PROFILES",
    "DESKTOP_TIMING_PROFILES",
    "get_layout",
    "get_default_timing_profile",
    "get_timing_profile",
    "apply_timing_profile",
    "resolve_layout",
    "calculate_contextual_timing",
    "analyze_text",
    "estimate_typing_duration",
    "summarize_sequences",
    "typing_stats",
    "TypingStats",
    "save_typing_timeline_jpeg",
    "recorder",
    "SequenceRecorder",
]
