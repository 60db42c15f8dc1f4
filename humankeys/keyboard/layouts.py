from __future__ import annotations
from dataclasses import replace
from typing import Dict, Tuple

from .models import (
    KeyDurations,
    LayoutDefinition,
    LayoutViews,
    ModifierKeys,
    ViewSwitchers,
)

_LETTERS = tuple("qwertyuiopasdfghjklzxcvbnm")

# =========================================================
# Mobile (iOS/Android style, three views plus emoji)
# =========================================================

MOBILE_LAYOUT = LayoutDefinition(
    name="mobile",
    views=LayoutViews(
        letters=_LETTERS,
        numbers=tuple("1234567890-/:;()$&@\".,?!'[]{}#%^*+=_\\|~<>€£¥•") + ("...",),
        symbols=tuple("[]{}#%^*+=_\\|~<>€£¥•.,?!'\"/:;()$&@`§¿¡«»°†‡…‰′″‹›"),
        emoji=tuple("😀😃😄😁😆😅🤣😂🙂🙃😉😊😇🥰😍🤩😘😗☺😚😙🥲😋😛😜🤪😝🤑🤗🤭"),
    ),
    view_switchers=ViewSwitchers(
        to_numbers="123", to_symbols="#+=", to_letters="ABC", to_emoji="😀"
    ),
    modifiers=ModifierKeys(
        shift="⇧", caps="CAPS", space="space", enter="return", backspace="⌫"
    ),
    key_durations=KeyDurations(
        letter=80,
        number=90,
        symbol=100,
        modifier=120,  # shift/caps
        view_switch=110,  # 123, ABC, #+=
        space=75,
        enter=90,
        backspace=110,
    ),
)

IOS_LAYOUT = replace(
    MOBILE_LAYOUT,
    name="ios",
    view_switchers=ViewSwitchers(
        to_numbers=".?123", to_symbols="#+=", to_letters="ABC", to_emoji="🙂"
    ),
    modifiers=replace(MOBILE_LAYOUT.modifiers, caps="caps lock"),
)

ANDROID_LAYOUT = replace(
    MOBILE_LAYOUT,
    name="android",
    view_switchers=ViewSwitchers(
        to_numbers="?123", to_symbols="=\\<", to_letters="ABC", to_emoji="😀"
    ),
)


def _mobile_character_to_view() -> Dict[str, str]:
    index: Dict[str, str] = {}
    for ch in "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ":
        index[ch] = "letters"
    # digits and common punctuation sit on the first "123" page
    for ch in "1234567890-/:;()$&@\".,?!'":
        index[ch] = "numbers"
    # everything else needs the "#+=" page
    for ch in "[]{}#%^*+=_\\|~<>€£¥•`§¿¡«»°†‡…‰′″‹›":
        index[ch] = "symbols"
    for ch in MOBILE_LAYOUT.views.emoji:
        index[ch] = "emoji"
    return index


MOBILE_CHARACTER_TO_VIEW: Dict[str, str] = _mobile_character_to_view()

# =========================================================
# Desktop (US QWERTY, single view, symbols through shift)
# =========================================================

DESKTOP_QWERTY_LAYOUT = LayoutDefinition(
    name="desktop",
    views=LayoutViews(
        letters=_LETTERS,
        numbers=tuple("1234567890"),
        symbols=tuple("`~!@#$%^&*()-_+=[]{}\\|;:'\",.<>/?"),
    ),
    view_switchers=ViewSwitchers(
        to_numbers="numbers", to_symbols="symbols", to_letters="letters"
    ),
    modifiers=ModifierKeys(
        shift="shift",
        caps="caps lock",
        space="space",
        enter="enter",
        backspace="backspace",
    ),
    key_durations=KeyDurations(
        letter=70,
        number=85,  # reach to the top row
        symbol=95,
        modifier=90,
        view_switch=0,
        space=60,
        enter=80,
        backspace=100,
    ),
)

# Shifted characters of the US number row and punctuation keys
_SHIFTED_PAIRS = {
    "!": "1",
    "@": "2",
    "#": "3",
    "$": "4",
    "%": "5",
    "^": "6",
    "&": "7",
    "*": "8",
    "(": "9",
    ")": "0",
    "~": "`",
    "_": "-",
    "+": "=",
    "{": "[",
    "}": "]",
    "|": "\\",
    ":": ";",
    '"': "'",
    "<": ",",
    ">": ".",
    "?": "/",
}


def _desktop_key_mapping() -> Dict[str, Tuple[str, bool]]:
    mapping: Dict[str, Tuple[str, bool]] = {}
    for ch in "abcdefghijklmnopqrstuvwxyz":
        mapping[ch] = (ch, False)
        mapping[ch.upper()] = (ch, True)
    for ch in "1234567890`-=[]\\;',./":
        mapping[ch] = (ch, False)
    for shifted, base in _SHIFTED_PAIRS.items():
        mapping[shifted] = (base, True)
    mapping[" "] = ("space", False)
    mapping["\n"] = ("enter", False)
    mapping["\t"] = ("tab", False)
    return mapping


# character -> (physical key, requires shift)
DESKTOP_KEY_MAPPING: Dict[str, Tuple[str, bool]] = _desktop_key_mapping()

LAYOUTS: Dict[str, LayoutDefinition] = {
    layout.name: layout
    for layout in (MOBILE_LAYOUT, IOS_LAYOUT, ANDROID_LAYOUT, DESKTOP_QWERTY_LAYOUT)
}


def get_layout(name: str) -> LayoutDefinition:
    """Look up a built-in layout variant ("mobile", "ios", "android", "desktop")."""
    try:
        return LAYOUTS[name.lower()]
    except KeyError:
        raise KeyError(
            f"unknown layout {name!r}; known: {', '.join(sorted(LAYOUTS))}"
        ) from None


def base_layout_for_mode(mode: str) -> LayoutDefinition:
    return MOBILE_LAYOUT if mode == "mobile" else DESKTOP_QWERTY_LAYOUT
