from __future__ import annotations
from typing import NamedTuple, Optional

from .config import kcfg

_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGITS = frozenset("0123456789")


def _is_upper_letter(ch: str) -> bool:
    return ch in _UPPER


def _key_kind(ch: str) -> str:
    """Key kind of a printable character: "letter", "number" or "symbol"."""
    if ch in _ASCII_LETTERS:
        return "letter"
    if ch in _DIGITS:
        return "number"
    return "symbol"


def _is_complex_symbol(ch: str) -> bool:
    return ch in kcfg.COMPLEX_SYMBOLS


def _hand(ch: str) -> Optional[str]:
    c = ch.lower()
    if c in kcfg.LEFT_HAND:
        return "left"
    if c in kcfg.RIGHT_HAND:
        return "right"
    return None


def _is_same_hand(prev_ch: Optional[str], ch: str) -> bool:
    """True when both letters are struck by the same hand on QWERTY."""
    if not prev_ch:
        return False
    hand = _hand(ch)
    return hand is not None and hand == _hand(prev_ch)


class CapsLockRun(NamedTuple):
    is_caps_lock: bool = False
    is_first: bool = False
    is_last: bool = False


NOT_A_RUN = CapsLockRun()


def detect_caps_lock_run(
    character: str, index: int, full_text: str, threshold: int
) -> CapsLockRun:
    """Classify an uppercase letter as part of a caps-lock run or not.

    The run window grows from ``index`` in both directions through uppercase
    letters and spaces, so "HELLO WORLD" is one run. Only the letters count
    toward ``threshold``.
    """
    if not _is_upper_letter(character):
        return NOT_A_RUN

    start = index
    while start > 0 and (
        _is_upper_letter(full_text[start - 1]) or full_text[start - 1] == " "
    ):
        start -= 1

    end = index
    last = len(full_text) - 1
    while end < last and (
        _is_upper_letter(full_text[end + 1]) or full_text[end + 1] == " "
    ):
        end += 1

    letters = [i for i in range(start, end + 1) if _is_upper_letter(full_text[i])]
    if len(letters) < threshold:
        return NOT_A_RUN

    return CapsLockRun(True, index == letters[0], index == letters[-1])
