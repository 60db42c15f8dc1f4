from __future__ import annotations
import math
from typing import Sequence


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Restrict value to [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def quantile(values: Sequence[float], q: float) -> float:
    """Robust quantile (0..1). Returns value at the given fraction."""
    if not values:
        return 0.0
    q = clamp(float(q), 0.0, 1.0)
    data = sorted(values)
    idx = q * (len(data) - 1)
    lo = int(math.floor(idx))
    hi = int(math.ceil(idx))
    if lo == hi:
        return data[lo]
    frac = idx - lo
    return data[lo] * (1 - frac) + data[hi] * frac
