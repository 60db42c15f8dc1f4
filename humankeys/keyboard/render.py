from __future__ import annotations
import logging
from typing import Dict, Iterable, Tuple

from PIL import Image, ImageDraw

from ..utils import quantile
from .analysis import typing_stats
from .models import KEY_KINDS, KeySequence

_KIND_COLORS: Dict[str, Tuple[int, int, int]] = {
    "letter": (64, 200, 255),
    "number": (60, 205, 60),
    "symbol": (255, 200, 80),
    "modifier": (255, 60, 60),
    "view-switch": (190, 110, 255),
    "space": (110, 110, 120),
    "enter": (150, 150, 160),
    "backspace": (255, 140, 40),
}


def save_typing_timeline_jpeg(
    sequences: Iterable[KeySequence],
    outfile: str = "typing_timeline.jpg",
    *,
    canvas_width: int = 1200,
    px_per_ms: float = 0.5,
    row_height: int = 28,
    canvas_margin: int = 20,
    background_color: Tuple[int, int, int] = (12, 12, 14),
    annotate: bool = True,
) -> str:
    """
    Render a session's key presses as a wrapped timeline: one bar per key
    event, width proportional to its duration and colored by key kind.
    Sequence boundaries are marked with a thin tick; a legend and a
    duration summary are drawn underneath.
    """
    sequences = list(sequences)
    usable_width = max(1, canvas_width - canvas_margin * 2)

    # lay out bars first so the canvas height is known
    bars = []  # (row, x0, x1, kind, label, starts_sequence)
    row, x = 0, 0.0
    for seq in sequences:
        for key in seq.keys:
            width = max(1.0, key.duration * px_per_ms)
            if x > 0 and x + width > usable_width:
                row += 1
                x = 0.0
            bars.append((row, x, x + width, key.kind, key.key, key.sequence_index == 0))
            x += width

    rows = (row + 1) if bars else 1
    legend_height = 40
    canvas_height = canvas_margin * 2 + rows * row_height + legend_height
    image = Image.new("RGB", (canvas_width, canvas_height), background_color)
    draw = ImageDraw.Draw(image)

    if not bars:
        if annotate:
            draw.text(
                (canvas_margin, canvas_margin),
                "No key events recorded",
                fill=(180, 180, 180),
            )
        image.save(outfile, format="JPEG", quality=92, optimize=True)
        return outfile

    bar_height = row_height - 8
    for bar_row, x0, x1, kind, label, starts_sequence in bars:
        top = canvas_margin + bar_row * row_height
        left = canvas_margin + x0
        right = canvas_margin + x1
        color = _KIND_COLORS.get(kind, (200, 200, 200))
        draw.rectangle([left, top, max(left, right - 1), top + bar_height], fill=color)
        if starts_sequence:
            draw.line([(left, top - 3), (left, top + bar_height + 3)], fill=(235, 235, 235))
        # the default bitmap font only covers latin-1
        if right - left >= 14 and label and label.isascii():
            draw.text((left + 2, top + 4), label[:6], fill=(0, 0, 0))

    legend_top = canvas_margin + rows * row_height + 6
    legend_x = canvas_margin
    for kind in KEY_KINDS:
        draw.rectangle(
            [legend_x, legend_top, legend_x + 10, legend_top + 10],
            fill=_KIND_COLORS[kind],
        )
        draw.text((legend_x + 14, legend_top - 1), kind, fill=(220, 220, 220))
        legend_x += 24 + 7 * len(kind)

    if annotate:
        stats = typing_stats(sequences)
        durations = [key.duration for seq in sequences for key in seq.keys]
        summary = (
            f"Keys: {stats.key_presses} | total {stats.total_ms:.0f} ms | "
            f"p50 {quantile(durations, 0.5):.0f} ms | "
            f"p95 {quantile(durations, 0.95):.0f} ms | WPM {stats.wpm:.1f}"
        )
        draw.text((canvas_margin, legend_top + 16), summary, fill=(200, 200, 200))

    image.save(outfile, format="JPEG", quality=92, optimize=True)
    logging.getLogger(__name__).debug("Typing timeline saved to %s", outfile)
    return outfile
