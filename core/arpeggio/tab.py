"""
core/arpeggio/tab.py — ASCII tablature renderer.

Projects timed events onto a fixed-width grid, one line per string with
the highest string on top:

    e|3-------3-------|
    B|----4-------4---|
    ...

Each step owns two columns, so any fret 0–24 fits without touching the
next step. An event lands on column round(time / seconds_per_step) * 2 of
row (string - 1). A second event on the same string and column overwrites
the first; columns past the grid are ignored.
"""

from __future__ import annotations

from collections.abc import Sequence

from core.arpeggio.types import ArpeggioEvent

STANDARD_LABELS: tuple[str, ...] = ("e", "B", "G", "D", "A", "E")
COLUMN_STRIDE: int = 2


def render_ascii_tab(
    events: Sequence[ArpeggioEvent],
    seconds_per_step: float,
    steps: int,
    labels: Sequence[str] = STANDARD_LABELS,
) -> str:
    """Render events as ASCII tab.

    Args:
        events:           Events to draw; event.string is 1-indexed from the top
        seconds_per_step: Grid spacing in seconds
        steps:            Number of grid steps; each line gets steps * 2 + 1 cells
        labels:           Row labels, highest string first (one per string)

    Returns:
        len(labels) lines joined by newlines, each "label|cells|"
    """
    width = steps * COLUMN_STRIDE + 1
    grid = [["-"] * width for _ in labels]

    for event in events:
        row = event.string - 1
        if not (0 <= row < len(grid)):
            continue
        col = round(event.time / seconds_per_step) * COLUMN_STRIDE
        for offset, digit in enumerate(str(event.fret)):
            if 0 <= col + offset < width:
                grid[row][col + offset] = digit

    return "\n".join(f"{label}|{''.join(cells)}|" for label, cells in zip(labels, grid))
