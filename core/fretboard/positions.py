"""
core/fretboard/positions.py — Named hand positions and finger estimates.

    open   frets 0–3
    low    frets 1–5
    mid    frets 5–9
    high   frets 9–14
    multi  frets 0–15   (spans positions; no span limit)
"""

from __future__ import annotations

from types import MappingProxyType

from core.fretboard.types import PositionWindow

POSITION_WINDOWS: MappingProxyType[str, PositionWindow] = MappingProxyType(
    {
        "open": PositionWindow("open", 0, 3),
        "low": PositionWindow("low", 1, 5),
        "mid": PositionWindow("mid", 5, 9),
        "high": PositionWindow("high", 9, 14),
        "multi": PositionWindow("multi", 0, 15),
    }
)


def get_window(name: str) -> PositionWindow:
    """Return the PositionWindow for a position name.

    Raises:
        ValueError: If the name is not one of POSITION_WINDOWS
    """
    window = POSITION_WINDOWS.get(name)
    if window is None:
        raise ValueError(f"Unknown position {name!r}. Valid: {list(POSITION_WINDOWS)}")
    return window


def estimate_finger(fret: int, window: PositionWindow) -> int:
    """Estimate the fretting finger, one finger per fret from the window's floor.

    Open strings get 0; everything else is clamped into 1 (index) – 4 (pinky).
    This is a coarse guide, not an ergonomic fingering.
    """
    if fret == 0:
        return 0
    return max(1, min(4, fret - window.min_fret + 1))
