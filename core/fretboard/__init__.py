"""
core/fretboard/ — Instrument model and position mapping.

Exports:
    Types:     Tuning, PositionWindow, FretPosition, FretboardCell
    Tunings:   get_tuning, available_tunings, tuning_from_notes
    Positions: POSITION_WINDOWS, get_window, estimate_finger
    Mapper:    map_to_fretboard, select_position, FretboardMapping, MappedNote
    Grid:      fretboard_grid
"""

from core.fretboard.grid import fretboard_grid
from core.fretboard.mapper import FretboardMapping, MappedNote, map_to_fretboard, select_position
from core.fretboard.positions import POSITION_WINDOWS, estimate_finger, get_window
from core.fretboard.tunings import available_tunings, get_tuning, tuning_from_notes
from core.fretboard.types import FretboardCell, FretPosition, PositionWindow, Tuning

__all__ = [
    # Types
    "Tuning",
    "PositionWindow",
    "FretPosition",
    "FretboardCell",
    # Tunings
    "get_tuning",
    "available_tunings",
    "tuning_from_notes",
    # Positions
    "POSITION_WINDOWS",
    "get_window",
    "estimate_finger",
    # Mapper
    "map_to_fretboard",
    "select_position",
    "FretboardMapping",
    "MappedNote",
    # Grid
    "fretboard_grid",
]
