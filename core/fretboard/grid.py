"""
core/fretboard/grid.py — Per-fret note grid for a tuning, root and scale.

This is the data behind a fretboard diagram: every fret of every string,
with its note name, degree label relative to the root, and whether it is
the root or a scale tone. Rows are ordered like Tuning.open_midi (lowest
string first).
"""

from __future__ import annotations

from core.fretboard.types import FretboardCell, Tuning
from core.music_theory.notes import note_to_pitch_class, spell_pitch_class
from core.music_theory.scales import interval_name, scale_notes

MAX_GRID_FRETS: int = 24


def fretboard_grid(
    tuning: Tuning,
    root: str,
    scale_name: str,
    max_frets: int = MAX_GRID_FRETS,
    policy: str = "auto",
) -> tuple[tuple[FretboardCell, ...], ...]:
    """Annotate frets 0..max_frets of every string against a scale.

    An unknown scale name yields a grid with no scale tones (only the root
    is flagged), matching the soft failure of scale_notes().

    Args:
        tuning:     Instrument tuning
        root:       Root note as written, e.g. "A", "Eb"
        scale_name: Scale key or alias
        max_frets:  Highest fret to include (0–24)
        policy:     Spelling policy for note names

    Returns:
        One tuple of FretboardCell per string, low → high

    Raises:
        InvalidNoteError: If root is not a note name
        ValueError:       If max_frets is outside [0, 24]
    """
    if not (0 <= max_frets <= MAX_GRID_FRETS):
        raise ValueError(f"max_frets must be in [0, {MAX_GRID_FRETS}], got {max_frets}")

    root_pc = note_to_pitch_class(root)
    in_scale = frozenset(scale_notes(root_pc, scale_name))

    rows = []
    for string_index, open_midi in enumerate(tuning.open_midi):
        row = []
        for fret in range(max_frets + 1):
            pc = (open_midi + fret) % 12
            row.append(
                FretboardCell(
                    string_index=string_index,
                    fret=fret,
                    pitch_class=pc,
                    note=spell_pitch_class(pc, policy, tonic=root),
                    interval=interval_name(root_pc, pc),
                    is_root=pc == root_pc,
                    is_in_scale=pc in in_scale,
                )
            )
        rows.append(tuple(row))
    return tuple(rows)
