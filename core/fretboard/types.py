"""
core/fretboard/types.py — Frozen value objects for the fretboard model.

String indices run from the lowest-pitched string (0) upward, matching the
order of Tuning.open_midi. Conversion to the player-facing 1-indexed
numbering (1 = highest string) happens only at the event layer.

Types:
    Tuning          — open-string MIDI pitches for a 6/7/8-string instrument
    PositionWindow  — a named fret window the hand plays in without shifting
    FretPosition    — a (string, fret) pair with its sounding MIDI pitch
    FretboardCell   — one fret of the note grid, annotated against a scale
"""

from __future__ import annotations

from dataclasses import dataclass

from core.music_theory.notes import pitch_class_to_note

#: Largest fret span for any window other than "multi"
MAX_WINDOW_SPAN: int = 6

#: Fallback search never goes past this fret
FALLBACK_FRET_CEILING: int = 18


# ---------------------------------------------------------------------------
# Tuning
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Tuning:
    """Open-string pitches of a fretted instrument, lowest string first.

    Attributes:
        key:       Preset identifier, e.g. "standard-6", or "custom"
        name:      Display name, e.g. "Drop D"
        open_midi: MIDI pitch of each open string, low → high
    """

    key: str
    name: str
    open_midi: tuple[int, ...]

    @property
    def string_count(self) -> int:
        return len(self.open_midi)

    @property
    def top_index(self) -> int:
        """Index of the highest-pitched string."""
        return len(self.open_midi) - 1

    @property
    def tab_labels(self) -> tuple[str, ...]:
        """Tab row labels, highest string first: ('e', 'B', 'G', 'D', 'A', 'E').

        The top string is lower-cased; labels are padded to equal width so
        every tab line has the same length.
        """
        names = [pitch_class_to_note(m % 12) for m in reversed(self.open_midi)]
        names[0] = names[0].lower()
        width = max(len(n) for n in names)
        return tuple(n.ljust(width) for n in names)

    def position(self, string_index: int, fret: int) -> FretPosition:
        """Return the FretPosition for a string/fret pair on this tuning."""
        return FretPosition(
            string_index=string_index,
            fret=fret,
            midi=self.open_midi[string_index] + fret,
        )

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("Tuning.key must not be empty")
        if not (4 <= len(self.open_midi) <= 8):
            raise ValueError(f"Tuning must have 4-8 strings, got {len(self.open_midi)}")
        for pitch in self.open_midi:
            if not (0 <= pitch <= 127):
                raise ValueError(f"MIDI pitch {pitch} out of range [0, 127]")


# ---------------------------------------------------------------------------
# PositionWindow
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PositionWindow:
    """A fret window associated with a named hand position.

    Attributes:
        name:     "open", "low", "mid", "high" or "multi"
        min_fret: Lowest fret in the window (inclusive)
        max_fret: Highest fret in the window (inclusive)
    """

    name: str
    min_fret: int
    max_fret: int

    @property
    def center(self) -> float:
        return (self.min_fret + self.max_fret) / 2

    def expanded(self, by: int = 2, ceiling: int = FALLBACK_FRET_CEILING) -> tuple[int, int]:
        """Return (min, max) widened by `by` frets each side, clamped to [0, ceiling]."""
        return max(0, self.min_fret - by), min(ceiling, self.max_fret + by)

    def __post_init__(self) -> None:
        if self.min_fret < 0:
            raise ValueError(f"PositionWindow.min_fret must be >= 0, got {self.min_fret}")
        if self.min_fret > self.max_fret:
            raise ValueError(
                f"PositionWindow.min_fret ({self.min_fret}) must be <= max_fret ({self.max_fret})"
            )
        if self.name != "multi" and self.max_fret - self.min_fret > MAX_WINDOW_SPAN:
            raise ValueError(
                f"PositionWindow {self.name!r} spans {self.max_fret - self.min_fret} frets, "
                f"max is {MAX_WINDOW_SPAN}"
            )


# ---------------------------------------------------------------------------
# FretPosition
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FretPosition:
    """A playable spot on the neck.

    Attributes:
        string_index: 0 = lowest string
        fret:         0 = open string
        midi:         Sounding pitch, open_midi[string_index] + fret
    """

    string_index: int
    fret: int
    midi: int

    @property
    def pitch_class(self) -> int:
        return self.midi % 12

    @property
    def octave(self) -> int:
        """MIDI octave bucket (midi // 12), the unit the mapper's register cost uses."""
        return self.midi // 12

    def __post_init__(self) -> None:
        if self.string_index < 0:
            raise ValueError(f"FretPosition.string_index must be >= 0, got {self.string_index}")
        if self.fret < 0:
            raise ValueError(f"FretPosition.fret must be >= 0, got {self.fret}")
        if not (0 <= self.midi <= 127):
            raise ValueError(f"MIDI pitch {self.midi} out of range [0, 127]")


# ---------------------------------------------------------------------------
# FretboardCell
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FretboardCell:
    """One fret on one string, annotated against a root + scale.

    Attributes:
        string_index: 0 = lowest string
        fret:         Fret number
        pitch_class:  Sounding pitch class
        note:         Spelled note name
        interval:     Degree label relative to the root ("R", "b3", ...)
        is_root:      True if the pitch class is the root
        is_in_scale:  True if the pitch class belongs to the scale
    """

    string_index: int
    fret: int
    pitch_class: int
    note: str
    interval: str
    is_root: bool
    is_in_scale: bool
