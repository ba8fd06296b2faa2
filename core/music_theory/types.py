"""
core/music_theory/types.py — Frozen value objects for the music theory engine.

All types are immutable frozen dataclasses — safe to hash, cache, and use as
dict keys. No I/O, no side effects, no external dependencies beyond stdlib.

Types:
    ScaleDefinition — a static scale table entry (intervals + step pattern)
    ScaleInfo       — a scale resolved against a root note, ready for display
    ParsedChord     — a chord symbol reduced to root + quality + intervals
    DiatonicChord   — a chord built from a roman numeral in a key
"""

from __future__ import annotations

from dataclasses import dataclass

#: Scale categories used by the scale table
SCALE_CATEGORIES: frozenset[str] = frozenset({"modes", "pentatonic", "other"})

#: Triad qualities produced by the chord parser
CHORD_QUALITIES: frozenset[str] = frozenset(
    {"major", "minor", "diminished", "half-diminished", "augmented", "suspended"}
)

# ---------------------------------------------------------------------------
# ScaleDefinition
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScaleDefinition:
    """A named interval set from the static scale table.

    Attributes:
        key:       Table key, e.g. "ionian", "minor-pentatonic"
        name:      Display name, e.g. "Ionian (Major)"
        intervals: Semitones from the root, strictly increasing, starting at 0
        pattern:   Step pattern for display, e.g. "W-W-H-W-W-W-H"
        category:  One of SCALE_CATEGORIES
    """

    key: str
    name: str
    intervals: tuple[int, ...]
    pattern: str
    category: str

    @property
    def degree_count(self) -> int:
        return len(self.intervals)

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("ScaleDefinition.key must not be empty")
        if not self.intervals or self.intervals[0] != 0:
            raise ValueError(f"Scale {self.key!r} intervals must start at 0, got {self.intervals}")
        for prev, curr in zip(self.intervals, self.intervals[1:]):
            if curr <= prev:
                raise ValueError(
                    f"Scale {self.key!r} intervals must be strictly increasing, got {self.intervals}"
                )
        if self.intervals[-1] >= 12:
            raise ValueError(f"Scale {self.key!r} intervals must stay below 12, got {self.intervals}")
        if self.category not in SCALE_CATEGORIES:
            raise ValueError(
                f"Unknown scale category {self.category!r}. Valid: {sorted(SCALE_CATEGORIES)}"
            )


# ---------------------------------------------------------------------------
# ScaleInfo
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScaleInfo:
    """A scale resolved against a root note.

    Attributes:
        root:     Root note as displayed, e.g. "G", "Bb"
        scale:    The ScaleDefinition that was resolved
        notes:    Spelled note names in scale order
    """

    root: str
    scale: ScaleDefinition
    notes: tuple[str, ...]

    @property
    def label(self) -> str:
        """Human-readable label, e.g. 'G Ionian (Major)'."""
        return f"{self.root} {self.scale.name}"

    @property
    def pattern(self) -> str:
        return self.scale.pattern


# ---------------------------------------------------------------------------
# ParsedChord
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParsedChord:
    """A chord symbol reduced to its pitch content.

    Attributes:
        symbol:    The symbol as given, e.g. "Am7b5"
        root:      Root pitch class (0–11), or None when the symbol has no root
        quality:   Triad quality — one of CHORD_QUALITIES
        seventh:   Seventh label ("maj7", "7", "m7b5", "dim7") or None
        intervals: Sorted unique semitone offsets from the root, always with 0
    """

    symbol: str
    root: int | None
    quality: str
    seventh: str | None
    intervals: tuple[int, ...]

    @property
    def pitch_classes(self) -> tuple[int, ...]:
        """Absolute pitch classes in interval order (empty when rootless)."""
        if self.root is None:
            return ()
        return tuple((self.root + i) % 12 for i in self.intervals)

    def __post_init__(self) -> None:
        if self.quality not in CHORD_QUALITIES:
            raise ValueError(f"Unknown chord quality {self.quality!r}")
        if not self.intervals or self.intervals[0] != 0:
            raise ValueError(f"ParsedChord.intervals must contain 0, got {self.intervals}")
        if self.root is not None and not (0 <= self.root <= 11):
            raise ValueError(f"ParsedChord.root must be in [0, 11], got {self.root}")


# ---------------------------------------------------------------------------
# DiatonicChord
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DiatonicChord:
    """A triad built on a scale degree.

    Attributes:
        symbol:  Chord symbol, e.g. "Em", "F#°"
        roman:   Roman numeral as requested, e.g. "vi", "bVII"
        degree:  0-based scale degree the chord is built on
        quality: "major", "minor", "diminished" or "augmented"
        notes:   Spelled chord tones, root first
    """

    symbol: str
    roman: str
    degree: int
    quality: str
    notes: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.symbol:
            raise ValueError("DiatonicChord.symbol must not be empty")
        if not (0 <= self.degree <= 6):
            raise ValueError(f"DiatonicChord.degree must be in [0, 6], got {self.degree}")
