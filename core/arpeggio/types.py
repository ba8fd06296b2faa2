"""
core/arpeggio/types.py — Frozen value objects for arpeggio generation.

Types:
    ArpeggioRequest  — what to generate (key, chord, pattern, position, timing)
    ArpeggioEvent    — one timed note with its string/fret/finger
    ArpeggioMeta     — the request echo returned with every result
    ArpeggioResult   — events + ASCII tab + dropped-note count
"""

from __future__ import annotations

from dataclasses import dataclass

from core.config import DEFAULT_ARPEGGIO
from core.fretboard.types import Tuning

# ---------------------------------------------------------------------------
# ArpeggioRequest
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ArpeggioRequest:
    """Input to generate_arpeggio().

    Numeric bounds (length, tempo, subdivision) are enforced by the caller;
    see core.config.GenerationLimits.

    Attributes:
        key:         Tonic as written, e.g. "G", "Bb" (drives auto spelling)
        chord:       Chord symbol, e.g. "Gmaj7"; its quality is built on the key
        pattern:     "ascending", "descending", "updown" or "sweep"
        position:    "open", "low", "mid", "high" or "multi"
        length:      Number of notes to generate
        tempo:       Beats per minute
        subdivision: Notes per beat
        tuning:      Preset key or a Tuning instance
        spelling:    "auto", "sharps" or "flats"
        scale:       Optional scale name; when set, the scale's notes are
                     arpeggiated from the key instead of the chord's
    """

    key: str
    chord: str
    pattern: str = DEFAULT_ARPEGGIO.pattern
    position: str = DEFAULT_ARPEGGIO.position
    length: int = DEFAULT_ARPEGGIO.length
    tempo: float = DEFAULT_ARPEGGIO.tempo
    subdivision: int = DEFAULT_ARPEGGIO.subdivision
    tuning: str | Tuning = DEFAULT_ARPEGGIO.tuning
    spelling: str = DEFAULT_ARPEGGIO.spelling
    scale: str | None = None

    @property
    def seconds_per_step(self) -> float:
        """(60 / tempo) / subdivision."""
        return (60 / self.tempo) / self.subdivision


# ---------------------------------------------------------------------------
# ArpeggioEvent
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ArpeggioEvent:
    """One note of the arpeggio.

    Attributes:
        time:     Onset in seconds
        duration: Length in seconds (always shorter than the step)
        note:     Note name with octave, e.g. "G3", "Bb2"
        string:   1-indexed string, 1 = highest-pitched string
        fret:     Fret number, 0 = open
        finger:   0 = open string, 1–4 = index to pinky
    """

    time: float
    duration: float
    note: str
    string: int
    fret: int
    finger: int

    def __post_init__(self) -> None:
        if self.time < 0:
            raise ValueError(f"ArpeggioEvent.time must be >= 0, got {self.time}")
        if self.duration <= 0:
            raise ValueError(f"ArpeggioEvent.duration must be > 0, got {self.duration}")
        if self.string < 1:
            raise ValueError(f"ArpeggioEvent.string must be >= 1, got {self.string}")
        if self.fret < 0:
            raise ValueError(f"ArpeggioEvent.fret must be >= 0, got {self.fret}")
        if not (0 <= self.finger <= 4):
            raise ValueError(f"ArpeggioEvent.finger must be in [0, 4], got {self.finger}")


# ---------------------------------------------------------------------------
# ArpeggioMeta / ArpeggioResult
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ArpeggioMeta:
    """Request parameters echoed back with the result."""

    key: str
    chord: str
    pattern: str
    position: str
    tempo: float
    subdivision: int
    tuning: str


@dataclass(frozen=True)
class ArpeggioResult:
    """Output of generate_arpeggio().

    Attributes:
        meta:             Echo of the request
        events:           Time-ordered, non-overlapping note events
        ascii:            Tablature, one line per string, highest first
        dropped:          Number of sequence notes that had no playable position
        seconds_per_step: Grid spacing used for timing and the tab columns
    """

    meta: ArpeggioMeta
    events: tuple[ArpeggioEvent, ...]
    ascii: str
    dropped: int = 0
    seconds_per_step: float = 0.0
