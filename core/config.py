"""
Configuration dataclasses for arpeggio generation.

These immutable config objects hold the request bounds and defaults in one
place. The HTTP schema reads them to build its field constraints, so the
API boundary and any other caller validate against the same numbers. The
core generator itself assumes pre-validated input and never re-checks.
"""

from dataclasses import dataclass

VALID_PATTERNS: frozenset[str] = frozenset({"ascending", "descending", "updown", "sweep"})
VALID_POSITIONS: frozenset[str] = frozenset({"open", "low", "mid", "high", "multi"})
VALID_SPELLINGS: frozenset[str] = frozenset({"auto", "sharps", "flats"})

NOTE_GAP_RATIO: float = 0.9
"""Each note sounds for 90% of its step, leaving a fixed 10% gap."""


@dataclass(frozen=True)
class GenerationLimits:
    """
    Accepted ranges for the numeric request fields (inclusive).

    Attributes:
        min_length / max_length: Number of notes to generate.
        min_tempo / max_tempo: Tempo in beats per minute.
        min_subdivision / max_subdivision: Notes per beat.

    Example:
        >>> limits = GenerationLimits(max_length=64)
        >>> limits.check(length=100, tempo=120, subdivision=2)
        'invalid length'
    """

    min_length: int = 1
    max_length: int = 128
    min_tempo: float = 30
    max_tempo: float = 300
    min_subdivision: int = 1
    max_subdivision: int = 8

    def __post_init__(self) -> None:
        """Validate that every range is non-empty."""
        if self.min_length < 1:
            raise ValueError(f"min_length must be positive, got {self.min_length}")
        if self.min_length > self.max_length:
            raise ValueError(
                f"min_length ({self.min_length}) must not exceed max_length ({self.max_length})"
            )
        if self.min_tempo <= 0:
            raise ValueError(f"min_tempo must be positive, got {self.min_tempo}")
        if self.min_tempo > self.max_tempo:
            raise ValueError(
                f"min_tempo ({self.min_tempo}) must not exceed max_tempo ({self.max_tempo})"
            )
        if self.min_subdivision < 1:
            raise ValueError(f"min_subdivision must be positive, got {self.min_subdivision}")
        if self.min_subdivision > self.max_subdivision:
            raise ValueError(
                f"min_subdivision ({self.min_subdivision}) must not exceed "
                f"max_subdivision ({self.max_subdivision})"
            )

    def check(self, *, length: float, tempo: float, subdivision: float) -> str | None:
        """Return an error message for the first out-of-range field, or None."""
        if not (self.min_length <= length <= self.max_length):
            return "invalid length"
        if not (self.min_tempo <= tempo <= self.max_tempo):
            return "invalid tempo"
        if not (self.min_subdivision <= subdivision <= self.max_subdivision):
            return "invalid subdivision"
        return None


@dataclass(frozen=True)
class ArpeggioDefaults:
    """
    Defaults applied to optional request fields.

    Attributes:
        pattern: Note order, one of VALID_PATTERNS.
        position: Hand position, one of VALID_POSITIONS.
        length: Number of notes.
        tempo: Beats per minute.
        subdivision: Notes per beat.
        tuning: Tuning preset key.
        spelling: Note-name spelling policy, one of VALID_SPELLINGS.
    """

    pattern: str = "ascending"
    position: str = "low"
    length: int = 16
    tempo: float = 120
    subdivision: int = 2
    tuning: str = "standard-6"
    spelling: str = "auto"

    def __post_init__(self) -> None:
        """Validate enum-like fields."""
        if self.pattern not in VALID_PATTERNS:
            raise ValueError(f"Unknown pattern {self.pattern!r}, valid: {sorted(VALID_PATTERNS)}")
        if self.position not in VALID_POSITIONS:
            raise ValueError(
                f"Unknown position {self.position!r}, valid: {sorted(VALID_POSITIONS)}"
            )
        if self.spelling not in VALID_SPELLINGS:
            raise ValueError(
                f"Unknown spelling {self.spelling!r}, valid: {sorted(VALID_SPELLINGS)}"
            )


DEFAULT_LIMITS = GenerationLimits()
"""Length 1–128, tempo 30–300 BPM, subdivision 1–8."""

DEFAULT_ARPEGGIO = ArpeggioDefaults()
"""Ascending, low position, 16 notes at 120 BPM in eighth notes, standard tuning."""
