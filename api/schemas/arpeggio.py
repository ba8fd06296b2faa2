"""
api/schemas/arpeggio.py — Pydantic request/response schemas for arpeggio generation.

Covers:
    /api/arpeggio/generate — ArpeggioGenerateRequest / ArpeggioGenerateResponse

Bounds and defaults come from core.config so the API and the core agree.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from core.config import DEFAULT_ARPEGGIO, DEFAULT_LIMITS
from core.fretboard.tunings import available_tunings, tuning_from_notes
from core.music_theory.notes import parse_pitch_class
from core.music_theory.scales import get_scale

PatternName = Literal["ascending", "descending", "updown", "sweep"]
PositionName = Literal["open", "low", "mid", "high", "multi"]
SpellingPolicy = Literal["auto", "sharps", "flats"]


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------


class ArpeggioGenerateRequest(BaseModel):
    """Request body for POST /api/arpeggio/generate."""

    key: str = Field(
        ...,
        min_length=1,
        description="Tonic note, e.g. 'G', 'Bb', 'F#'.",
        examples=["G"],
    )
    chord: str = Field(
        ...,
        min_length=1,
        description="Chord symbol, e.g. 'Gmaj7', 'Am7b5', 'Cdim7'.",
        examples=["Gmaj7"],
    )
    pattern: PatternName = Field(default=DEFAULT_ARPEGGIO.pattern)
    position: PositionName = Field(default=DEFAULT_ARPEGGIO.position)
    length: int = Field(
        default=DEFAULT_ARPEGGIO.length,
        ge=DEFAULT_LIMITS.min_length,
        le=DEFAULT_LIMITS.max_length,
        description="Number of notes (1–128).",
    )
    tempo: float = Field(
        default=DEFAULT_ARPEGGIO.tempo,
        ge=DEFAULT_LIMITS.min_tempo,
        le=DEFAULT_LIMITS.max_tempo,
        description="Tempo in BPM (30–300).",
    )
    subdivision: int = Field(
        default=DEFAULT_ARPEGGIO.subdivision,
        ge=DEFAULT_LIMITS.min_subdivision,
        le=DEFAULT_LIMITS.max_subdivision,
        description="Notes per beat (1–8).",
    )
    tuning: str = Field(
        default=DEFAULT_ARPEGGIO.tuning,
        description="Tuning preset key, e.g. 'standard-6', 'drop-d', 'standard-7'.",
    )
    strings: list[str] | None = Field(
        default=None,
        description="Custom open strings, lowest first (4-8), e.g. ['D2', 'A2', 'D3', ...]. "
        "Overrides tuning.",
        examples=[["D2", "A2", "D3", "G3", "B3", "E4"]],
    )
    spelling: SpellingPolicy = Field(default=DEFAULT_ARPEGGIO.spelling)
    scale: str | None = Field(
        default=None,
        description="Arpeggiate this scale from the key instead of the chord tones.",
    )

    @field_validator("key")
    @classmethod
    def key_must_be_a_note(cls, v: str) -> str:
        """Reject keys that are not a note name instead of defaulting to C."""
        if parse_pitch_class(v) is None:
            raise ValueError(f"{v!r} is not a note name")
        return v

    @field_validator("tuning")
    @classmethod
    def tuning_must_exist(cls, v: str) -> str:
        """Validate the tuning against the preset table."""
        if v.strip().lower() not in {t.key for t in available_tunings()}:
            raise ValueError(f"unknown tuning {v!r}")
        return v

    @field_validator("strings")
    @classmethod
    def strings_must_form_a_tuning(cls, v: list[str] | None) -> list[str] | None:
        """Each entry must be a note with octave; 4 to 8 strings."""
        if v is not None:
            tuning_from_notes(v)
        return v

    @field_validator("scale")
    @classmethod
    def scale_must_exist(cls, v: str | None) -> str | None:
        """Validate the scale name when one is given."""
        if v is not None and get_scale(v) is None:
            raise ValueError(f"unknown scale {v!r}")
        return v


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------


class ArpeggioEventOut(BaseModel):
    """A single timed note."""

    time: float = Field(..., ge=0.0)
    duration: float = Field(..., gt=0.0)
    note: str
    string: int = Field(..., ge=1)
    fret: int = Field(..., ge=0)
    finger: int = Field(..., ge=0, le=4)


class ArpeggioMetaOut(BaseModel):
    """Echo of the request parameters."""

    key: str
    chord: str
    pattern: str
    position: str
    tempo: float
    subdivision: int
    tuning: str


class ArpeggioGenerateResponse(BaseModel):
    """Response body for POST /api/arpeggio/generate."""

    meta: ArpeggioMetaOut
    events: list[ArpeggioEventOut]
    ascii: str
    dropped: int = Field(
        default=0,
        ge=0,
        description="Notes left out because no playable position was found.",
    )


class ErrorResponse(BaseModel):
    """Error body for 400 / 404 / 500 responses."""

    error: str
