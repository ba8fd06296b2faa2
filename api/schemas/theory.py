"""
api/schemas/theory.py — Pydantic schemas for the theory lookup endpoints.

Covers:
    /api/scales             — ScaleOut
    /api/scales/{root}/{scale} — ScaleInfoOut
    /api/scales/{root}/{scale}/chords — ProgressionResponse
    /api/chords             — ChordOut
    /api/tunings            — TuningOut
    /api/fretboard          — FretboardOut
    /api/progressions       — ProgressionRequest / ProgressionResponse
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

SpellingPolicy = Literal["auto", "sharps", "flats"]


class ScaleOut(BaseModel):
    """A scale table entry."""

    key: str
    name: str
    intervals: list[int]
    pattern: str
    category: str


class ScaleInfoOut(BaseModel):
    """A scale resolved against a root note."""

    label: str
    root: str
    scale: str
    notes: list[str]
    degrees: list[str]
    pattern: str


class ChordOut(BaseModel):
    """A parsed chord symbol."""

    symbol: str
    root: str | None
    quality: str
    seventh: str | None
    intervals: list[int]
    notes: list[str]


class TuningOut(BaseModel):
    """A tuning preset."""

    key: str
    name: str
    strings: int
    notes: list[str]
    open_midi: list[int]


class FretboardCellOut(BaseModel):
    """One fret of the note grid."""

    fret: int
    note: str
    interval: str
    is_root: bool
    is_in_scale: bool


class FretboardOut(BaseModel):
    """Note grid, one row per string, lowest string first."""

    root: str
    scale: str
    tuning: str
    frets: int
    strings: list[list[FretboardCellOut]]


class ProgressionRequest(BaseModel):
    """Request body for POST /api/progressions."""

    root: str = Field(..., min_length=1, examples=["G"])
    scale: str = Field(default="major", examples=["major", "dorian"])
    numerals: list[str] = Field(..., min_length=1, max_length=32, examples=[["I", "V", "vi", "IV"]])
    spelling: SpellingPolicy = "auto"

    @field_validator("numerals")
    @classmethod
    def numerals_must_not_be_blank(cls, v: list[str]) -> list[str]:
        """Reject blank numerals; unknown ones are skipped by the engine."""
        if any(not n.strip() for n in v):
            raise ValueError("numerals must be non-empty strings")
        return v


class ProgressionChordOut(BaseModel):
    """A chord in a progression or a harmonized scale."""

    symbol: str
    roman: str
    degree: int
    quality: str
    notes: list[str]


class ProgressionResponse(BaseModel):
    """Response body for POST /api/progressions and GET /api/scales/{root}/{scale}/chords."""

    root: str
    scale: str
    chords: list[ProgressionChordOut]
