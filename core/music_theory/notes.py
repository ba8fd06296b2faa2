"""
core/music_theory/notes.py — Pitch-class arithmetic and note spelling.

Pitch classes are plain ints in [0, 12). Equality is always numeric —
note names are only parsed on the way in and re-spelled on the way out,
so "A#" and "Bb" can never compare unequal by accident.

Exports:
    NOTE_NAMES               canonical sharp spelling for each pitch class
    FLAT_NAMES               flat spelling for each pitch class
    InvalidNoteError         raised by the fail-fast helpers

    normalize_note(text) → str | None
    parse_pitch_class(text) → int | None
    note_to_pitch_class(text) → int
    pitch_class_to_note(pc) → str
    spell_pitch_class(pc, policy, tonic) → str
    is_flat_key(tonic) → bool
    note_name_to_midi(name) → int
    midi_to_note_name(midi, policy, tonic) → str
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Chromatic spelling tables
# ---------------------------------------------------------------------------

NOTE_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

FLAT_NAMES: tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

_NATURALS: dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}

_ACCIDENTALS: dict[str, int] = {"": 0, "#": 1, "♯": 1, "b": -1, "♭": -1}

# Letter is case-insensitive; accidental is case-sensitive ("B" is never a flat).
_NOTE_RE = re.compile(r"^([A-Ga-g])([#b♯♭]?)\Z")
_MIDI_NAME_RE = re.compile(r"^([A-Ga-g][#b♯♭]?)(-?\d+)\Z")

#: Tonics whose keys are conventionally written with flats
FLAT_KEY_TONICS: frozenset[str] = frozenset({"F", "Bb", "Eb", "Ab", "Db", "Gb", "Cb"})

SPELLING_POLICIES: frozenset[str] = frozenset({"auto", "sharps", "flats"})


class InvalidNoteError(ValueError):
    """Raised when a string is not a recognizable note name."""


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_pitch_class(text: str) -> int | None:
    """Return the pitch class of a note name, or None if it is not one.

    Theoretical spellings fold onto their sounding pitch: Cb → B, Fb → E,
    E# → F, B# → C.

    Args:
        text: Note name, e.g. "G", "bb", "F♯", "Cb"

    Returns:
        Pitch class 0–11, or None for anything that is not a letter A–G
        followed by at most one accidental.
    """
    if not isinstance(text, str):
        return None
    match = _NOTE_RE.match(text)
    if match is None:
        return None
    letter, accidental = match.groups()
    return (_NATURALS[letter.upper()] + _ACCIDENTALS[accidental]) % 12


def normalize_note(text: str) -> str | None:
    """Normalize a note name to its canonical sharp spelling.

    Idempotent: ``normalize_note(normalize_note(x)) == normalize_note(x)``
    for every valid x.

    Args:
        text: Note name, e.g. "Bb", "c#", "E#"

    Returns:
        Canonical name from NOTE_NAMES, e.g. "A#", "C#", "F" — or None
        if the input is not a valid note.
    """
    pc = parse_pitch_class(text)
    if pc is None:
        return None
    return NOTE_NAMES[pc]


def note_to_pitch_class(text: str) -> int:
    """Return the pitch class (0–11) of a note name, failing fast.

    Raises:
        InvalidNoteError: If text is not a recognizable note name
    """
    pc = parse_pitch_class(text)
    if pc is None:
        raise InvalidNoteError(f"Unknown note {text!r}. Expected a letter A-G plus optional #/b")
    return pc


def pitch_class_to_note(pc: int) -> str:
    """Return the canonical (sharp) note name for a pitch class."""
    return NOTE_NAMES[pc % 12]


# ---------------------------------------------------------------------------
# Display spelling
# ---------------------------------------------------------------------------


def is_flat_key(tonic: str | None) -> bool:
    """Return True if a tonic, as written, implies flat spelling.

    A tonic written with a flat ("Bb", "E♭") is a flat key, as is F.
    Sharp-written tonics are not, even when enharmonic with a flat key.
    """
    if not tonic:
        return False
    match = _NOTE_RE.match(tonic)
    if match is None:
        return False
    letter, accidental = match.groups()
    if accidental in ("b", "♭"):
        return True
    return f"{letter.upper()}{accidental}" in FLAT_KEY_TONICS


def spell_pitch_class(pc: int, policy: str = "auto", tonic: str | None = None) -> str:
    """Spell a pitch class for display.

    Args:
        pc:     Pitch class (taken mod 12)
        policy: "sharps", "flats", or "auto" (flats when tonic is a flat key)
        tonic:  Tonic as written by the caller; only consulted for "auto"

    Returns:
        Note name, e.g. "A#" or "Bb"

    Raises:
        ValueError: If policy is unknown
    """
    if policy not in SPELLING_POLICIES:
        raise ValueError(f"Unknown spelling policy {policy!r}. Valid: {sorted(SPELLING_POLICIES)}")
    use_flats = policy == "flats" or (policy == "auto" and is_flat_key(tonic))
    return FLAT_NAMES[pc % 12] if use_flats else NOTE_NAMES[pc % 12]


# ---------------------------------------------------------------------------
# Scientific pitch notation (C4 = MIDI 60)
# ---------------------------------------------------------------------------


def note_name_to_midi(name: str) -> int:
    """Convert a note name with octave to a MIDI number.

    Args:
        name: e.g. "E2", "F#3", "Bb-1"

    Returns:
        MIDI note number

    Raises:
        InvalidNoteError: If the name or octave cannot be parsed
    """
    match = _MIDI_NAME_RE.match(name.strip()) if isinstance(name, str) else None
    if match is None:
        raise InvalidNoteError(f"Cannot parse note name {name!r}. Expected e.g. 'E2' or 'F#3'")
    note, octave = match.groups()
    pc = note_to_pitch_class(note)
    # Cb4 sounds as B3 and B#3 as C4: the letter's octave is what was written.
    letter_pc = _NATURALS[note[0].upper()]
    return (int(octave) + 1) * 12 + letter_pc + (pc - letter_pc + 6) % 12 - 6


def midi_to_note_name(midi: int, policy: str = "sharps", tonic: str | None = None) -> str:
    """Convert a MIDI number to a note name with octave, e.g. 55 → "G3"."""
    octave = midi // 12 - 1
    return f"{spell_pitch_class(midi % 12, policy, tonic)}{octave}"
