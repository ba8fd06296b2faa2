"""
core/music_theory/ — Pure music theory engine.

Exports:
    Types:        ScaleDefinition, ScaleInfo, ParsedChord, DiatonicChord
    Notes:        normalize_note, parse_pitch_class, note_to_pitch_class,
                  pitch_class_to_note, spell_pitch_class, InvalidNoteError
    Scales:       SCALES, scale_notes, interval_name, scale_info, available_scales
    Chords:       parse_chord, parse_chord_intervals, chord_root_text
    Progressions: roman_to_chord, build_progression, diatonic_chords
"""

from core.music_theory.chords import chord_root_text, parse_chord, parse_chord_intervals
from core.music_theory.notes import (
    NOTE_NAMES,
    InvalidNoteError,
    midi_to_note_name,
    normalize_note,
    note_name_to_midi,
    note_to_pitch_class,
    parse_pitch_class,
    pitch_class_to_note,
    spell_pitch_class,
)
from core.music_theory.progressions import build_progression, diatonic_chords, roman_to_chord
from core.music_theory.scales import (
    SCALES,
    available_scales,
    get_scale,
    interval_name,
    scale_info,
    scale_notes,
)
from core.music_theory.types import DiatonicChord, ParsedChord, ScaleDefinition, ScaleInfo

__all__ = [
    # Types
    "ScaleDefinition",
    "ScaleInfo",
    "ParsedChord",
    "DiatonicChord",
    # Notes
    "NOTE_NAMES",
    "InvalidNoteError",
    "normalize_note",
    "parse_pitch_class",
    "note_to_pitch_class",
    "pitch_class_to_note",
    "spell_pitch_class",
    "note_name_to_midi",
    "midi_to_note_name",
    # Scales
    "SCALES",
    "get_scale",
    "scale_notes",
    "interval_name",
    "scale_info",
    "available_scales",
    # Chords
    "parse_chord",
    "parse_chord_intervals",
    "chord_root_text",
    # Progressions
    "roman_to_chord",
    "build_progression",
    "diatonic_chords",
]
