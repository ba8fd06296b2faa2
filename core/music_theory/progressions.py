"""
core/music_theory/progressions.py — Diatonic chords in a key.

Harmonizing a scale (diatonic_chords) stacks every degree in thirds and
reads each triad's quality off the scale's own intervals: G major gives
G Am Bm C D Em F#°, A harmonic minor gives an augmented III+.

roman_to_chord goes the other way, building the chord a numeral names:

    upper case   major         I, IV, V
    lower case   minor         ii, iii, vi
    ° / o suffix diminished    vii°, iio
    + suffix     augmented     III+
    b prefix     borrowed, a semitone below the major-scale degree
                 (bVII in C is Bb regardless of the scale passed in)

Chord tones come from the chord parser, so a progression and an
arpeggio built from the same symbol always agree.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from core.music_theory.chords import parse_chord
from core.music_theory.notes import parse_pitch_class, spell_pitch_class
from core.music_theory.scales import SCALES, get_scale
from core.music_theory.types import DiatonicChord

_ROMAN_RE = re.compile(r"^(b?)(VII|VI|IV|V|III|II|I|vii|vi|iv|v|iii|ii|i)([°o+]?)$")

_ROMAN_DEGREES: dict[str, int] = {
    "i": 0,
    "ii": 1,
    "iii": 2,
    "iv": 3,
    "v": 4,
    "vi": 5,
    "vii": 6,
}

_QUALITY_SUFFIX: dict[str, str] = {
    "major": "",
    "minor": "m",
    "diminished": "°",
    "augmented": "+",
}


_NUMERALS: tuple[str, ...] = ("I", "II", "III", "IV", "V", "VI", "VII")

#: (third, fifth) above the chord root → triad quality
_TRIAD_QUALITIES: dict[tuple[int, int], str] = {
    (4, 7): "major",
    (3, 7): "minor",
    (3, 6): "diminished",
    (4, 8): "augmented",
}

_NUMERAL_MARK: dict[str, str] = {"diminished": "°", "augmented": "+"}


def _quality(numeral: str, mark: str) -> str:
    if mark in ("°", "o"):
        return "diminished"
    if mark == "+":
        return "augmented"
    return "minor" if numeral.islower() else "major"


def _build_chord(
    chord_root_pc: int,
    quality: str,
    roman: str,
    degree: int,
    tonic: str,
    policy: str,
) -> DiatonicChord:
    chord_root = spell_pitch_class(chord_root_pc, policy, tonic=tonic)
    symbol = chord_root + _QUALITY_SUFFIX[quality]
    parsed = parse_chord(symbol)
    notes = tuple(spell_pitch_class(pc, policy, tonic=tonic) for pc in parsed.pitch_classes)
    return DiatonicChord(symbol=symbol, roman=roman, degree=degree, quality=quality, notes=notes)


def roman_to_chord(
    roman: str,
    root: str,
    scale_name: str,
    policy: str = "auto",
) -> DiatonicChord | None:
    """Build the chord a roman numeral names in a key.

    Args:
        roman:      Roman numeral, e.g. "vi", "vii°", "bVII"
        root:       Key root as written, e.g. "G", "Eb"
        scale_name: A seven-note scale key or alias, e.g. "major", "dorian"
        policy:     Spelling policy for the chord symbol and notes

    Returns:
        DiatonicChord, or None if the numeral, root or scale is not usable
    """
    match = _ROMAN_RE.match(roman.strip())
    scale = get_scale(scale_name)
    root_pc = parse_pitch_class(root)
    if match is None or scale is None or root_pc is None or scale.degree_count != 7:
        return None

    flat, numeral, mark = match.groups()
    degree = _ROMAN_DEGREES[numeral.lower()]
    if flat:
        offset = SCALES["ionian"].intervals[degree] - 1
    else:
        offset = scale.intervals[degree]
    chord_root_pc = (root_pc + offset) % 12

    return _build_chord(
        chord_root_pc, _quality(numeral, mark), roman.strip(), degree, root, policy
    )


def build_progression(
    root: str,
    scale_name: str,
    romans: Sequence[str],
    policy: str = "auto",
) -> tuple[DiatonicChord, ...]:
    """Build a chord progression from roman numerals, skipping unknown ones.

    Example:
        build_progression("G", "major", ["I", "V", "vi", "IV"])
        → G, D, Em, C
    """
    chords = (roman_to_chord(r, root, scale_name, policy) for r in romans)
    return tuple(c for c in chords if c is not None)


def diatonic_chords(
    root: str,
    scale_name: str,
    policy: str = "auto",
) -> tuple[DiatonicChord, ...]:
    """Harmonize a seven-note scale: one triad per degree.

    Each triad stacks degrees d, d+2 and d+4 of the scale, so its quality
    comes from the scale itself rather than from a numeral's case.

    Args:
        root:       Key root as written, e.g. "G", "Bb"
        scale_name: A seven-note scale key or alias
        policy:     Spelling policy for chord symbols and notes

    Returns:
        Seven DiatonicChords in degree order, or () if the root or scale
        is unknown or the scale does not have seven degrees
    """
    scale = get_scale(scale_name)
    root_pc = parse_pitch_class(root)
    if scale is None or root_pc is None or scale.degree_count != 7:
        return ()

    intervals = scale.intervals
    chords = []
    for degree, offset in enumerate(intervals):
        third = (intervals[(degree + 2) % 7] - offset) % 12
        fifth = (intervals[(degree + 4) % 7] - offset) % 12
        quality = _TRIAD_QUALITIES.get((third, fifth), "minor" if third < 4 else "major")
        numeral = _NUMERALS[degree]
        if quality in ("minor", "diminished"):
            numeral = numeral.lower()
        numeral += _NUMERAL_MARK.get(quality, "")
        chords.append(_build_chord((root_pc + offset) % 12, quality, numeral, degree, root, policy))
    return tuple(chords)
