"""
Tests for core/music_theory/progressions.py — diatonic chords in a key.

Validates:
    - Case of the numeral sets the quality; ° and + marks override it
    - Degrees follow the chosen mode, flat prefix borrows from major
    - Spelling follows the key (auto) or a forced policy
    - Unknown numerals and non-heptatonic scales yield None / are skipped
    - diatonic_chords: triad qualities read off the scale, numerals follow them
"""

import pytest

from core.music_theory.progressions import build_progression, diatonic_chords, roman_to_chord
from core.music_theory.types import DiatonicChord


class TestRomanToChord:
    def test_major_degree(self):
        chord = roman_to_chord("IV", "C", "major")
        assert chord.symbol == "F"
        assert chord.quality == "major"
        assert chord.degree == 3
        assert chord.notes == ("F", "A", "C")

    def test_minor_degree(self):
        chord = roman_to_chord("vi", "G", "major")
        assert chord.symbol == "Em"
        assert chord.notes == ("E", "G", "B")
        assert chord.roman == "vi"

    def test_diminished_mark(self):
        chord = roman_to_chord("vii°", "C", "major")
        assert chord.symbol == "B°"
        assert chord.quality == "diminished"
        assert chord.notes == ("B", "D", "F")

    def test_ascii_diminished_mark(self):
        assert roman_to_chord("viio", "C", "major").quality == "diminished"

    def test_augmented_mark(self):
        chord = roman_to_chord("III+", "A", "harmonic-minor")
        assert chord.symbol == "C+"
        assert chord.notes == ("C", "E", "G#")

    def test_mode_degrees(self):
        # IV of D dorian is G major
        assert roman_to_chord("IV", "D", "dorian").symbol == "G"

    def test_flat_prefix_borrows_from_major(self):
        chord = roman_to_chord("bVII", "C", "major", policy="flats")
        assert chord.symbol == "Bb"
        assert chord.notes == ("Bb", "D", "F")

    def test_flat_key_auto_spelling(self):
        chord = roman_to_chord("IV", "Eb", "major")
        assert chord.symbol == "Ab"
        assert chord.notes == ("Ab", "C", "Eb")

    @pytest.mark.parametrize("roman", ["VIII", "IIV", "", "x", "#IV"])
    def test_unknown_numeral(self, roman):
        assert roman_to_chord(roman, "C", "major") is None

    def test_pentatonic_scale_rejected(self):
        assert roman_to_chord("I", "C", "minor-pentatonic") is None

    def test_unknown_root_or_scale(self):
        assert roman_to_chord("I", "H", "major") is None
        assert roman_to_chord("I", "C", "bebop") is None


class TestBuildProgression:
    def test_pop_progression(self):
        chords = build_progression("G", "major", ["I", "V", "vi", "IV"])
        assert [c.symbol for c in chords] == ["G", "D", "Em", "C"]

    def test_minor_key(self):
        chords = build_progression("A", "minor", ["i", "iv", "v"])
        assert [c.symbol for c in chords] == ["Am", "Dm", "Em"]

    def test_unknown_numerals_skipped(self):
        chords = build_progression("C", "major", ["I", "nope", "V"])
        assert [c.roman for c in chords] == ["I", "V"]

    def test_empty(self):
        assert build_progression("C", "major", []) == ()


class TestDiatonicChordValidation:
    def test_empty_symbol_raises(self):
        with pytest.raises(ValueError, match="symbol must not be empty"):
            DiatonicChord(symbol="", roman="I", degree=0, quality="major", notes=())

    def test_degree_out_of_range_raises(self):
        with pytest.raises(ValueError, match="degree must be in"):
            DiatonicChord(symbol="C", roman="I", degree=7, quality="major", notes=())


class TestDiatonicChords:
    def test_major_key(self):
        chords = diatonic_chords("G", "major")
        assert [c.symbol for c in chords] == ["G", "Am", "Bm", "C", "D", "Em", "F#°"]
        assert [c.roman for c in chords] == ["I", "ii", "iii", "IV", "V", "vi", "vii°"]
        assert [c.degree for c in chords] == list(range(7))

    def test_harmonic_minor_has_augmented_third(self):
        chords = diatonic_chords("A", "harmonic-minor")
        assert [c.symbol for c in chords] == ["Am", "B°", "C+", "Dm", "E", "F", "G#°"]
        third = chords[2]
        assert third.roman == "III+"
        assert third.quality == "augmented"
        assert third.notes == ("C", "E", "G#")

    def test_mode_qualities(self):
        chords = diatonic_chords("D", "dorian")
        assert [c.quality for c in chords] == [
            "minor", "minor", "major", "major", "minor", "diminished", "major",
        ]

    def test_flat_key_spelling(self):
        chords = diatonic_chords("Bb", "major")
        assert chords[3].symbol == "Eb"
        assert chords[2].notes == ("D", "F", "A")

    def test_agrees_with_roman_numerals(self):
        for chord in diatonic_chords("E", "minor"):
            assert roman_to_chord(chord.roman, "E", "minor") == chord

    def test_non_heptatonic_scale_is_empty(self):
        assert diatonic_chords("A", "minor-pentatonic") == ()

    def test_unknown_root_or_scale_is_empty(self):
        assert diatonic_chords("H", "major") == ()
        assert diatonic_chords("C", "bebop") == ()
