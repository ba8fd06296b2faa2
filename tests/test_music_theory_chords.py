"""
Tests for core/music_theory/chords.py — chord symbol parser.

Validates:
    - The reference fixtures: Gmaj7, Am7b5, Cdim7
    - Triad qualities: minor spellings, dim, aug, sus
    - Sevenths: dominant, major (maj7 / M7), half-diminished, diminished
    - Extensions reduce into the octave and do not imply a seventh
    - Token order does not matter; unknown tokens degrade to major
    - Never raises on arbitrary input
    - ParsedChord invariants
"""

import pytest

from core.music_theory.chords import (
    CHORD_RULES,
    chord_root_text,
    parse_chord,
    parse_chord_intervals,
)
from core.music_theory.types import CHORD_QUALITIES, ParsedChord

# ---------------------------------------------------------------------------
# Reference fixtures
# ---------------------------------------------------------------------------


class TestReferenceChords:
    def test_gmaj7(self):
        assert parse_chord_intervals("Gmaj7") == (0, 4, 7, 11)

    def test_am7b5(self):
        assert parse_chord_intervals("Am7b5") == (0, 3, 6, 10)

    def test_cdim7(self):
        assert parse_chord_intervals("Cdim7") == (0, 3, 6, 9)

    def test_unknown_suffix_is_major_triad(self):
        assert parse_chord_intervals("Xyz") == (0, 4, 7)


# ---------------------------------------------------------------------------
# Triads
# ---------------------------------------------------------------------------


class TestTriads:
    def test_bare_root_is_major(self):
        chord = parse_chord("C")
        assert chord.intervals == (0, 4, 7)
        assert chord.quality == "major"
        assert chord.seventh is None

    @pytest.mark.parametrize("symbol", ["Am", "Amin", "A-"])
    def test_minor_spellings(self, symbol):
        chord = parse_chord(symbol)
        assert chord.intervals == (0, 3, 7)
        assert chord.quality == "minor"

    @pytest.mark.parametrize("symbol", ["Bdim", "B°"])
    def test_diminished(self, symbol):
        assert parse_chord_intervals(symbol) == (0, 3, 6)

    @pytest.mark.parametrize("symbol", ["Caug", "C+"])
    def test_augmented(self, symbol):
        assert parse_chord_intervals(symbol) == (0, 4, 8)

    def test_sus2(self):
        assert parse_chord_intervals("Dsus2") == (0, 2, 7)

    @pytest.mark.parametrize("symbol", ["Dsus4", "Dsus"])
    def test_sus4(self, symbol):
        assert parse_chord_intervals(symbol) == (0, 5, 7)


# ---------------------------------------------------------------------------
# Sevenths and extensions
# ---------------------------------------------------------------------------


class TestSevenths:
    def test_dominant(self):
        chord = parse_chord("C7")
        assert chord.intervals == (0, 4, 7, 10)
        assert chord.seventh == "7"

    @pytest.mark.parametrize("symbol", ["Cm7", "Cmin7", "C-7"])
    def test_minor_seventh(self, symbol):
        assert parse_chord_intervals(symbol) == (0, 3, 7, 10)

    @pytest.mark.parametrize("symbol", ["Cmaj7", "CM7"])
    def test_major_seventh(self, symbol):
        chord = parse_chord(symbol)
        assert chord.intervals == (0, 4, 7, 11)
        assert chord.seventh == "maj7"

    def test_minor_major_seventh(self):
        assert parse_chord_intervals("CmM7") == (0, 3, 7, 11)

    @pytest.mark.parametrize("symbol", ["Bm7b5", "Bø", "Bø7"])
    def test_half_diminished(self, symbol):
        chord = parse_chord(symbol)
        assert chord.intervals == (0, 3, 6, 10)
        assert chord.quality == "half-diminished"
        assert chord.seventh == "m7b5"

    def test_diminished_seventh_symbol(self):
        chord = parse_chord("C°7")
        assert chord.intervals == (0, 3, 6, 9)
        assert chord.quality == "diminished"
        assert chord.seventh == "dim7"

    def test_maj_alone_adds_no_seventh(self):
        assert parse_chord_intervals("Cmaj") == (0, 4, 7)


class TestExtensions:
    def test_ninth_reduced_into_octave(self):
        assert parse_chord_intervals("Cadd9") == (0, 2, 4, 7)

    def test_ninth_does_not_imply_seventh(self):
        assert 10 not in parse_chord_intervals("C9")

    def test_dominant_thirteenth(self):
        assert parse_chord_intervals("G7 13") == (0, 4, 7, 9, 10)

    def test_minor_eleventh(self):
        assert parse_chord_intervals("Am7 11") == (0, 3, 5, 7, 10)


# ---------------------------------------------------------------------------
# Parser properties
# ---------------------------------------------------------------------------


class TestParserProperties:
    def test_token_order_irrelevant(self):
        assert parse_chord_intervals("C7sus4") == parse_chord_intervals("Csus47")

    def test_root_pitch_class(self):
        assert parse_chord("F#m7").root == 6
        assert parse_chord("Bbmaj7").root == 10

    def test_rootless_symbol(self):
        chord = parse_chord("dim7")
        assert chord.root is None
        assert chord.intervals == (0, 3, 6, 9)
        assert chord.pitch_classes == ()

    def test_pitch_classes(self):
        assert parse_chord("Gmaj7").pitch_classes == (7, 11, 2, 6)

    @pytest.mark.parametrize("symbol", ["", "   ", "H7", "m7b5b5b5", "°°°", "C/G", "7777", "🎸"])
    def test_never_raises(self, symbol):
        chord = parse_chord(symbol)
        assert chord.intervals[0] == 0

    def test_intervals_sorted_unique(self):
        for symbol in ("Cmaj7 9 11 13", "Am7b5", "Caug7", "Dsus2 9"):
            intervals = parse_chord_intervals(symbol)
            assert list(intervals) == sorted(set(intervals))

    def test_rule_labels_are_known_qualities(self):
        triad_labels = {r.label for r in CHORD_RULES if r.slot == "triad"}
        assert triad_labels <= CHORD_QUALITIES

    def test_chord_root_text(self):
        assert chord_root_text("Bbm7") == "Bb"
        assert chord_root_text("C#dim") == "C#"
        assert chord_root_text("m7") is None


class TestParsedChordValidation:
    def test_unknown_quality_raises(self):
        with pytest.raises(ValueError, match="Unknown chord quality"):
            ParsedChord(symbol="X", root=0, quality="weird", seventh=None, intervals=(0, 4, 7))

    def test_missing_root_interval_raises(self):
        with pytest.raises(ValueError, match="must contain 0"):
            ParsedChord(symbol="X", root=0, quality="major", seventh=None, intervals=(4, 7))

    def test_root_out_of_range_raises(self):
        with pytest.raises(ValueError, match="root must be in"):
            ParsedChord(symbol="X", root=12, quality="major", seventh=None, intervals=(0, 4, 7))
