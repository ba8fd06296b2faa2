"""
core/music_theory/chords.py — Chord symbol parser.

A chord symbol is split into a root (uppercase letter + optional
accidental) and a suffix. The suffix is tokenized with a single
longest-match regex and the token set is run through an ordered rule
table, one slot at a time:

    triad      first matching rule wins; no match → major (4, 7)
    seventh    first matching rule wins; no match → no seventh
    extension  every matching rule applies (9, 11, 13)

Because rules test membership in a token *set*, the result never depends
on the order tokens appear in the symbol. Unknown tokens are ignored, so
a wholly unrecognized suffix degrades to a major triad. The parser never
raises on any string input.

Supported forms (suffix, case-insensitive unless noted):
    m, min, -          minor
    dim, °             diminished triad
    dim7, °7           diminished seventh
    m7b5, ø, ø7        half-diminished seventh
    aug, +             augmented
    sus2, sus4, sus    suspended (third replaced)
    7                  minor seventh on top of the triad
    maj7, M7           major seventh ("M" is case-sensitive)
    9, 11, 13, add9    upper extensions, reduced into the octave
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass

from core.music_theory.notes import parse_pitch_class
from core.music_theory.types import ParsedChord

# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------

_ROOT_RE = re.compile(r"^([A-G][#b♯♭]?)(.*)$", re.DOTALL)

# Alternation order is the longest-match priority.
_TOKEN_RE = re.compile(
    r"maj7|maj|min|m7b5|dim7|dim|°7|°|ø7|ø|aug|sus2|sus4|sus|add|13|11|9|7|m|\+|-|.",
    re.DOTALL,
)

# Uppercase M not starting "Maj"/"Min" means major seventh family: CM7, mM7.
_UPPER_M_RE = re.compile(r"M(?![aAiI])")


def _tokenize(suffix: str) -> frozenset[str]:
    suffix = _UPPER_M_RE.sub("maj", suffix).lower()
    return frozenset(_TOKEN_RE.findall(suffix))


# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChordRule:
    """One (tokens → interval delta) rule.

    Attributes:
        slot:      "triad", "seventh" or "extension"
        label:     Quality or seventh label reported when the rule fires
        tokens:    The rule fires when any of these tokens is present
        intervals: Semitone offsets added when the rule fires
    """

    slot: str
    label: str
    tokens: frozenset[str]
    intervals: tuple[int, ...]


CHORD_RULES: tuple[ChordRule, ...] = (
    # Triad: half-diminished first so m7b5 never reads as minor
    ChordRule("triad", "half-diminished", frozenset({"m7b5", "ø", "ø7"}), (3, 6)),
    ChordRule("triad", "diminished", frozenset({"dim", "dim7", "°", "°7"}), (3, 6)),
    ChordRule("triad", "augmented", frozenset({"aug", "+"}), (4, 8)),
    ChordRule("triad", "suspended", frozenset({"sus2"}), (2, 7)),
    ChordRule("triad", "suspended", frozenset({"sus4", "sus"}), (5, 7)),
    ChordRule("triad", "minor", frozenset({"m", "min", "-"}), (3, 7)),
    # Seventh
    ChordRule("seventh", "maj7", frozenset({"maj7"}), (11,)),
    ChordRule("seventh", "m7b5", frozenset({"m7b5", "ø", "ø7"}), (6, 10)),
    ChordRule("seventh", "dim7", frozenset({"dim7", "°7"}), (6, 9)),
    ChordRule("seventh", "7", frozenset({"7"}), (10,)),
    # Extensions: 14, 17, 21 reduced mod 12
    ChordRule("extension", "9", frozenset({"9"}), (2,)),
    ChordRule("extension", "11", frozenset({"11"}), (5,)),
    ChordRule("extension", "13", frozenset({"13"}), (9,)),
)

_MAJOR_TRIAD: tuple[int, ...] = (4, 7)


def _first_match(slot: str, tokens: frozenset[str]) -> ChordRule | None:
    for rule in CHORD_RULES:
        if rule.slot == slot and rule.tokens & tokens:
            return rule
    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


@functools.lru_cache(maxsize=512)
def parse_chord(symbol: str) -> ParsedChord:
    """Parse a chord symbol into root, quality and interval set.

    Args:
        symbol: Chord symbol, e.g. "Gmaj7", "Am7b5", "C#m9", or a bare
                suffix such as "dim7" (root is then None)

    Returns:
        ParsedChord with sorted unique intervals (always containing 0)
    """
    text = symbol.strip() if isinstance(symbol, str) else ""
    match = _ROOT_RE.match(text)
    if match is not None:
        root_text, suffix = match.groups()
        root = parse_pitch_class(root_text)
    else:
        root, suffix = None, text

    tokens = _tokenize(suffix)
    intervals: set[int] = {0}

    triad = _first_match("triad", tokens)
    intervals.update(triad.intervals if triad else _MAJOR_TRIAD)

    seventh = _first_match("seventh", tokens)
    if seventh is not None:
        intervals.update(seventh.intervals)

    for rule in CHORD_RULES:
        if rule.slot == "extension" and rule.tokens & tokens:
            intervals.update(rule.intervals)

    return ParsedChord(
        symbol=symbol,
        root=root,
        quality=triad.label if triad else "major",
        seventh=seventh.label if seventh else None,
        intervals=tuple(sorted(i % 12 for i in intervals)),
    )


def parse_chord_intervals(symbol: str) -> tuple[int, ...]:
    """Return the sorted unique semitone offsets of a chord symbol.

    Examples:
        parse_chord_intervals("Gmaj7")  → (0, 4, 7, 11)
        parse_chord_intervals("Am7b5")  → (0, 3, 6, 10)
        parse_chord_intervals("Cdim7")  → (0, 3, 6, 9)
        parse_chord_intervals("Xyz")    → (0, 4, 7)
    """
    return parse_chord(symbol).intervals


def chord_root_text(symbol: str) -> str | None:
    """Return the root exactly as written in a chord symbol ("Bbm7" → "Bb").

    The chord lookup route spells the chord's notes from it; None when the
    symbol has no root.
    """
    match = _ROOT_RE.match(symbol.strip()) if isinstance(symbol, str) else None
    return match.group(1) if match else None
